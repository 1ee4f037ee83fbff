"""External data source integrations.

Each subdirectory is one data source:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, request construction
    ├── models.py         # Dataclasses for API responses
    └── {feature}.py      # Fetch functions (one per endpoint/concept)
"""
