"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants, request/error handling
    └── {feature}.py      # Fetch functions (one per endpoint)

Fetch functions return raw response dicts (what the store caches). Callers
validate them into ``weather_dashboard.schemas`` models before rendering.
"""
