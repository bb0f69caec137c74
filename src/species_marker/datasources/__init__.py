"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, media types, error translation
    ├── models.py         # Pydantic models for API responses
    └── {feature}.py      # Fetch functions (one per endpoint/concept)

Only PhyloPic is wired in today (see ``phylopic/``).
"""
