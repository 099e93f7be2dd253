"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # Column names, formats, remote fetch
    ├── models.py         # Dataclasses for parsed rows
    └── loader.py         # Parse functions (text/rows -> models)

Currently one source: ``temperature/`` reads the daily max/min table.

Loaders only parse and coerce. They do not filter or aggregate; invalid
rows are passed on marked (``date=None``) and the analysis layer drops them.
"""
