"""A JSON HTTP service and library for managing tasks stored in a SQL database."""

__version__ = "0.1.0"