"""pg-schema-view - Explore PostgreSQL database schemas from the command line."""

__version__ = "1.0.0"
