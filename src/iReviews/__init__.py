"""State engine behind the paginated reviews list."""

__version__ = "0.1.0"
