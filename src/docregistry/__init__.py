"""docregistry - access-controlled document registry."""

__version__ = "0.1.0"
