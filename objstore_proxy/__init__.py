"""Path parsing, request validation, bucket mapping and upstream routing for an object storage proxy."""

__version__ = "0.1.0"
__all__ = ["config", "parsers", "routing", "validator"]