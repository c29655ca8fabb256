"""Route building, path templates, parameter documentation and request/response wrappers for RESTful web services."""

__version__ = "0.1.0"