"""Asynchronous client for the Proxy6 proxy service API: parameters, responses, values and errors."""

__version__ = "0.1.0"

__all__ = ["client", "deserializer", "error", "method", "params", "response", "value_object"]