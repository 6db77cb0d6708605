"""Modular pieces for the offline OpenAPI builder.

This package holds the constants, docstring scanning helpers and the model
introspector that `leave_api/openapi_builder.py` composes.
"""

__all__ = [
    "constants",
    "helpers",
    "introspect",
]
