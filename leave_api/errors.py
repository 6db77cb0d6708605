"""Domain errors raised by handlers and serialized by the app error handler.

Each error knows its HTTP status and how to render itself, so every handler
fails the same way:

    raise NotFound('Employee not found.')      -> 404 {"message": ...}
    raise ValidationError(msg, data=payload)   -> 400 {"message": ..., "data": ...}
    raise StoreError(exc)                      -> 400 {"errors": [...]}
"""
from __future__ import annotations
from typing import Any, Dict, Optional


class ApiError(Exception):
    status = 400

    def __init__(self, message: str, data: Any = None):
        super().__init__(message)
        self.message = message
        self.data = data

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {'message': self.message}
        if self.data is not None:
            payload['data'] = self.data
        return payload


class NotFound(ApiError):
    status = 404


class ValidationError(ApiError):
    status = 400


class ReferentialError(ApiError):
    status = 400


class StoreError(ApiError):
    """Any persistence failure surfaced to the client as a 400."""
    status = 400

    def __init__(self, cause: Exception):
        super().__init__(str(cause))
        self.cause = cause

    def to_payload(self) -> Dict[str, Any]:
        errors: Optional[Any] = getattr(self.cause, 'errors', None)
        if errors is None:
            orig = getattr(self.cause, 'orig', None)
            errors = [str(orig if orig is not None else self.cause)]
        return {'errors': errors}


__all__ = ['ApiError', 'NotFound', 'ValidationError', 'ReferentialError', 'StoreError']
