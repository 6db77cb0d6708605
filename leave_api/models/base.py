from __future__ import annotations
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def load_models():
    """Import every model module so the registry is complete, then return Base."""
    from . import employee, benefit, application  # noqa: F401
    return Base

__all__ = ["Base", "load_models"]
