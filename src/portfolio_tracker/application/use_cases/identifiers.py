"""Identifier helpers for records created by use cases."""

from uuid import uuid4


def new_record_id(prefix: str) -> str:
    """Return a unique identifier such as ``cont-3f2a9c1e``."""
    return f"{prefix}-{uuid4().hex[:12]}"


__all__ = ["new_record_id"]
