"""Database related helpers."""

from __future__ import annotations

from .session import DocumentStore

__all__ = ["DocumentStore"]
