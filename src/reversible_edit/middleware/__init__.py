"""Middleware around history steps."""

from __future__ import annotations

from .logging import LoggingMiddleware
from .pipeline import build_pipeline, handles

__all__ = [
    "LoggingMiddleware",
    "build_pipeline",
    "handles",
]
