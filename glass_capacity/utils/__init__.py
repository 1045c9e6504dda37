"""Shared numeric helpers."""

from .numeric import safe_divide, ceil_with_tolerance

__all__ = ["safe_divide", "ceil_with_tolerance"]
