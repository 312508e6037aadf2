"""Presentation layer - User interfaces."""
from .cli import LookupCommand, describe_error

__all__ = [
    "LookupCommand",
    "describe_error",
]
