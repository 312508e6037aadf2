"""Presentation CLI exports."""
from .lookup_command import LookupCommand, build_parser
from .errors import ErrorView, describe_error

__all__ = [
    "LookupCommand",
    "build_parser",
    "ErrorView",
    "describe_error",
]
