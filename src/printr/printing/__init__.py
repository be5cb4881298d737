"""Printing package with spooler backend abstraction."""

from printr.printing.base import DocumentInfo, SpoolerBackend
from printr.printing.win32 import Win32Backend
from printr.printing.mock import MockBackend
from printr.printing.factory import BACKEND_NAMES, get_default_backend, get_backend

__all__ = [
    "BACKEND_NAMES",
    "DocumentInfo",
    "SpoolerBackend",
    "Win32Backend",
    "MockBackend",
    "get_default_backend",
    "get_backend",
]
