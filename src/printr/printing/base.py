"""Abstract base class for spooler backends."""

from abc import ABC, abstractmethod
from typing import Any

# (document name, output file, datatype), the DOC_INFO_1 triple
DocumentInfo = tuple[str, str | None, str]


class SpoolerBackend(ABC):
    """Abstract base class for print spooler backends.

    A backend exposes the individual spooler calls a raw print job is made
    of. Each call either succeeds or raises SpoolerError; the print job
    runner decides what a failure means and how far to unwind.

    Example:
        backend = get_default_backend()
        handle = backend.open_printer("Label Printer")
        backend.start_doc(handle, ("Job", None, "RAW"))
        backend.start_page(handle)
        backend.write(handle, b"^XA^XZ")
        backend.end_page(handle)
        backend.end_doc(handle)
        backend.close_printer(handle)
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Backend identifier (e.g., 'win32', 'mock')."""

    @classmethod
    @abstractmethod
    def is_available(cls) -> bool:
        """Check if this backend is available on the current platform.

        Returns:
            True if the backend can be used
        """

    @abstractmethod
    def open_printer(self, printer: str) -> Any:
        """Open the named printer.

        Returns:
            Opaque printer handle passed to every other call

        Raises:
            SpoolerError: If the printer cannot be opened
        """

    @abstractmethod
    def start_doc(self, handle: Any, doc_info: DocumentInfo) -> int:
        """Register a document job with the spooler.

        Returns:
            Spooler job id

        Raises:
            SpoolerError: If the job cannot be started
        """

    @abstractmethod
    def start_page(self, handle: Any) -> None:
        """Begin a page within the current document."""

    @abstractmethod
    def write(self, handle: Any, data: bytes | memoryview) -> int:
        """Send data to the printer.

        Returns:
            Number of bytes the spooler accepted

        Raises:
            SpoolerError: If the write fails outright
        """

    @abstractmethod
    def end_page(self, handle: Any) -> None:
        """End the current page."""

    @abstractmethod
    def end_doc(self, handle: Any) -> None:
        """End the current document job."""

    @abstractmethod
    def close_printer(self, handle: Any) -> None:
        """Release the printer handle."""
