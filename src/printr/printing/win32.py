"""Windows spooler backend built on pywin32."""

from typing import Any

from printr.constants import DOC_INFO_LEVEL
from printr.exceptions import SpoolerError
from printr.logging_config import get_logger
from printr.printing.base import DocumentInfo, SpoolerBackend

logger = get_logger(__name__)


class Win32Backend(SpoolerBackend):
    """Send raw jobs through the Windows print spooler (winspool).

    Every pywin32 failure (pywintypes.error) is reported as SpoolerError
    with the failing operation in its context.
    """

    name = "win32"

    def __init__(self):
        try:
            import pywintypes
            import win32print
        except ImportError as e:
            raise SpoolerError(
                "win32print not available. Printing only works on Windows with pywin32 installed."
            ) from e
        self._win32print = win32print
        self._error = pywintypes.error
        self._printers: dict[int, str] = {}

    @classmethod
    def is_available(cls) -> bool:
        try:
            import win32print  # noqa: F401
        except ImportError:
            return False
        return True

    def _call(self, operation: str, printer: str | None, func, *args):
        try:
            return func(*args)
        except self._error as e:
            raise SpoolerError(
                f"{operation} failed: {e}",
                context={"operation": operation, "printer": printer},
            ) from e

    def _printer_of(self, handle: Any) -> str | None:
        return self._printers.get(id(handle))

    def open_printer(self, printer: str) -> Any:
        handle = self._call("OpenPrinter", printer, self._win32print.OpenPrinter, printer)
        self._printers[id(handle)] = printer
        logger.debug("Opened printer %s", printer)
        return handle

    def start_doc(self, handle: Any, doc_info: DocumentInfo) -> int:
        return self._call(
            "StartDocPrinter",
            self._printer_of(handle),
            self._win32print.StartDocPrinter,
            handle,
            DOC_INFO_LEVEL,
            doc_info,
        )

    def start_page(self, handle: Any) -> None:
        self._call(
            "StartPagePrinter",
            self._printer_of(handle),
            self._win32print.StartPagePrinter,
            handle,
        )

    def write(self, handle: Any, data: bytes | memoryview) -> int:
        return self._call(
            "WritePrinter",
            self._printer_of(handle),
            self._win32print.WritePrinter,
            handle,
            data,
        )

    def end_page(self, handle: Any) -> None:
        self._call(
            "EndPagePrinter",
            self._printer_of(handle),
            self._win32print.EndPagePrinter,
            handle,
        )

    def end_doc(self, handle: Any) -> None:
        self._call(
            "EndDocPrinter",
            self._printer_of(handle),
            self._win32print.EndDocPrinter,
            handle,
        )

    def close_printer(self, handle: Any) -> None:
        printer = self._printers.pop(id(handle), None)
        self._call("ClosePrinter", printer, self._win32print.ClosePrinter, handle)
