"""Mock spooler backend for testing."""

from typing import Any

from printr.exceptions import SpoolerError
from printr.printing.base import DocumentInfo, SpoolerBackend

OPERATIONS = (
    "open_printer",
    "start_doc",
    "start_page",
    "write",
    "end_page",
    "end_doc",
    "close_printer",
)


class MockBackend(SpoolerBackend):
    """Mock spooler backend for testing.

    Records every spooler call in order for verification in tests.
    Succeeds unless configured otherwise.

    Example:
        backend = MockBackend(fail_on={"start_page"})
        runner = PrintJobRunner(backend)
        assert runner.run("Test Printer", io.BytesIO(b"x")) is PrintOutcome.START_PAGE_FAILED
        assert backend.operations == [
            "open_printer", "start_doc", "start_page", "end_doc", "close_printer",
        ]
    """

    name = "mock"

    def __init__(
        self,
        printers: list[str] | None = None,
        fail_on: set[str] | frozenset[str] = frozenset(),
        short_write_by: int = 0,
    ):
        """Initialize mock backend.

        Args:
            printers: Printer names open_printer() accepts; None accepts any name
            fail_on: Operation names that raise SpoolerError
            short_write_by: Bytes to subtract from the count write() reports
        """
        unknown = set(fail_on) - set(OPERATIONS)
        if unknown:
            raise ValueError(f"Unknown spooler operation(s): {', '.join(sorted(unknown))}")
        self.printers = printers
        self.fail_on = frozenset(fail_on)
        self.short_write_by = short_write_by
        self.calls: list[tuple[str, tuple]] = []
        self.writes: list[bytes] = []
        self._next_job_id = 1

    @classmethod
    def is_available(cls) -> bool:
        """Mock backend is always available."""
        return True

    @property
    def operations(self) -> list[str]:
        """Names of the recorded calls, in order."""
        return [op for op, _ in self.calls]

    @property
    def data(self) -> bytes:
        """Everything written so far, concatenated."""
        return b"".join(self.writes)

    def _record(self, operation: str, *args) -> None:
        self.calls.append((operation, args))
        if operation in self.fail_on:
            raise SpoolerError(f"{operation} failed", context={"operation": operation})

    def open_printer(self, printer: str) -> Any:
        self._record("open_printer", printer)
        if self.printers is not None and printer not in self.printers:
            raise SpoolerError(
                f"Unknown printer: {printer}",
                context={"operation": "open_printer", "printer": printer},
            )
        return f"mock:{printer}"

    def start_doc(self, handle: Any, doc_info: DocumentInfo) -> int:
        self._record("start_doc", handle, doc_info)
        job_id = self._next_job_id
        self._next_job_id += 1
        return job_id

    def start_page(self, handle: Any) -> None:
        self._record("start_page", handle)

    def write(self, handle: Any, data: bytes | memoryview) -> int:
        chunk = bytes(data)
        self._record("write", handle, len(chunk))
        self.writes.append(chunk)
        return max(len(chunk) - self.short_write_by, 0)

    def end_page(self, handle: Any) -> None:
        self._record("end_page", handle)

    def end_doc(self, handle: Any) -> None:
        self._record("end_doc", handle)

    def close_printer(self, handle: Any) -> None:
        self._record("close_printer", handle)

    def reset(self) -> None:
        """Clear recorded calls and written data."""
        self.calls.clear()
        self.writes.clear()
