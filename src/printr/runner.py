"""Print job lifecycle and the buffered copy loop feeding the spooler."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, BinaryIO

from printr.constants import BUFFER_SIZE, DATATYPE_RAW, DOCUMENT_NAME, MAX_PRINTER_NAME_LENGTH
from printr.exceptions import SpoolerError
from printr.logging_config import get_logger
from printr.outcome import PrintOutcome
from printr.printing.base import DocumentInfo, SpoolerBackend

logger = get_logger(__name__)


class JobState(IntEnum):
    """How far a print job got. Teardown undoes every state above IDLE."""

    IDLE = 0
    PRINTER_OPEN = 1
    JOB_STARTED = 2
    PAGE_STARTED = 3


def truncate_printer_name(printer: str, max_length: int = MAX_PRINTER_NAME_LENGTH) -> str:
    """Clip a printer name to the length the spooler is handed."""
    if len(printer) <= max_length:
        return printer
    truncated = printer[:max_length]
    logger.debug("Printer name truncated to %d characters: %s", max_length, truncated)
    return truncated


class PrintJobRunner:
    """Send one input stream to a printer as a single-page raw job.

    The job goes through open printer -> start document -> start page, then
    copies the stream in chunks of at most ``buffer_size`` bytes. Whatever
    state was reached is unwound in reverse (end page, end document, close
    printer) before the outcome is returned. Spooler and read failures are
    reported as a PrintOutcome, never raised.

    Args:
        backend: Spooler backend performing the actual calls
        buffer_size: Capacity of the transfer buffer
        document_name: Job label shown in the print queue
    """

    def __init__(
        self,
        backend: SpoolerBackend,
        buffer_size: int = BUFFER_SIZE,
        document_name: str = DOCUMENT_NAME,
    ):
        if buffer_size < 1:
            raise ValueError("buffer_size must be >= 1")
        self.backend = backend
        self.buffer_size = buffer_size
        self.document_name = document_name

    @property
    def doc_info(self) -> DocumentInfo:
        return (self.document_name, None, DATATYPE_RAW)

    def run(self, printer: str, stream: BinaryIO) -> PrintOutcome:
        """Print everything readable from ``stream`` on ``printer``.

        The stream is read but neither closed nor rewound.
        """
        printer = truncate_printer_name(printer)
        state = JobState.IDLE
        handle = None

        try:
            try:
                handle = self.backend.open_printer(printer)
            except SpoolerError as e:
                logger.debug("%s", e)
                return PrintOutcome.OPEN_PRINTER_FAILED
            state = JobState.PRINTER_OPEN

            try:
                job_id = self.backend.start_doc(handle, self.doc_info)
            except SpoolerError as e:
                logger.debug("%s", e)
                return PrintOutcome.START_JOB_FAILED
            state = JobState.JOB_STARTED
            logger.debug("Started job %s on %s", job_id, printer)

            try:
                self.backend.start_page(handle)
            except SpoolerError as e:
                logger.debug("%s", e)
                return PrintOutcome.START_PAGE_FAILED
            state = JobState.PAGE_STARTED

            return self._copy(handle, printer, stream)
        finally:
            self._teardown(handle, state)

    def _copy(self, handle: Any, printer: str, stream: BinaryIO) -> PrintOutcome:
        buffer = bytearray(self.buffer_size)
        total = 0
        chunks = 0

        with memoryview(buffer) as view:
            while True:
                try:
                    count = stream.readinto(buffer)
                except (OSError, ValueError) as e:
                    logger.debug("Read failed after %d bytes: %s", total, e)
                    return PrintOutcome.FILE_READ_FAILED

                # A zero-byte read ends the job, even if the stream is not at EOF
                if not count:
                    break

                try:
                    accepted = self.backend.write(handle, view[:count])
                except SpoolerError as e:
                    logger.debug("%s", e)
                    return PrintOutcome.WRITE_DATA_FAILED

                if accepted != count:
                    logger.debug("Spooler accepted %d of %d bytes", accepted, count)
                    return PrintOutcome.PARTIAL_WRITE_FAILED

                total += count
                chunks += 1
                logger.debug("Wrote chunk %d (%d bytes)", chunks, count)

        logger.info("Sent %d bytes to %s in %d chunk(s)", total, printer, chunks)
        return PrintOutcome.OK

    def _teardown(self, handle: Any, state: JobState) -> None:
        steps = (
            (JobState.PAGE_STARTED, self.backend.end_page),
            (JobState.JOB_STARTED, self.backend.end_doc),
            (JobState.PRINTER_OPEN, self.backend.close_printer),
        )
        for required, release in steps:
            if state < required:
                continue
            try:
                release(handle)
            except SpoolerError as e:
                # Outcome is already decided; later releases still run
                logger.warning("%s", e)
