"""Scan session state machine around a capture device."""

from __future__ import annotations

import asyncio
import enum
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Awaitable, Callable

from .camera import CaptureDevice
from .config import ScannerConfig
from .models import is_valid_barcode

logger = logging.getLogger(__name__)


class ScanState(enum.Enum):
    IDLE = "idle"
    SCANNING = "scanning"


class ScanSessionController:
    """Drive a capture device and forward the first valid barcode to lookup.

    The device is started once on entering SCANNING and released exactly
    once on leaving it, whether a barcode was decoded or ``stop`` was
    called.
    """

    def __init__(
        self,
        capture: CaptureDevice,
        lookup: Callable[[str], Awaitable[Any]],
        config: ScannerConfig | None = None,
    ) -> None:
        self._capture = capture
        self._lookup = lookup
        self._config = config or ScannerConfig()
        self._state = ScanState.IDLE
        self.lookup_task: asyncio.Task | None = None

    @property
    def state(self) -> ScanState:
        return self._state

    @property
    def scanning(self) -> bool:
        return self._state is ScanState.SCANNING

    def start(self) -> None:
        """Enter SCANNING and start the capture device."""
        if self._state is ScanState.SCANNING:
            raise RuntimeError("Scan session already running")

        self._capture.start(
            self._config, self.handle_decoded, self.handle_error, self.handle_closed
        )
        self._state = ScanState.SCANNING
        logger.info("Scan session started")

    def stop(self) -> None:
        """Leave SCANNING without a lookup. No-op when idle."""
        if self._state is ScanState.SCANNING:
            self._finish()
            logger.info("Scan session stopped")

    def handle_decoded(self, text: str) -> None:
        """Callback for decoded text emitted by the capture device."""
        if self._state is not ScanState.SCANNING:
            return

        if not is_valid_barcode(text):
            logger.info("Ignoring non-numeric scan: %r", text)
            return

        self._finish()
        logger.info("Scanned barcode %s", text)
        self.lookup_task = asyncio.get_running_loop().create_task(
            self._lookup(text)
        )
        self.lookup_task.add_done_callback(_log_lookup_failure)

    def handle_error(self, message: str) -> None:
        """Callback for non-fatal capture warnings."""
        logger.debug("Capture warning: %s", message)

    def handle_closed(self) -> None:
        """Callback for a capture device that stopped on its own."""
        if self._state is ScanState.SCANNING:
            logger.warning("Capture ended unexpectedly; scan session stopped")
            self._finish()

    async def wait_for_lookup(self) -> Any:
        """Await the lookup started by the last decoded barcode, if any."""
        if self.lookup_task is None:
            return None
        return await self.lookup_task

    @asynccontextmanager
    async def session(self) -> AsyncIterator[ScanSessionController]:
        """Start scanning and always stop on exit."""
        self.start()
        try:
            yield self
        finally:
            self.stop()

    def _finish(self) -> None:
        self._state = ScanState.IDLE
        self._capture.release()


def _log_lookup_failure(task: asyncio.Task) -> None:
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.warning("Lookup for scanned barcode failed: %s", exc)
