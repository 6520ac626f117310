"""Live barcode capture from a USB camera using OpenCV."""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any, Callable

from .config import ScannerConfig

logger = logging.getLogger(__name__)

DecodedCallback = Callable[[str], None]
ErrorCallback = Callable[[str], None]
ClosedCallback = Callable[[], None]


class CaptureDevice(ABC):
    """A capture session that emits decoded barcode text asynchronously."""

    @abstractmethod
    def start(
        self,
        config: ScannerConfig,
        on_decoded: DecodedCallback,
        on_error: ErrorCallback,
        on_closed: ClosedCallback | None = None,
    ) -> None:
        """Begin capturing. Decoded text is passed to ``on_decoded``.

        ``on_closed`` is called if capture ends without ``release``.
        """
        ...

    @abstractmethod
    def release(self) -> None:
        """Stop capturing and free the device. Safe to call repeatedly."""
        ...


def _import_cv2():
    try:
        import cv2
    except ImportError:
        raise ImportError(
            "opencv-python is required: pip install 'dietscan[camera]'"
        ) from None
    return cv2


class BarcodeCamera(CaptureDevice):
    """Poll frames from a camera and decode barcodes with OpenCV.

    Frames are read in a worker thread from an asyncio task, so ``start``
    must be called with a running event loop.
    """

    def __init__(self) -> None:
        self._cap: Any = None
        self._detector: Any = None
        self._task: asyncio.Task | None = None
        self._stopping = False
        self._released = False

    @property
    def active(self) -> bool:
        return self._cap is not None and not self._stopping

    def start(
        self,
        config: ScannerConfig,
        on_decoded: DecodedCallback,
        on_error: ErrorCallback,
        on_closed: ClosedCallback | None = None,
    ) -> None:
        if self._cap is not None:
            raise RuntimeError("Camera is already capturing")

        cv2 = _import_cv2()
        cap = cv2.VideoCapture(config.camera_index)
        if not cap.isOpened():
            cap.release()
            raise RuntimeError(
                f"Could not open camera {config.camera_index}. "
                f"Check that it is connected."
            )

        self._cap = cap
        self._detector = cv2.barcode.BarcodeDetector()
        self._stopping = False
        self._released = False
        self._task = asyncio.get_running_loop().create_task(
            self._poll(config, on_decoded, on_error, on_closed)
        )
        logger.info("Camera %d capturing at %d fps", config.camera_index, config.fps)

    def release(self) -> None:
        if self._cap is None or self._stopping:
            return
        self._stopping = True
        # The poll loop frees the handle once its current frame read ends.
        if self._task is None or self._task.done():
            self._close()

    async def wait_closed(self) -> None:
        """Wait until the polling task has exited."""
        if self._task is not None:
            await self._task

    async def _poll(
        self,
        config: ScannerConfig,
        on_decoded: DecodedCallback,
        on_error: ErrorCallback,
        on_closed: ClosedCallback | None,
    ) -> None:
        interval = 1.0 / config.fps if config.fps > 0 else 0.0
        try:
            while not self._stopping:
                ok, frame = await asyncio.to_thread(self._cap.read)
                if self._stopping:
                    break
                if not ok or frame is None:
                    on_error("Could not read a frame from the camera")
                else:
                    try:
                        text = self._decode(frame, config.box_size)
                    except Exception as e:
                        on_error(f"Could not decode frame: {e}")
                        text = ""
                    if text:
                        on_decoded(text)
                if not self._stopping:
                    await asyncio.sleep(interval)
        except Exception:
            logger.exception("Camera polling stopped unexpectedly")
        finally:
            unexpected = not self._stopping
            self._close()
            if unexpected and on_closed is not None:
                on_closed()

    def _decode(self, frame: Any, box_size: int) -> str:
        region = _crop_center(frame, box_size)
        text, _points, _straight = self._detector.detectAndDecode(region)
        return text or ""

    def _close(self) -> None:
        if self._released:
            return
        self._released = True
        if self._cap is not None:
            self._cap.release()
        self._cap = None
        logger.debug("Camera released")

    @staticmethod
    def list_cameras(max_check: int = 10) -> list[int]:
        """List available USB camera indices by probing."""
        cv2 = _import_cv2()

        available: list[int] = []
        for i in range(max_check):
            cap = cv2.VideoCapture(i)
            if cap.isOpened():
                available.append(i)
                cap.release()
        return available


def _crop_center(frame: Any, box_size: int) -> Any:
    """Crop a centered square scanning region, or return the whole frame."""
    if box_size <= 0:
        return frame
    height, width = frame.shape[:2]
    if box_size >= height or box_size >= width:
        return frame
    top = (height - box_size) // 2
    left = (width - box_size) // 2
    return frame[top:top + box_size, left:left + box_size]
