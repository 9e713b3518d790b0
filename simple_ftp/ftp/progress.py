"""Upload progress reporting for SimpleFtp.

Provides the UploadProgress event value and the ProgressTracker that
decides when an event is raised while a stream is being copied.
"""

from dataclasses import dataclass
from typing import Callable, Optional


# Default number of bytes between progress events (1MB)
DEFAULT_PROGRESS_THRESHOLD = 1024 * 1024


@dataclass(frozen=True)
class UploadProgress:
    """Progress information raised during a stream upload."""
    event_id: int
    total_bytes_uploaded: int
    current_bytes_uploaded: int
    total_source_bytes: int

    @property
    def percent(self) -> float:
        """Upload progress as percentage (0-100)."""
        if self.total_source_bytes == 0:
            return 0.0
        return (self.total_bytes_uploaded / self.total_source_bytes) * 100.0


# Type alias for progress callback
ProgressCallback = Callable[[UploadProgress], None]


class ProgressTracker:
    """
    Accumulates copied bytes for one upload and raises progress events.

    An event is raised once the bytes copied since the previous event reach
    the threshold, and always once the final byte of the source is copied.
    Event ids start at 1 for every tracker, so a new tracker is created
    per upload call.
    """

    def __init__(
        self,
        total_source_bytes: int,
        threshold: int = DEFAULT_PROGRESS_THRESHOLD,
        on_progress: Optional[ProgressCallback] = None
    ):
        """
        Initialize the tracker.

        Args:
            total_source_bytes: Number of bytes that will be copied
            threshold: Bytes to accumulate before an event is raised
            on_progress: Callback receiving each UploadProgress
        """
        self._total_source_bytes = total_source_bytes
        self._threshold = threshold
        self._on_progress = on_progress
        self._event_id = 0
        self._total_copied = 0
        self._current_copied = 0

    @property
    def total_copied(self) -> int:
        """Cumulative bytes recorded so far."""
        return self._total_copied

    @property
    def events_raised(self) -> int:
        """Number of events raised so far."""
        return self._event_id

    @property
    def is_complete(self) -> bool:
        """True once every source byte has been recorded."""
        return self._total_copied >= self._total_source_bytes

    def record(self, bytes_copied: int) -> Optional[UploadProgress]:
        """
        Record a copied chunk and raise an event if one is due.

        Args:
            bytes_copied: Size of the chunk just written

        Returns:
            The UploadProgress raised, or None
        """
        self._total_copied += bytes_copied

        if self._on_progress is None:
            return None

        self._current_copied += bytes_copied

        # Partial report or final report
        if (self._current_copied >= self._threshold
                or self._total_copied == self._total_source_bytes):
            self._event_id += 1
            progress = UploadProgress(
                event_id=self._event_id,
                total_bytes_uploaded=self._total_copied,
                current_bytes_uploaded=self._current_copied,
                total_source_bytes=self._total_source_bytes
            )
            self._current_copied = 0
            self._on_progress(progress)
            return progress

        return None
