"""Progress callback protocol for progress reporting."""

from typing import Protocol

from lexilookup.models import BatchProgress


class ProgressCallback(Protocol):
    """Interface for progress reporting during batch lookups.

    This protocol allows the scheduler to report progress without knowing
    how it will be displayed (CLI output, a web socket, etc).
    """

    def on_start(self, total: int, description: str) -> None:
        """Called when an operation starts.

        Args:
            total: Total number of items to process
            description: Description of the operation
        """
        ...

    def on_progress(self, progress: BatchProgress) -> None:
        """Called once after each batch settles.

        Args:
            progress: Cumulative progress snapshot
        """
        ...

    def on_complete(self) -> None:
        """Called when an operation completes."""
        ...
