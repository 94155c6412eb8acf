"""Rate-limited batch execution of provider chain resolutions."""

import logging
import time
from concurrent.futures import ThreadPoolExecutor, as_completed

from lexilookup.config import LexiLookupConfig
from lexilookup.interfaces import ProgressCallback
from lexilookup.models import BatchProgress, LookupItem, LookupOptions, LookupResult, ResultSource

from .provider_chain import ProviderChain


def partition(items: list[LookupItem], batch_size: int) -> list[list[LookupItem]]:
    """Split items into contiguous chunks of at most ``batch_size``."""
    return [items[start : start + batch_size] for start in range(0, len(items), batch_size)]


class BatchScheduler:
    """Resolve items in fixed-size concurrent batches.

    At most ``batch_size`` resolutions are in flight at once, and batch N+1
    starts only after every item of batch N has settled.
    """

    def __init__(
        self,
        chain: ProviderChain,
        config: LexiLookupConfig,
        batch_size: int | None = None,
        inter_batch_delay: float | None = None,
        logger: logging.Logger | None = None,
    ):
        """Initialize the batch scheduler.

        Args:
            chain: Provider chain used to resolve each item
            config: Configuration supplying batch defaults
            batch_size: Override for config.batch_size
            inter_batch_delay: Override for config.inter_batch_delay
            logger: Logger for batch messages (defaults to the module logger)
        """
        self.chain = chain
        self.batch_size = batch_size if batch_size is not None else config.batch_size
        self.inter_batch_delay = (
            inter_batch_delay if inter_batch_delay is not None else config.inter_batch_delay
        )
        if self.batch_size < 1:
            raise ValueError(f"batch_size must be at least 1, got {self.batch_size}")
        self._logger = logger if logger is not None else logging.getLogger(__name__)

    def run(
        self,
        items: list[LookupItem],
        options: LookupOptions,
        progress_callback: ProgressCallback | None = None,
    ) -> list[LookupResult]:
        """Resolve all items batch by batch.

        Args:
            items: Classified items in input order
            options: Request options shared (read-only) by every resolution
            progress_callback: Optional callback notified after each batch

        Returns:
            One result per item (ordering is restored by the aggregator)
        """
        total = len(items)
        batches = partition(items, self.batch_size)
        # Pre-sized slots, written only by this coordinating thread
        results: list[LookupResult | None] = [None] * total

        if progress_callback:
            progress_callback.on_start(total, "Looking up items")

        processed = 0
        with ThreadPoolExecutor(max_workers=self.batch_size) as executor:
            for batch_number, batch in enumerate(batches, 1):
                self._logger.info(
                    f"Processing batch {batch_number}/{len(batches)} ({len(batch)} items)"
                )

                future_to_slot = {
                    executor.submit(self.chain.resolve, item, options): (processed + offset, item)
                    for offset, item in enumerate(batch)
                }

                for future in as_completed(future_to_slot):
                    slot, item = future_to_slot[future]
                    try:
                        results[slot] = future.result()
                    except Exception as e:
                        self._logger.error(f"[{item.original}] Lookup task crashed: {e}")
                        results[slot] = LookupResult.failure(
                            item, f"Unexpected error: {e}", source=ResultSource.ERROR
                        )

                processed += len(batch)

                if progress_callback:
                    progress_callback.on_progress(
                        BatchProgress(
                            processed=processed,
                            total=total,
                            percentage=(processed * 100 + total // 2) // total,
                        )
                    )

                if batch_number < len(batches) and self.inter_batch_delay > 0:
                    time.sleep(self.inter_batch_delay)

        if progress_callback:
            progress_callback.on_complete()

        return [result for result in results if result is not None]
