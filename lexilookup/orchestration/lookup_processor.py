"""Orchestrator for a single lookup request."""

import logging
import time

from lexilookup.config import LexiLookupConfig
from lexilookup.exceptions import CallerValidationError
from lexilookup.interfaces import ProgressCallback
from lexilookup.models import LookupOptions, LookupResponse
from lexilookup.services import (
    BatchScheduler,
    ProviderChain,
    ResultAggregator,
    classify,
    validate_request,
)


class LookupProcessor:
    """Orchestrate validation, classification, batching and aggregation."""

    def __init__(
        self,
        config: LexiLookupConfig,
        scheduler: BatchScheduler | None = None,
        aggregator: ResultAggregator | None = None,
        logger: logging.Logger | None = None,
    ):
        """Initialize the lookup processor.

        Args:
            config: Configuration
            scheduler: Batch scheduler (built from config if omitted)
            aggregator: Result aggregator
            logger: Logger shared with the default chain and scheduler
        """
        self.config = config
        self._logger = logger if logger is not None else logging.getLogger(__name__)
        self.scheduler = scheduler or BatchScheduler(
            ProviderChain.from_config(config, logger=logger), config, logger=logger
        )
        self.aggregator = aggregator or ResultAggregator()

    def process(
        self,
        inputs: object,
        options: object,
        progress_callback: ProgressCallback | None = None,
    ) -> dict:
        """Handle a request in wire form.

        Caller-validation failures are returned as an error body and no
        lookups are started.

        Args:
            inputs: Raw inputs (list of strings)
            options: Raw options mapping
            progress_callback: Optional per-batch progress callback

        Returns:
            Response body: the LookupResponse dict or {success: false, error: {...}}
        """
        try:
            sanitized, parsed_options = validate_request(inputs, options, self.config.max_inputs)
        except CallerValidationError as e:
            self._logger.warning(f"Rejected lookup request: {e.code}: {e.message}")
            return e.to_dict()

        return self.process_items(sanitized, parsed_options, progress_callback).to_dict()

    def process_items(
        self,
        inputs: list[str],
        options: LookupOptions,
        progress_callback: ProgressCallback | None = None,
    ) -> LookupResponse:
        """Look up already-validated inputs.

        This orchestrates all services to:
        1. Classify and deduplicate inputs
        2. Resolve items in rate-limited batches
        3. Restore input order and compute statistics

        Args:
            inputs: Non-empty input strings
            options: Parsed options
            progress_callback: Optional per-batch progress callback

        Returns:
            LookupResponse with one result per deduplicated input
        """
        start_time = time.time()

        items = classify(inputs)
        self._logger.info(f"Classified {len(inputs)} inputs into {len(items)} unique items")

        raw_results = self.scheduler.run(items, options, progress_callback)
        response = self.aggregator.finalize(raw_results, len(items), time.time() - start_time)

        self._logger.info(
            f"Lookup complete: {response.processed_inputs} found, "
            f"{response.failed_inputs} failed in {response.processing_time}"
        )
        return response
