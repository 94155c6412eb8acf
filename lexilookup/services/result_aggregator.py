"""Final ordering and statistics for a lookup request."""

from lexilookup.models import LookupResponse, LookupResult

from .input_classifier import type_stats


class ResultAggregator:
    """Restore input order and summarize results (stateless service)."""

    def finalize(
        self,
        raw_results: list[LookupResult],
        total_input_count: int,
        elapsed: float,
    ) -> LookupResponse:
        """Build the response for a finished request.

        Concurrent batches do not complete in order, so this is where
        ``input_index`` order is restored.

        Args:
            raw_results: Results in any order
            total_input_count: Number of deduplicated inputs
            elapsed: Seconds spent processing

        Returns:
            LookupResponse with ordered data and summary counts
        """
        ordered = sorted(raw_results, key=lambda result: result.input_index)
        processed = sum(1 for result in ordered if result.success)

        return LookupResponse(
            data=ordered,
            total_inputs=total_input_count,
            processed_inputs=processed,
            failed_inputs=len(ordered) - processed,
            type_stats=type_stats(ordered),
            elapsed_time=elapsed,
        )
