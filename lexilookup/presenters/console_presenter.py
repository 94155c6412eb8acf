"""Console presenter for CLI output."""

from lexilookup.models import BatchProgress, LookupResponse, LookupResult


class ConsolePresenter:
    """Present output to console (CLI implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        print(message)

    def show_success(self, message: str) -> None:
        """Display a success message."""
        print(f"[OK] {message}")

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        print(f"[WARN] {message}")

    def show_error(self, message: str) -> None:
        """Display an error message."""
        print(f"[ERROR] {message}")

    def show_result(self, result: LookupResult) -> None:
        """Display a single lookup result."""
        if not result.success:
            print(f"{result.input_index + 1:3d}. {result.word} [FAIL] {result.error}")
            return

        phonetic = f" {result.phonetic}" if result.phonetic else ""
        print(f"{result.input_index + 1:3d}. {result.word}{phonetic} ({result.source.value})")
        if result.translation:
            print(f"     = {result.translation}")
        for meaning in result.meanings:
            label = f"[{meaning.part_of_speech}] " if meaning.part_of_speech else ""
            if meaning.definition:
                print(f"     {label}{meaning.definition}")
            for example in meaning.examples:
                print(f"       e.g. {example}")
            if meaning.synonyms:
                print(f"       syn: {', '.join(meaning.synonyms)}")
            if meaning.antonyms:
                print(f"       ant: {', '.join(meaning.antonyms)}")
            if meaning.related:
                print(f"       rel: {', '.join(meaning.related)}")

    def show_lookup_response(self, response: LookupResponse) -> None:
        """Display all results followed by a summary."""
        print("\nResults:")
        print("=" * 60)
        for result in response.data:
            self.show_result(result)

        stats = response.type_stats
        print("\nLookup Complete:")
        print(f"  Total inputs: {response.total_inputs}")
        print(f"  Found: {response.processed_inputs}")
        print(f"  Failed: {response.failed_inputs}")
        print(
            f"  Kinds: {stats.get('words', 0)} words, {stats.get('phrases', 0)} phrases, "
            f"{stats.get('sentences', 0)} sentences, {stats.get('native', 0)} native"
        )
        print(f"  Time elapsed: {response.processing_time}")


class ConsoleProgressCallback:
    """Console implementation of progress callback."""

    def __init__(self):
        """Initialize the progress callback."""
        self.total = 0
        self.processed = 0
        self.description = ""

    def on_start(self, total: int, description: str) -> None:
        """Called when an operation starts."""
        self.total = total
        self.processed = 0
        self.description = description
        print(f"\n{description}...")

    def on_progress(self, progress: BatchProgress) -> None:
        """Called after each batch settles."""
        self.processed = progress.processed
        print(f"  [{progress.processed}/{progress.total}] {progress.percentage}%")

    def on_complete(self) -> None:
        """Called when an operation completes."""
        print(f"  [OK] Complete: {self.processed}/{self.total}")
