"""File system utilities."""

import re
from pathlib import Path

from lexilookup.exceptions import SetupError

SUPPORTED_INPUT_EXTENSIONS = (".txt", ".csv")


def read_inputs_file(path: Path) -> list[str]:
    """Read lookup inputs from a text or CSV file.

    Text files hold one item per line. CSV files are split on commas and
    newlines. Blank entries and lines starting with # are skipped.

    Args:
        path: Path to the input file

    Returns:
        Raw input strings in file order

    Raises:
        SetupError: If the file is missing, unsupported, or unreadable
    """
    if not path.exists():
        raise SetupError(f"Input file not found: {path}")

    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_INPUT_EXTENSIONS:
        raise SetupError(
            f"Unsupported input file type: {suffix or path.name} "
            f"(expected one of {', '.join(SUPPORTED_INPUT_EXTENSIONS)})"
        )

    try:
        content = path.read_text(encoding="utf-8")
    except Exception as e:
        raise SetupError(f"Error reading input file {path}: {e}") from e

    separator = r"[,\n]+" if suffix == ".csv" else r"\n+"

    inputs = []
    for entry in re.split(separator, content):
        stripped = entry.strip()
        if stripped and not stripped.startswith("#"):
            inputs.append(stripped)
    return inputs
