"""CLI command for looking up a list of inputs."""

import json
import logging
from pathlib import Path

from dotenv import load_dotenv

from lexilookup.config import load_config_from_env
from lexilookup.exceptions import CallerValidationError, LexiLookupException
from lexilookup.orchestration import LookupProcessor
from lexilookup.presenters import ConsolePresenter, ConsoleProgressCallback
from lexilookup.services import validate_request
from lexilookup.utils import read_inputs_file


def lookup_command(args) -> int:
    """Execute the lookup subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    presenter = ConsolePresenter()
    progress = ConsoleProgressCallback()

    presenter.show_info("lexilookup - Batch Dictionary Lookup")
    presenter.show_info("=" * 50)

    env_file = Path(args.env_file)
    if env_file.exists():
        load_dotenv(env_file, override=False)

    try:
        overrides = {}
        if args.batch_size is not None:
            overrides["batch_size"] = args.batch_size
        config = load_config_from_env(**overrides)
    except ValueError as e:
        presenter.show_error(f"Invalid configuration: {e}")
        return 1

    if not config.has_generative_credentials:
        presenter.show_warning("No generative API key set; sentences and native terms will fail")
    if not config.has_oxford_credentials:
        presenter.show_info("Oxford credentials not set; skipping CEFR-leveled definitions")

    try:
        inputs = list(args.inputs)
        if args.file:
            inputs.extend(read_inputs_file(Path(args.file)))

        options = {
            "meanings": args.meanings,
            "definitions": args.definitions,
            "synonyms": args.synonyms,
            "antonyms": args.antonyms,
            "related": args.related,
            "meaningDisplay": args.display,
            "cefrLevel": args.cefr,
        }

        sanitized, parsed_options = validate_request(inputs, options, config.max_inputs)

        processor = LookupProcessor(config)
        response = processor.process_items(sanitized, parsed_options, progress_callback=progress)
        presenter.show_lookup_response(response)

        if args.output:
            output_path = Path(args.output)
            output_path.write_text(
                json.dumps(response.to_dict(), ensure_ascii=False, indent=2), encoding="utf-8"
            )
            presenter.show_success(f"Results written to {output_path}")

        return 0 if response.processed_inputs > 0 else 1

    except CallerValidationError as e:
        presenter.show_error(f"{e.code}: {e.message}")
        return 1
    except LexiLookupException as e:
        presenter.show_error(f"Error: {e}")
        return 1
    except Exception as e:
        presenter.show_error(f"Unexpected error: {e}")
        return 1
