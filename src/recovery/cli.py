"""Command line entry point: восстановление секрета из JSON документа."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from src.core.log import configure_logging
from src.core.math.exact_fraction import FractionError
from src.recovery.config import DEFAULT_INPUT_PATH, DEFAULT_LOG_LEVEL, RecoveryConfig
from src.recovery.document import ShareDocumentError
from src.recovery.pipeline import recover_secret_from_file
from src.recovery.report import render_failure, render_report

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_DOCUMENT_ERROR = 1
EXIT_ARITHMETIC_ERROR = 3


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polysecret",
        description="Recover f(0) of a hidden polynomial from base-encoded shares",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=DEFAULT_INPUT_PATH,
        help=f"Share document (JSON), default: {DEFAULT_INPUT_PATH}",
    )
    parser.add_argument(
        "--k",
        dest="threshold",
        type=_positive_int,
        default=None,
        help="Override the threshold k from the document's 'keys' object",
    )
    parser.add_argument(
        "--no-schema",
        action="store_true",
        help="Skip JSON Schema validation of the document",
    )
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Returns:
        0 — секрет восстановлен (целый или нецелый)
        1 — ошибка документа / файла
        3 — нарушение арифметического инварианта (например, дубликаты x)
    """
    args = build_parser().parse_args(argv)

    config = RecoveryConfig(
        input_path=Path(args.input),
        threshold_override=args.threshold,
        validate_schema=not args.no_schema,
        log_level=args.log_level,
    )
    configure_logging(config.log_level)

    logger.debug("Recovery config: %s", config)

    try:
        result = recover_secret_from_file(config)
    except (ShareDocumentError, OSError) as e:
        print(render_failure(e), file=sys.stderr)
        return EXIT_DOCUMENT_ERROR
    except FractionError as e:
        print(render_failure(e), file=sys.stderr)
        return EXIT_ARITHMETIC_ERROR

    for line in render_report(result):
        print(line)

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
