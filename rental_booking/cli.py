"""
Command-line check of a booking form JSON document.

Validates a file the same way the form does and prints either the
normalized API payload or the field errors.

Usage:
    Full booking:   rental-booking-check booking.json
    In progress:    rental-booking-check booking.json --partial
    Single step:    python -m rental_booking.cli booking.json --step payment
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from rental_booking.logging_context import set_form_session_id
from rental_booking.schemas.step_schema import BookingStep
from rental_booking.validation import (
    validate_partial_rental_booking,
    validate_rental_booking,
    validate_step,
)

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Validate a rental booking form document."
    )
    parser.add_argument("path", type=str, help="Path to the booking JSON file.")
    parser.add_argument(
        "--partial",
        action="store_true",
        help="Treat the document as an in-progress form (all fields optional).",
    )
    parser.add_argument(
        "--step",
        choices=[step.value for step in BookingStep],
        default=None,
        help="Only validate the section edited on this step.",
    )
    parser.add_argument(
        "--session",
        type=str,
        default="CLI",
        help="Form session ID attached to log records.",
    )
    return parser


def main(argv=None) -> int:
    args = _build_parser().parse_args(argv)
    set_form_session_id(args.session)

    path = Path(args.path)
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Cannot read booking document %s: %s", path, exc)
        return 2

    if args.step:
        result = validate_step(args.step, document, partial=args.partial)
    elif args.partial:
        result = validate_partial_rental_booking(document)
    else:
        result = validate_rental_booking(document)

    if result.success:
        sys.stdout.write(json.dumps(result.data.to_payload(), indent=2) + "\n")
        return 0

    for error in result.errors:
        sys.stdout.write(f"{error.field or '<root>'}: {error.message}\n")
    return 1


if __name__ == "__main__":
    sys.exit(main())
