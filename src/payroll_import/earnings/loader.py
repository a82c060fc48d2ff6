#!/usr/bin/env python3
"""
Earnings CSV Loader

Reads an operator's earnings CSV into EarningsRecord domain models.

The format is deliberately simple: one header line, then comma-separated rows
with no quoting or escaping. Parsing is fail-soft per line; a malformed row is
logged and dropped without affecting its neighbours.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from .models import MIN_FIELDS, RECORD_TYPES, EarningsLayout, EarningsRecord

logger = logging.getLogger(__name__)


def parse_earnings_lines(lines: Iterable[str], layout: EarningsLayout) -> list[EarningsRecord]:
    """
    Parse CSV lines (header included) into earnings records.

    Args:
        lines: Raw lines; the first one is treated as the header
        layout: Column layout to expect

    Returns:
        Records for every accepted row, in file order. Line numbers are
        1-based and count the header.
    """
    record_type = RECORD_TYPES[layout]
    records: list[EarningsRecord] = []

    for line_number, line in enumerate(lines, start=1):
        if line_number == 1 or not line.strip():
            continue

        fields = [part.strip() for part in line.rstrip("\r\n").split(",")]
        if len(fields) < MIN_FIELDS:
            logger.warning("Line %d has invalid format: %s", line_number, line.strip())
            continue

        try:
            records.append(record_type.from_csv_fields(fields, line_number))
        except ValueError as e:
            logger.warning("Line %d could not be parsed (%s): %s", line_number, e, line.strip())

    return records


def load_earnings(csv_path: str | Path, layout: EarningsLayout) -> list[EarningsRecord]:
    """
    Load earnings records from a CSV file.

    Args:
        csv_path: Path to the CSV file
        layout: Column layout to expect

    Returns:
        Parsed records; empty if the file cannot be read

    Example:
        >>> records = load_earnings("march_commissions.csv", EarningsLayout.AMOUNT)
        >>> for record in records:
        ...     print(record.describe())
    """
    csv_path = Path(csv_path)
    logger.info("Reading earnings data from %s", csv_path)

    try:
        with open(csv_path, encoding="utf-8-sig") as f:
            records = parse_earnings_lines(f, layout)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Error reading CSV %s: %s", csv_path, e)
        return []

    logger.info("Successfully read %d earnings records", len(records))
    return records
