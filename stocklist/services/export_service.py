from __future__ import annotations

import csv
import logging
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import TextIO

from stocklist.errors import OutputFileError
from stocklist.schemas.quote import QuoteSchema
from stocklist.utils.validators import to_text

logger = logging.getLogger(__name__)

OUTPUT_PATH = "stocklist.csv"
HEADERS = ["Symbol", "Company", "Price", "Change %"]


def quote_row(quote: QuoteSchema) -> list[str]:
    return [quote.symbol, quote.name, to_text(quote.price), to_text(quote.percent_change)]


def format_quote_line(key: str, quote: QuoteSchema) -> str:
    return f"{quote.name} ({key}): ${to_text(quote.price)} ({to_text(quote.percent_change)}%)"


def write_quotes_csv(
    quotes: Mapping[str, QuoteSchema],
    path: str | Path = OUTPUT_PATH,
    out: TextIO | None = None,
) -> int:
    """Write quotes to a fresh CSV file and echo each one to ``out``.

    Rows follow the mapping's iteration order and end with a bare newline.
    Returns the number of rows written.
    """
    if out is None:
        out = sys.stdout
    lines: list[str] = []
    try:
        with open(path, "w", newline="", encoding="utf-8") as handle:
            writer = csv.writer(handle, lineterminator="\n")
            writer.writerow(HEADERS)
            for key, quote in quotes.items():
                lines.append(format_quote_line(key, quote))
                writer.writerow(quote_row(quote))
    except OSError as exc:
        raise OutputFileError(f"error creating the file {path}: {exc}") from exc

    for line in lines:
        print(line, file=out)
    print(f"Successfully processed {len(quotes)} stocks", file=out)
    logger.info("Wrote %d rows to %s", len(quotes), path)
    return len(quotes)
