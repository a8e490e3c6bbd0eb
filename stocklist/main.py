"""
Command line entry point.
Loads the API key, fetches quotes for the fixed ticker list and writes stocklist.csv.
"""
import logging
import sys
from pathlib import Path
from typing import Callable, Optional, Sequence, TextIO, Union

from stocklist.config.credentials import CONFIG_PATH, load_api_key
from stocklist.config.settings import settings
from stocklist.errors import StockListError
from stocklist.exchanges.base import QuoteAdapter
from stocklist.exchanges.twelvedata_adapter import TwelveDataAdapter
from stocklist.services.export_service import OUTPUT_PATH, write_quotes_csv
from stocklist.services.quote_service import QuoteService

logger = logging.getLogger(__name__)

TICKERS = [
    "IBM",
    "WMT",
    "MMM",
    "INTC",
    "AXP",
]


def run(
    config_path: Union[str, Path] = CONFIG_PATH,
    output_path: Union[str, Path] = OUTPUT_PATH,
    symbols: Sequence[str] = TICKERS,
    adapter_factory: Callable[[str], QuoteAdapter] = TwelveDataAdapter,
    out: Optional[TextIO] = None,
) -> int:
    """Run the pipeline once and return the number of quotes written."""
    api_key = load_api_key(config_path)
    service = QuoteService(adapter_factory(api_key))
    quotes = service.get_quotes(symbols)
    return write_quotes_csv(quotes, output_path, out=out)


def configure_logging():
    # stdout is reserved for the quote listing
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


def main():
    configure_logging()
    try:
        run()
    except StockListError as exc:
        logger.error("[%s] %s", exc.code, exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
