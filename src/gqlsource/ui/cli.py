from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from gqlsource.adapters.catalog_file import load_query_catalog
from gqlsource.app import created_node_ids_from_last_run, ingest_content
from gqlsource.config import ConfigurationError, configure_logging, get_ingest_settings

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--log-level",
        default="INFO",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Root log level (default: %(default)s)",
    )

    parser = argparse.ArgumentParser(description="Ingest remote GraphQL content into local nodes")
    subparsers = parser.add_subparsers(dest="command", required=True)

    ingest = subparsers.add_parser(
        "ingest", parents=[common], help="Fetch and materialize all content types"
    )
    ingest.add_argument(
        "--catalog",
        required=True,
        help="Path to the query catalog JSON produced by schema introspection",
    )
    ingest.add_argument(
        "--batch-size",
        type=int,
        default=None,
        help="Content types fetched concurrently (defaults to GQLSOURCE_CONCURRENT_DOWNLOAD or 50)",
    )
    ingest.add_argument(
        "--verbose",
        action="store_true",
        help="Report progress for every content type",
    )

    subparsers.add_parser(
        "created-nodes", parents=[common], help="Show how many nodes the last run created"
    )
    return parser.parse_args(list(argv))


def _run_ingest(args: argparse.Namespace) -> None:
    catalog = load_query_catalog(args.catalog)
    settings = get_ingest_settings()
    if args.batch_size is not None:
        if args.batch_size < 1:
            raise ConfigurationError("--batch-size must be >= 1")
        settings = replace(settings, batch_size=args.batch_size)
    if args.verbose:
        settings = replace(settings, verbose=True)

    result = ingest_content(catalog=catalog, settings=settings)
    print(  # noqa: T201
        f"Created {len(result.created_node_ids)} nodes from {result.fetched} records "
        f"across {result.content_types} content types "
        f"({len(result.expanded_node_ids)} referenced media items)"
    )


def _run_created_nodes() -> None:
    node_ids = created_node_ids_from_last_run()
    print(f"{len(node_ids)} nodes created by the last run")  # noqa: T201


def main(argv: Sequence[str] | None = None) -> None:
    """Command line entry point."""
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    configure_logging(level=getattr(logging, args.log_level))

    try:
        if args.command == "ingest":
            _run_ingest(args)
        elif args.command == "created-nodes":
            _run_created_nodes()
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)  # noqa: T201
        sys.exit(2)
    except Exception as exc:  # noqa: BLE001
        log.debug("Ingestion failed", exc_info=exc)
        print(f"Error: {exc}", file=sys.stderr)  # noqa: T201
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    print("\nClosed by user (Ctrl+C)")  # noqa: T201
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
