"""Command-line entry point for running queries over a dataset file."""

import argparse
import sys
from pathlib import Path
from typing import Any, Callable

from txn_query.config import TxnQueryConfig
from txn_query.engine import QueryEngine
from txn_query.exceptions import TxnQueryError
from txn_query.logging import LOG_FORMATS, get_logger, setup_logging
from txn_query.sinks import ConsoleSink

logger = get_logger(__name__)

# Queries that take no argument
SIMPLE_QUERIES: dict[str, Callable[[QueryEngine], Any]] = {
    "total": QueryEngine.total_amount,
    "max": QueryEngine.max_amount,
    "unique-clients": QueryEngine.count_unique_clients,
    "unique-senders": QueryEngine.count_unique_senders,
    "by-beneficiary": QueryEngine.transactions_by_beneficiary,
    "grouped-by-beneficiary": QueryEngine.transactions_grouped_by_beneficiary,
    "unsolved-issues": QueryEngine.unsolved_issue_ids,
    "solved-messages": QueryEngine.solved_issue_messages,
    "summary": QueryEngine.summary,
}

# Queries that take a client name
NAME_QUERIES: dict[str, Callable[[QueryEngine, str], Any]] = {
    "total-sent-by": QueryEngine.total_amount_sent_by,
    "total-received-by": QueryEngine.total_amount_received_by,
    "open-issue": QueryEngine.has_open_compliance_issue,
}


def build_parser(config: TxnQueryConfig) -> argparse.ArgumentParser:
    """Build the argument parser, using ``config`` for defaults."""
    parser = argparse.ArgumentParser(
        prog="txn-query",
        description="Run analytical queries over a transaction dataset",
    )
    parser.add_argument(
        "--data",
        type=Path,
        default=config.data_path,
        help=f"Dataset JSON file (default: {config.data_path})",
    )
    parser.add_argument("--log-level", default=config.logging.level, help="Log level")
    parser.add_argument(
        "--log-format",
        choices=LOG_FORMATS,
        default=config.logging.format_type,
        help="Log output format",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        default=config.output.pretty_json,
        help="Pretty-print JSON results",
    )

    subparsers = parser.add_subparsers(dest="query", required=True, metavar="QUERY")

    for name, query in SIMPLE_QUERIES.items():
        subparsers.add_parser(name, help=_first_line(query.__doc__))

    for name, query in NAME_QUERIES.items():
        sub = subparsers.add_parser(name, help=_first_line(query.__doc__))
        sub.add_argument("name", help="Client full name (exact, case-sensitive)")

    top = subparsers.add_parser("top", help="Transactions with the highest amount")
    top.add_argument("--n", type=int, default=3, help="Number of transactions (default: 3)")

    top_sender = subparsers.add_parser("top-sender", help="Most active sender")
    top_sender.add_argument(
        "--by",
        choices=("frequency", "amount"),
        default="frequency",
        help="Rank by transaction count or by total amount sent",
    )

    return parser


def run_query(engine: QueryEngine, args: argparse.Namespace) -> Any:
    """Run the query selected on the command line."""
    if args.query in SIMPLE_QUERIES:
        return SIMPLE_QUERIES[args.query](engine)
    if args.query in NAME_QUERIES:
        return NAME_QUERIES[args.query](engine, args.name)
    if args.query == "top":
        return engine.top_n_by_amount(args.n)
    if args.query == "top-sender":
        if args.by == "amount":
            return engine.top_sender_by_total_amount()
        return engine.top_sender_by_frequency()
    raise ValueError(f"Unknown query: {args.query}")


def main(argv: list[str] | None = None) -> int:
    """Run the txn-query command.

    Returns
    -------
    int
        Process exit code.
    """
    try:
        config = TxnQueryConfig.from_env()
    except TxnQueryError as exc:
        print(f"txn-query: {exc}", file=sys.stderr)
        return 1

    args = build_parser(config).parse_args(argv)
    setup_logging(args.log_level, args.log_format)

    try:
        engine = QueryEngine.from_file(args.data)
        result = run_query(engine, args)
    except TxnQueryError as exc:
        logger.error("%s", exc)
        return 1

    logger.debug("Query %s finished", args.query)
    ConsoleSink(pretty=args.pretty).write_result(result)
    return 0


def _first_line(doc: str | None) -> str:
    return doc.strip().splitlines()[0] if doc else ""


if __name__ == "__main__":
    sys.exit(main())
