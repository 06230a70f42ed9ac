#!/usr/bin/env python3
"""Generate a sample transaction dataset.

Writes a ``transactions.json`` file in the format read by the loader, for
manual exploration with the ``txn-query`` command.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from txn_query.config import TxnQueryConfig
from txn_query.engine import QueryEngine
from txn_query.generators import TransactionGenerator
from txn_query.logging import get_logger, setup_logging
from txn_query.sinks import JsonFileSink

logger = get_logger(__name__)


def main() -> None:
    """Main entry point."""
    config = TxnQueryConfig.from_env()

    parser = argparse.ArgumentParser(description="Generate a sample transaction dataset")
    parser.add_argument(
        "--count",
        type=int,
        default=config.generator.num_transactions,
        help=f"Number of transactions (default: {config.generator.num_transactions})",
    )
    parser.add_argument(
        "--clients",
        type=int,
        default=config.generator.num_clients,
        help=f"Number of distinct clients (default: {config.generator.num_clients})",
    )
    parser.add_argument("--seed", type=int, default=config.seed if config.seed is not None else 42)
    parser.add_argument("--output", type=Path, default=config.output.output_dir)
    parser.add_argument("--pretty", action="store_true", default=config.output.pretty_json)
    args = parser.parse_args()

    setup_logging(config.logging.level, config.logging.format_type)

    logger.info("Generating %d transactions between %d clients (seed=%d)", args.count, args.clients, args.seed)
    generator = TransactionGenerator(
        seed=args.seed,
        num_clients=args.clients,
        issue_rate=config.generator.issue_rate,
        solved_rate=config.generator.solved_rate,
        locale=config.generator.locale,
    )
    transactions = list(generator.generate_batch(args.count))

    sink = JsonFileSink(args.output, pretty=args.pretty)
    sink.write(transactions)
    sink.close()

    summary = QueryEngine(transactions).summary()
    for key, value in summary.items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
