"""Configuration management for txn-query."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from txn_query.exceptions import ConfigurationError
from txn_query.logging import LOG_FORMATS


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format_type: str = "standard"


@dataclass
class OutputConfig:
    """Output configuration."""

    output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False


@dataclass
class GeneratorConfig:
    """Configuration for synthetic dataset generation."""

    num_transactions: int = 100
    num_clients: int = 20
    issue_rate: float = 0.3
    solved_rate: float = 0.5
    locale: str = "en_US"


@dataclass
class TxnQueryConfig:
    """Main configuration for txn-query."""

    data_path: Path = field(default_factory=lambda: Path("transactions.json"))
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    seed: int | None = None

    @classmethod
    def from_env(cls) -> "TxnQueryConfig":
        """Create config from environment variables."""
        log_format = os.getenv("LOG_FORMAT", "standard").lower()
        if log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"LOG_FORMAT must be one of {', '.join(LOG_FORMATS)}, got {log_format!r}"
            )

        logging_config = LoggingConfig(
            level=os.getenv("LOG_LEVEL", "INFO"),
            format_type=log_format,
        )

        output = OutputConfig(
            output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )

        generator = GeneratorConfig(
            num_transactions=_env_int("GEN_TRANSACTIONS", 100),
            num_clients=_env_int("GEN_CLIENTS", 20),
        )

        seed = os.getenv("SEED")

        return cls(
            data_path=Path(os.getenv("TXN_DATA_PATH", "transactions.json")),
            logging=logging_config,
            output=output,
            generator=generator,
            seed=_parse_int("SEED", seed) if seed else None,
        )


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    return _parse_int(name, value)


def _parse_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}") from exc
