#!/usr/bin/env python3
"""
Configuration Management for the Cash Register

Handles environment-based configuration with sensible defaults and validation.
The denomination table and randomization policy can be overridden from a YAML
file named by CASH_REGISTER_DENOMINATIONS_FILE; everything else comes from
environment variables (optionally loaded from a .env file).
"""

import logging
import os
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml
from dotenv import load_dotenv

from .models import (
    DEFAULT_DENOMINATIONS,
    ConfigurationError,
    Denomination,
    DenominationTable,
    RandomizationPolicy,
)

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from ..change.engine import ChangeEngine

# Load environment variables from .env file
load_dotenv()

DEFAULT_MAX_UPLOAD_BYTES = 1024 * 1024


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class ApiConfig:
    """HTTP boundary settings."""

    max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES
    cors_origins: list = field(default_factory=lambda: ["*"])


@dataclass
class Config:
    """
    Main configuration class for the cash register.

    Loads configuration from environment variables with defaults matching the
    US coin set (dollar, quarter, dime, nickel, penny).
    """

    environment: Environment

    # Change calculation
    denominations: DenominationTable
    randomization: RandomizationPolicy
    currency_symbol: str = "$"
    seed: int | None = None

    api: ApiConfig = field(default_factory=ApiConfig)

    # Application settings
    debug: bool = False
    log_level: str = "INFO"
    denominations_file: Path | None = None

    @classmethod
    def from_environment(cls) -> "Config":
        """
        Create configuration from environment variables.

        Raises:
            ConfigurationError: If the denominations file or policy values are invalid
        """
        env = Environment(os.getenv("CASH_REGISTER_ENV", "development"))

        denominations = DEFAULT_DENOMINATIONS
        currency_symbol = "$"
        policy_values: dict[str, Any] = {}

        denominations_file = None
        file_setting = os.getenv("CASH_REGISTER_DENOMINATIONS_FILE")
        if file_setting:
            denominations_file = Path(file_setting).expanduser()
            file_data = load_denominations_file(denominations_file)
            denominations = file_data["denominations"]
            currency_symbol = file_data.get("currency_symbol") or currency_symbol
            policy_values.update(file_data.get("randomization", {}))
        currency_symbol = os.getenv("CASH_REGISTER_CURRENCY_SYMBOL", currency_symbol)

        # Environment variables win over file values
        for key, env_name, cast in [
            ("skip_probability", "CASH_REGISTER_SKIP_PROBABILITY", float),
            ("partial_probability", "CASH_REGISTER_PARTIAL_PROBABILITY", float),
            ("full_probability", "CASH_REGISTER_FULL_PROBABILITY", float),
            ("max_coins_per_denomination", "CASH_REGISTER_MAX_COINS", int),
        ]:
            raw = os.getenv(env_name)
            if raw is not None and raw.strip():
                try:
                    policy_values[key] = cast(raw)
                except ValueError as e:
                    raise ConfigurationError(f"Invalid {env_name}: {raw}") from e

        seed_raw = os.getenv("CASH_REGISTER_SEED", "").strip()
        try:
            seed = int(seed_raw) if seed_raw else None
        except ValueError as e:
            raise ConfigurationError(f"Invalid CASH_REGISTER_SEED: {seed_raw}") from e

        upload_raw = os.getenv("CASH_REGISTER_MAX_UPLOAD_BYTES", str(DEFAULT_MAX_UPLOAD_BYTES)).strip()
        try:
            max_upload_bytes = int(upload_raw)
        except ValueError as e:
            raise ConfigurationError(f"Invalid CASH_REGISTER_MAX_UPLOAD_BYTES: {upload_raw}") from e

        api = ApiConfig(
            max_upload_bytes=max_upload_bytes,
            cors_origins=_parse_list(os.getenv("CASH_REGISTER_CORS_ORIGINS", "*")),
        )

        return cls(
            environment=env,
            denominations=denominations,
            randomization=RandomizationPolicy(**policy_values),
            currency_symbol=currency_symbol,
            seed=seed,
            api=api,
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            denominations_file=denominations_file,
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        if self.denominations_file is not None and not self.denominations_file.exists():
            errors.append(f"denominations_file does not exist: {self.denominations_file}")

        if self.api.max_upload_bytes <= 0:
            errors.append("Maximum upload size must be positive")

        if not self.api.cors_origins:
            errors.append("At least one CORS origin is required")

        if self.log_level not in logging.getLevelNamesMapping():
            errors.append(f"Unknown log level: {self.log_level}")

        policy = self.randomization
        if policy.skip_probability + policy.partial_probability > 1:
            # Allowed, but the generous branch can never be chosen
            logger.warning(
                "skip_probability + partial_probability exceeds 1; generous counts are unreachable"
            )

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)

        # Configure format based on environment
        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

        # Reduce noise from the web server in production
        if self.environment == Environment.PRODUCTION:
            logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    def build_engine(self) -> "ChangeEngine":
        """Create a change engine from this configuration."""
        from ..change.engine import ChangeEngine

        return ChangeEngine(self.denominations, self.randomization)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a printable dictionary."""
        return {
            "environment": self.environment.value,
            "currency_symbol": self.currency_symbol,
            "denominations": [
                {"name": d.name, "value": str(d.value), "plural": d.plural} for d in self.denominations
            ],
            "sink": self.denominations.sink_name,
            "randomization": {
                "skip_probability": self.randomization.skip_probability,
                "partial_probability": self.randomization.partial_probability,
                "full_probability": self.randomization.full_probability,
                "max_coins_per_denomination": self.randomization.max_coins_per_denomination,
            },
            "seed": self.seed,
            "api": {
                "max_upload_bytes": self.api.max_upload_bytes,
                "cors_origins": list(self.api.cors_origins),
            },
            "debug": self.debug,
            "log_level": self.log_level,
            "denominations_file": str(self.denominations_file) if self.denominations_file else None,
        }


def load_denominations_file(path: Path) -> dict[str, Any]:
    """
    Load a denomination table (and optional policy) from YAML.

    Expected layout:

        currency_symbol: "$"
        sink: penny
        denominations:
          - {name: dollar, value: "1.00"}
          - {name: penny, value: "0.01", plural: pennies}
        randomization:
          skip_probability: 0.3

    Raises:
        ConfigurationError: If the file is missing, unreadable or malformed
    """
    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigurationError(f"Cannot read denominations file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in denominations file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Denominations file {path} must contain a mapping")

    entries = data.get("denominations")
    if not isinstance(entries, list) or not entries:
        raise ConfigurationError(f"Denominations file {path} must list at least one denomination")

    denominations = []
    for entry in entries:
        if not isinstance(entry, dict) or "name" not in entry or "value" not in entry:
            raise ConfigurationError(f"Each denomination needs a name and value, got {entry!r}")
        try:
            value = Decimal(str(entry["value"]))
        except InvalidOperation as e:
            raise ConfigurationError(f"Invalid value for denomination {entry['name']}: {entry['value']}") from e
        denominations.append(Denomination(name=str(entry["name"]), value=value, plural=entry.get("plural")))

    randomization = data.get("randomization") or {}
    if not isinstance(randomization, dict):
        raise ConfigurationError("randomization must be a mapping")
    unknown = set(randomization) - {
        "skip_probability",
        "partial_probability",
        "full_probability",
        "max_coins_per_denomination",
    }
    if unknown:
        raise ConfigurationError(f"Unknown randomization settings: {', '.join(sorted(unknown))}")

    return {
        "denominations": DenominationTable(tuple(denominations), sink_name=str(data.get("sink") or "")),
        "currency_symbol": data.get("currency_symbol"),
        "randomization": randomization,
    }


def _parse_list(value: str, delimiter: str = ",") -> list:
    """Parse comma-separated string into list, handling empty values."""
    if not value:
        return []
    return [item.strip() for item in value.split(delimiter) if item.strip()]


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        config = Config.from_environment()

        # Only a valid configuration is cached
        errors = config.validate()
        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        config.setup_logging()
        _config = config

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()
