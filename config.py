"""Configuration management with environment variable support."""

import logging
import os
from dataclasses import dataclass, field


def _parse_seed() -> int | None:
    """Parse BLACKJACK_SEED environment variable."""
    raw = os.getenv("BLACKJACK_SEED", "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"BLACKJACK_SEED must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class GameConfig:
    """Round configuration."""

    seed: int | None = field(default_factory=_parse_seed)
    show_dealer_upcard: bool = field(
        default_factory=lambda: os.getenv("BLACKJACK_SHOW_DEALER_UPCARD", "true").lower() == "true"
    )


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING").upper())
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    def __post_init__(self) -> None:
        """Validate the level name."""
        if not isinstance(logging.getLevelName(self.level), int):
            raise ValueError(f"Unknown log level: {self.level}")


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")
    game: GameConfig = field(default_factory=GameConfig)
    log: LoggingConfig = field(default_factory=LoggingConfig)


# Global configuration instance
config = AppConfig()
