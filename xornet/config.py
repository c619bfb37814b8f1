"""
config.py
~~~~~~~~~

Environment-driven settings and logging setup shared by the demo and the
API server.
"""

import os
import logging
from dataclasses import dataclass
from typing import Callable, TypeVar

T = TypeVar('T')

DEFAULT_HIDDEN_SIZE = 2
DEFAULT_LEARNING_RATE = 0.5
DEFAULT_EPOCHS = 10000


def _env(name: str, default: T, cast: Callable[[str], T]) -> T:
    """Read ``name`` from the environment, converting it with ``cast``."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return cast(raw)
    except ValueError:
        raise ValueError(f"Invalid value for {name}: {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    """Runtime settings, normally built with ``Settings.from_env()``."""

    log_level: str = 'INFO'
    is_production: bool = False
    epochs: int = DEFAULT_EPOCHS
    learning_rate: float = DEFAULT_LEARNING_RATE
    host: str = '0.0.0.0'
    port: int = 5000

    @classmethod
    def from_env(cls) -> 'Settings':
        """
        Build settings from environment variables.

        Reads LOG_LEVEL, FLASK_ENV, XORNET_EPOCHS, XORNET_LEARNING_RATE,
        HOST and PORT.

        Raises:
            ValueError: If a numeric variable cannot be parsed
        """
        return cls(
            log_level=os.getenv('LOG_LEVEL', 'INFO').upper(),
            is_production=os.getenv('FLASK_ENV') == 'production',
            epochs=_env('XORNET_EPOCHS', DEFAULT_EPOCHS, int),
            learning_rate=_env('XORNET_LEARNING_RATE', DEFAULT_LEARNING_RATE, float),
            host=os.getenv('HOST', '0.0.0.0'),
            port=_env('PORT', 5000, int)
        )


def configure_logging(settings: Settings) -> None:
    """
    Set up logging based on environment.

    - In production: silence noisy third-party logs, keep ours at INFO
    - In development: use the configured level everywhere
    """
    log_level = getattr(logging, settings.log_level, logging.INFO)

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if settings.is_production:
        logging.getLogger('werkzeug').setLevel(logging.WARNING)
        logging.getLogger('xornet').setLevel(logging.INFO)
