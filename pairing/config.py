"""
Purpose: Application wiring for the pairing system.
What it does:

- reads PairingSettings overrides from the environment (.env supported):
    PAIRING_STRICT_MODE         true/false   (default true)
    PAIRING_TOP_N               int          (default 5)
    PAIRING_PARALLEL_THRESHOLD  int          (default 50)
    PAIRING_WORKER_COUNT        int          (default 10)
    PAIRING_LOG_LEVEL           DEBUG, INFO, ... (default INFO)
- builds the logger, the default filters and scorers, and the PairingSystem
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import List, Optional, Union

from dotenv import load_dotenv

from providers.filters import Filter, default_filters
from scoring.scorers import Scorer, default_scorers

from .errors import ConfigurationError
from .logger import setup_logging
from .policy import PairingSettings
from .system import PairingSystem

load_dotenv()

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default

    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {raw!r}")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default

    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from e


def settings_from_env() -> PairingSettings:
    defaults = PairingSettings()
    settings = PairingSettings(
        strict_mode=_env_bool("PAIRING_STRICT_MODE", defaults.strict_mode),
        top_n=_env_int("PAIRING_TOP_N", defaults.top_n),
        parallel_threshold=_env_int("PAIRING_PARALLEL_THRESHOLD", defaults.parallel_threshold),
        worker_count=_env_int("PAIRING_WORKER_COUNT", defaults.worker_count),
    )
    settings.validate()
    return settings


@dataclass
class AppConfig:
    """
    Everything a caller needs to run pairing requests.
    """
    log: logging.Logger
    filters: List[Filter]
    scorers: List[Scorer]
    pairing_system: PairingSystem


def init_app(
    strict_mode: Optional[bool] = None,
    log_level: Optional[Union[str, int]] = None,
    settings: Optional[PairingSettings] = None,
) -> AppConfig:
    """
    Initialize logging, filters, scorers and the pairing system.

    Explicit arguments win over environment values.
    """
    log = setup_logging(log_level or os.getenv("PAIRING_LOG_LEVEL", "INFO"))
    log.info("Initializing pairing system...")

    settings = settings or settings_from_env()
    if strict_mode is not None and strict_mode != settings.strict_mode:
        settings = replace(settings, strict_mode=strict_mode)

    filters = default_filters()
    log.debug("Initialized filters (count=%d)", len(filters))

    scorers = default_scorers()
    log.debug("Initialized scorers (count=%d)", len(scorers))

    pairing_system = PairingSystem(filters, scorers, logger=log, settings=settings)
    log.info("Pairing system initialized successfully (strict_mode=%s).", settings.strict_mode)

    return AppConfig(
        log=log,
        filters=filters,
        scorers=scorers,
        pairing_system=pairing_system,
    )
