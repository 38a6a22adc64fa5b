"""Logging configuration for the StrataSize calculator.

The configuration is a TOML file in logging.config.dictConfig format.
Its path is taken from the argument, then from the STRATA_LOG_CFG
environment variable, then from logging_config.toml at the repo root.
Without a configuration file the "strata" logger stays silent.
"""

import logging
import logging.config
import os
from pathlib import Path
from typing import Optional, Union

import tomli

from component.scripts.parameter import LOG_CFG_ENV_VAR

LOGGER_NAME = "strata"
DEFAULT_CFG_PATH = Path(__file__).parent.parent.parent / "logging_config.toml"


def get_config_path(cfg_path: Optional[Union[str, Path]] = None) -> Path:
    """Resolve which logging configuration file to read."""
    return Path(cfg_path or os.getenv(LOG_CFG_ENV_VAR) or DEFAULT_CFG_PATH)


def setup_logging(cfg_path: Optional[Union[str, Path]] = None) -> logging.Logger:
    """Configure the "strata" logger hierarchy and return its root logger.

    Raises:
        FileNotFoundError: If the configured path exists but is not a file
    """
    cfg_path = get_config_path(cfg_path)
    strata_logger = logging.getLogger(LOGGER_NAME)

    if not cfg_path.exists():
        for handler in strata_logger.handlers[:]:
            strata_logger.removeHandler(handler)
        strata_logger.addHandler(logging.NullHandler())
        return strata_logger

    if not cfg_path.is_file():
        raise FileNotFoundError(f"Logging config not found at {cfg_path}")

    with cfg_path.open("rb") as f:
        cfg = tomli.load(f)

    logging.config.dictConfig(cfg)
    strata_logger.debug("Logging configured from %s", cfg_path)
    return strata_logger
