"""
core/logging/logging_setup.py
=============================

Configures stdlib logging for the engine from the ``[Logging]`` config
section. Modules only ever call ``logging.getLogger(__name__)``; this module
attaches the single stream handler.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from core.config.config_service import ConfigService, config_service

ROOT_LOGGER_NAME = "demandtracking"

_HANDLER_ATTR = "_casetrack_handler"


def configure_logging(
    config: Optional[ConfigService] = None,
    *,
    level: Optional[str] = None,
    name: str = ROOT_LOGGER_NAME,
) -> logging.Logger:
    """
    Install (once) a stream handler on the feature logger.

    :param config: config service to read level/format from (default singleton)
    :param level: explicit level overriding the configured one
    :param name: logger to configure
    :return: the configured logger
    """
    cfg = config or config_service
    level_name = (level or cfg.logging.level or "WARNING").upper()
    numeric_level = getattr(logging, level_name, logging.WARNING)

    logger = logging.getLogger(name)

    existing = [h for h in logger.handlers if getattr(h, _HANDLER_ATTR, False)]
    if not existing:
        handler = logging.StreamHandler(sys.stderr)
        setattr(handler, _HANDLER_ATTR, True)
        handler.setFormatter(logging.Formatter(cfg.logging.format))
        logger.addHandler(handler)
    else:
        for handler in existing:
            handler.setFormatter(logging.Formatter(cfg.logging.format))

    logger.setLevel(numeric_level)
    return logger
