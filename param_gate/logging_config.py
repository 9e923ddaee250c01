# -*- coding: utf-8 -*-

# Param Gate
# Copyright (C) 2025 Jwadow
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

"""Loguru sink setup for applications embedding Param Gate."""

import sys

from loguru import logger

from param_gate.config import LOG_LEVEL

LOG_FORMAT: str = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - "
    "<level>{message}</level>"
)


def setup_logging(level: str = LOG_LEVEL) -> int:
    """
    Replace loguru's default sink with a stderr sink at the given level.

    Args:
        level: Loguru level name (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Handler id of the new sink
    """
    logger.remove()
    return logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT, colorize=True)
