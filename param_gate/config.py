# -*- coding: utf-8 -*-

# Param Gate
# Copyright (C) 2025 Jwadow
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.

"""
Param Gate Configuration.

Centralized storage for all settings and constants.
Loads environment variables and provides typed access to them.
"""

import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

_TRUTHY = ("true", "1", "yes", "enabled", "on")

# ==================================================================================================
# Validation Settings
# ==================================================================================================

# Global switch for parameter validation.
# Gates constructed without an explicit `enabled` argument follow this value.
# Useful to bypass validation temporarily without touching route declarations.
# Default: true
_PARAM_VALIDATION_RAW: str = os.getenv("PARAM_VALIDATION_ENABLED", "true").lower()
PARAM_VALIDATION_ENABLED: bool = _PARAM_VALIDATION_RAW in _TRUTHY

# HTTP status code used by json_error_handler() when validation fails.
# 422 Unprocessable Entity matches FastAPI's own request validation errors.
# Default: 422
VALIDATION_ERROR_STATUS_CODE: int = int(os.getenv("VALIDATION_ERROR_STATUS_CODE", "422"))

# ==================================================================================================
# Logging Settings
# ==================================================================================================

# Log level for the application
# Available levels: TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL
# Default: INFO (recommended for production)
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# Log every failed validation pass at WARNING level.
# When disabled, failures are still logged, but at DEBUG level.
# Only field names are logged, never the submitted values.
# Default: true
_LOG_VALIDATION_FAILURES_RAW: str = os.getenv("LOG_VALIDATION_FAILURES", "true").lower()
LOG_VALIDATION_FAILURES: bool = _LOG_VALIDATION_FAILURES_RAW in _TRUTHY

# ==================================================================================================
# Application Version
# ==================================================================================================

APP_VERSION: str = "0.1.0"
APP_TITLE: str = "Param Gate"
APP_DESCRIPTION: str = "Declarative path/query parameter validation for FastAPI routes."
