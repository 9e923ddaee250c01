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
Param Gate - declarative path/query parameter validation for FastAPI routes.

Modules:
    - config: Configuration and constants
    - context: RequestContext exchange object
    - errors: Invalid failure signal, configuration errors, JSON error handler
    - validation_gate: ValidationGate pipeline stage and collect_errors()
    - pipeline: Stage orchestrator
    - routing: @validate decorator and gated APIRoute classes
    - logging_config: Loguru sink setup
"""

# Version is imported from config.py - the single source of truth
from param_gate.config import APP_VERSION as __version__

__author__ = "Jwadow"

from param_gate.context import RequestContext, ValidationMapping, Validator
from param_gate.errors import (
    ErrorHandler,
    ErrorReport,
    GateConfigurationError,
    Invalid,
    is_invalid,
    json_error_handler,
)
from param_gate.validation_gate import ValidationGate, collect_errors
from param_gate.pipeline import Stage, run_pipeline
from param_gate.routing import (
    ValidatedRoute,
    gated_route_class,
    get_validations,
    validate,
)
from param_gate.logging_config import setup_logging

__all__ = [
    # Version
    "__version__",

    # Core
    "ValidationGate",
    "collect_errors",
    "RequestContext",

    # Types
    "Validator",
    "ValidationMapping",
    "ErrorReport",
    "ErrorHandler",
    "Stage",

    # Errors
    "Invalid",
    "is_invalid",
    "GateConfigurationError",
    "json_error_handler",

    # Pipeline and routing
    "run_pipeline",
    "ValidatedRoute",
    "gated_route_class",
    "get_validations",
    "validate",

    # Logging
    "setup_logging",
]
