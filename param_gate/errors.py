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
Failure signals and error handling helpers.

Architecture:
- Invalid: the single failure signal a validator function may return
- GateConfigurationError: raised for programmer errors (missing on_error, etc.)
- json_error_handler(): factory for a ready-made on_error callback

Field validation failures are data, not exceptions. A validator returns
Invalid("...") and the gate collects it into the error report; only
misconfiguration is raised.

Example:
    >>> def validate_integer(value):
    ...     try:
    ...         return int(value)
    ...     except (TypeError, ValueError):
    ...         return Invalid(f"could not parse {value} as integer")
    >>> validate_integer("abc")
    Invalid(message='could not parse abc as integer')
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict

from loguru import logger

from param_gate.config import VALIDATION_ERROR_STATUS_CODE
from param_gate.context import RequestContext

ErrorReport = Dict[str, str]
ErrorHandler = Callable[[RequestContext, ErrorReport], RequestContext]


@dataclass(frozen=True)
class Invalid:
    """
    Failure signal returned by a validator function.

    Any other return value, including False, None and 0, means the value
    passed validation.

    Attributes:
        message: Human-readable reason, reported as-is to the error handler
    """

    message: str


def is_invalid(result: Any) -> bool:
    """Return True when a validator result is a failure signal."""
    return isinstance(result, Invalid)


class GateConfigurationError(RuntimeError):
    """
    Raised when the validation pipeline is misconfigured.

    Examples are a failing validation with no on_error callback installed,
    or a stage that halts the request without attaching a response.
    """


def json_error_handler(status_code: int = VALIDATION_ERROR_STATUS_CODE) -> ErrorHandler:
    """
    Build an on_error callback that answers with the error report as JSON.

    The returned callback writes `{field: message, ...}` as the response body
    with the given status code and halts the context, so the endpoint is
    never reached.

    Args:
        status_code: HTTP status code of the error response (default from config)

    Returns:
        Callback suitable for ValidationGate(on_error=...)
    """

    def on_error(context: RequestContext, errors: ErrorReport) -> RequestContext:
        logger.debug(
            "[ValidationGate] Responding {} with {} error(s)", status_code, len(errors)
        )
        return context.send_json(status_code, errors)

    return on_error
