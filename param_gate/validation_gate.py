# -*- coding: utf-8 -*-

# Param Gate
# Copyright (C) 2025 Jwadow
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

"""
Validation gate pipeline stage.

Validates path and query parameters declared on the matched route before the
endpoint runs:

  1. Routes without a validation mapping pass through untouched.
  2. Every declared field is resolved from the merged parameters (missing
     fields resolve to None) and handed to its validator.
  3. Validators returning Invalid(message) are collected into an error report
     of the form {field: message}. All fields are checked, there is no
     short-circuit on the first failure.
  4. An empty report lets the request continue; otherwise the on_error
     callback receives the context and the report, and its return value
     becomes the result of the stage.

The gate never writes a response itself. Halting the request is the job of
the on_error callback (see json_error_handler).
"""

from typing import Any, Mapping, Optional

from loguru import logger

from param_gate.config import LOG_VALIDATION_FAILURES, PARAM_VALIDATION_ENABLED
from param_gate.context import RequestContext, ValidationMapping
from param_gate.errors import (
    ErrorHandler,
    ErrorReport,
    GateConfigurationError,
    is_invalid,
)


def collect_errors(
    params: Mapping[str, Any],
    validations: ValidationMapping,
) -> ErrorReport:
    """
    Run every validator and collect the failures.

    Exceptions raised by a validator are not caught; validators are expected
    to return Invalid(...) for bad input instead of raising.

    Args:
        params: Merged path and query parameters
        validations: Mapping of field name to validator function

    Returns:
        Error report containing exactly the fields whose validator failed
    """
    errors: ErrorReport = {}
    for field, validator in validations.items():
        result = validator(params.get(field))
        if is_invalid(result):
            errors[field] = result.message
    return errors


class ValidationGate:
    """
    Pipeline stage running the declared validations of the matched route.

    The gate is configured once when it is installed and keeps no state
    between requests, so a single instance is shared by all routes and
    concurrent requests.

    Attributes:
        on_error: Callback invoked with (context, errors) when validation fails
        enabled: When False, every request passes through untouched

    Example:
        >>> gate = ValidationGate(on_error=json_error_handler())
        >>> router = APIRouter(route_class=gated_route_class(gate))
    """

    def __init__(
        self,
        on_error: Optional[ErrorHandler] = None,
        enabled: Optional[bool] = None,
    ):
        """
        Initializes the gate.

        Args:
            on_error: Error callback. May be omitted, but a failing validation
                      then raises GateConfigurationError.
            enabled: Overrides PARAM_VALIDATION_ENABLED from config when given

        Raises:
            TypeError: If on_error is given but not callable
        """
        if on_error is not None and not callable(on_error):
            raise TypeError(
                f"on_error must be callable, got {type(on_error).__name__}"
            )
        if on_error is None:
            logger.warning(
                "[ValidationGate] Installed without on_error callback; "
                "failing validations will raise GateConfigurationError"
            )
        self._on_error = on_error
        self._enabled = PARAM_VALIDATION_ENABLED if enabled is None else enabled

    @property
    def on_error(self) -> Optional[ErrorHandler]:
        return self._on_error

    @property
    def enabled(self) -> bool:
        return self._enabled

    def process(self, context: RequestContext) -> RequestContext:
        """
        Validate the parameters of one request.

        Args:
            context: Request context of the routed request

        Returns:
            The same context when validation passes (or nothing is declared),
            otherwise whatever on_error returned

        Raises:
            GateConfigurationError: If validation fails and no on_error is set
        """
        validations = context.validations
        if not self._enabled or validations is None:
            return context

        errors = collect_errors(context.fetch_params(), validations)
        if not errors:
            return context

        log = logger.warning if LOG_VALIDATION_FAILURES else logger.debug
        # Route template rather than the raw path, which carries param values
        route = context.request.scope.get("route")
        log(
            "[ValidationGate] {} {} failed validation for fields: {}",
            context.request.method,
            getattr(route, "path", "<unrouted>"),
            ", ".join(sorted(errors)),
        )

        if self._on_error is None:
            raise GateConfigurationError(
                f"Validation failed for {sorted(errors)} but no on_error callback "
                "was configured"
            )
        return self._on_error(context, errors)

    def __call__(self, context: RequestContext) -> RequestContext:
        return self.process(context)

    def __repr__(self) -> str:
        return f"ValidationGate(on_error={self._on_error!r}, enabled={self._enabled})"
