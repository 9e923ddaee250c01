# -*- coding: utf-8 -*-

# Param Gate
# Copyright (C) 2025 Jwadow
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

"""
FastAPI routing integration.

Validation mappings are declared on the endpoint with @validate and picked up
by ValidatedRoute when the route is registered. The route wraps the endpoint
handler so the installed stages run once routing has resolved the path
parameters, and before the endpoint itself.

Usage:
    gate = ValidationGate(on_error=json_error_handler())
    router = APIRouter(route_class=gated_route_class(gate))

    @router.get("/users/{id}")
    @validate(id=validate_integer, active=validate_boolean)
    async def get_user(id: str):
        ...

Decorator order matters: @validate must sit below the router decorator so
the mapping is attached before the route is registered.
"""

from types import MappingProxyType
from typing import Any, Callable, Optional, Tuple, Type, TypeVar

from fastapi import Request
from fastapi.routing import APIRoute
from loguru import logger
from starlette.responses import Response

from param_gate.context import RequestContext, ValidationMapping, Validator
from param_gate.errors import GateConfigurationError
from param_gate.pipeline import Stage, run_pipeline

VALIDATIONS_ATTR = "__param_validations__"

EndpointT = TypeVar("EndpointT", bound=Callable[..., Any])


def validate(**validations: Validator) -> Callable[[EndpointT], EndpointT]:
    """
    Declare parameter validations for an endpoint.

    Args:
        **validations: Field name to validator function

    Returns:
        Decorator attaching a read-only validation mapping to the endpoint

    Raises:
        TypeError: If a validator is not callable
        ValueError: If the endpoint already carries a validation mapping
    """
    for field, validator in validations.items():
        if not callable(validator):
            raise TypeError(
                f"Validator for '{field}' must be callable, got {type(validator).__name__}"
            )
    mapping = MappingProxyType(dict(validations))

    def decorator(endpoint: EndpointT) -> EndpointT:
        if get_validations(endpoint) is not None:
            raise ValueError(
                f"Endpoint '{endpoint.__name__}' already declares validations"
            )
        setattr(endpoint, VALIDATIONS_ATTR, mapping)
        return endpoint

    return decorator


def get_validations(endpoint: Callable[..., Any]) -> Optional[ValidationMapping]:
    """Return the validation mapping declared on an endpoint, if any."""
    return getattr(endpoint, VALIDATIONS_ATTR, None)


class ValidatedRoute(APIRoute):
    """
    APIRoute running pipeline stages between routing and the endpoint.

    Subclasses set `stages`; see gated_route_class(). With no stages the
    endpoint handler is used as-is.
    """

    stages: Tuple[Stage, ...] = ()

    def __init__(self, path: str, endpoint: Callable[..., Any], **kwargs: Any):
        # APIRoute builds its handler during __init__, so this must come first
        self.validations: Optional[ValidationMapping] = get_validations(endpoint)
        super().__init__(path, endpoint, **kwargs)
        if self.validations is not None:
            logger.debug(
                "[ValidatedRoute] {} {} validates: {}",
                ",".join(sorted(self.methods or ())),
                self.path,
                ", ".join(self.validations),
            )

    def get_route_handler(self) -> Callable[[Request], Any]:
        handler = super().get_route_handler()
        stages = self.stages
        validations = self.validations

        if not stages:
            return handler

        async def gated_handler(request: Request) -> Response:
            context = run_pipeline(RequestContext(request, validations), stages)
            if context.halted:
                if context.response is None:
                    raise GateConfigurationError(
                        f"Request to {request.url.path} was halted without a response"
                    )
                return context.response
            return await handler(request)

        return gated_handler


def gated_route_class(*stages: Stage) -> Type[ValidatedRoute]:
    """
    Build a route class bound to a fixed list of pipeline stages.

    Args:
        *stages: Stages in execution order, typically a single ValidationGate

    Returns:
        ValidatedRoute subclass for APIRouter(route_class=...) or
        FastAPI(...).router.route_class

    Raises:
        ValueError: If no stages are given
        TypeError: If a stage is not callable
    """
    if not stages:
        raise ValueError("gated_route_class() requires at least one stage")
    for stage in stages:
        if not callable(stage):
            raise TypeError(f"Pipeline stage must be callable, got {type(stage).__name__}")

    return type("GatedRoute", (ValidatedRoute,), {"stages": tuple(stages)})
