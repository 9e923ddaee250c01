# -*- coding: utf-8 -*-

# Param Gate
# Copyright (C) 2025 Jwadow
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

"""
Per-request exchange object passed through pipeline stages.

RequestContext wraps a routed Starlette request together with the validation
mapping of the matched route. Stages read parameters from it and may finish
the exchange by halting it with a response; the gated route handler then
returns that response instead of running the endpoint.
"""

from typing import Any, Callable, Dict, Mapping, Optional

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.responses import Response

Validator = Callable[[Optional[str]], Any]
ValidationMapping = Mapping[str, Validator]


class RequestContext:
    """
    Mutable request/response exchange for a single in-flight request.

    Attributes:
        request: Routed Starlette request (path params already resolved)
        validations: Validation mapping declared on the matched route, or None
        halted: True once a stage has finished the exchange
        response: Response to send when halted

    Example:
        >>> context = RequestContext(request, validations={"id": validate_integer})
        >>> context.fetch_params()["id"]
        '1'
    """

    def __init__(
        self,
        request: Request,
        validations: Optional[ValidationMapping] = None,
    ):
        self.request = request
        self.validations = validations
        self.halted: bool = False
        self.response: Optional[Response] = None
        self._params: Optional[Dict[str, Any]] = None

    @property
    def path_params(self) -> Dict[str, Any]:
        return dict(self.request.path_params)

    @property
    def query_params(self) -> Dict[str, str]:
        # QueryParams keeps the last value for repeated keys
        return dict(self.request.query_params)

    @property
    def params(self) -> Optional[Dict[str, Any]]:
        """Merged parameters, or None until fetch_params() has run."""
        return self._params

    def fetch_params(self) -> Dict[str, Any]:
        """
        Build the merged parameter source once and cache it on the context.

        Query parameters are loaded first and path parameters are laid over
        them, so a path parameter wins when both carry the same name.

        Returns:
            Mapping of parameter name to raw value (strings unless a path convertor applies)
        """
        if self._params is None:
            merged = self.query_params
            merged.update(self.path_params)
            self._params = merged
        return self._params

    def halt(self, response: Optional[Response] = None) -> "RequestContext":
        """Mark the exchange as finished, optionally attaching the response."""
        if response is not None:
            self.response = response
        self.halted = True
        return self

    def send_json(self, status_code: int, body: Any) -> "RequestContext":
        """Attach a JSON response and halt the exchange."""
        return self.halt(JSONResponse(status_code=status_code, content=body))

    def __repr__(self) -> str:
        return (
            f"RequestContext(path={self.request.url.path!r}, "
            f"halted={self.halted}, validations={sorted(self.validations or {})})"
        )
