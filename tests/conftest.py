# -*- coding: utf-8 -*-

"""
Shared fixtures for Param Gate tests.
"""

from typing import Any, Optional

import pytest
from fastapi.testclient import TestClient

from param_gate import RequestContext, ValidationMapping
from support.router import create_app
from support.scopes import build_request
from support.validators import validate_boolean, validate_integer


@pytest.fixture
def user_validations() -> ValidationMapping:
    """Validation mapping of the /users/{id} route."""
    return {"id": validate_integer, "active": validate_boolean}


@pytest.fixture
def make_context(user_validations):
    """
    Factory for RequestContext objects of GET /users/{id}.

    Pass validations=None to build a context for a route without validations.
    """

    def _make(
        id: Optional[str] = "1",
        query_string: str = "",
        validations: Any = user_validations,
    ) -> RequestContext:
        path_params = {} if id is None else {"id": id}
        request = build_request(
            path=f"/users/{id}",
            query_string=query_string,
            path_params=path_params,
        )
        return RequestContext(request, validations=validations)

    return _make


@pytest.fixture
def test_client():
    """TestClient for the sample app with a 422 JSON error handler."""
    with TestClient(create_app()) as client:
        yield client
