# -*- coding: utf-8 -*-

# Param Gate
# Copyright (C) 2025 Jwadow
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

"""
Pipeline stage orchestrator.

Runs the stages installed on a gated route in order, after routing and before
the endpoint. A stage is any callable taking a RequestContext and returning
a RequestContext (ValidationGate is the standard one).

Execution stops after the first stage that halts the context. The gated
route handler then returns the context's response instead of calling the
endpoint.
"""

from typing import Callable, Sequence

from loguru import logger

from param_gate.context import RequestContext

Stage = Callable[[RequestContext], RequestContext]


def run_pipeline(
    context: RequestContext,
    stages: Sequence[Stage],
) -> RequestContext:
    """
    Run pipeline stages against a request context.

    Args:
        context: Context of the routed request
        stages: Stages in execution order

    Returns:
        Context returned by the last stage that ran
    """
    if context.halted:
        return context

    for stage in stages:
        context = stage(context)

        if context.halted:
            logger.debug(
                "[Pipeline] Halted by {} on {} {}",
                getattr(stage, "__name__", type(stage).__name__),
                context.request.method,
                context.request.url.path,
            )
            break

    return context
