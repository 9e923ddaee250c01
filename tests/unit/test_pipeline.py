# -*- coding: utf-8 -*-

"""
Unit tests for the stage orchestrator (pipeline.py).
"""

from unittest.mock import Mock

from fastapi.responses import PlainTextResponse

from param_gate import RequestContext, ValidationGate, json_error_handler, run_pipeline
from support.scopes import build_request


def _recording_stage(name, calls, halt=False):
    """Create a stage that records its name and optionally halts."""

    def stage(context):
        calls.append(name)
        if halt:
            return context.halt(PlainTextResponse(name))
        return context

    stage.__name__ = name
    return stage


class TestRunPipeline:
    """Tests for run_pipeline() ordering and halting."""

    def test_runs_stages_in_order(self):
        """
        What it does: Verifies that stages run in the given order.
        Purpose: Execution order is deterministic.
        """
        calls = []
        context = RequestContext(build_request())

        result = run_pipeline(
            context,
            [_recording_stage("first", calls), _recording_stage("second", calls)],
        )

        print(f"Comparing calls: Expected ['first', 'second'], Got {calls}")
        assert calls == ["first", "second"]
        assert result is context

    def test_stops_after_halting_stage(self):
        """
        What it does: Verifies that stages after a halt are skipped.
        Purpose: A halted exchange is finished.
        """
        calls = []
        context = RequestContext(build_request())

        result = run_pipeline(
            context,
            [
                _recording_stage("first", calls, halt=True),
                _recording_stage("second", calls),
            ],
        )

        assert calls == ["first"]
        assert result.halted is True
        assert result.response.body == b"first"

    def test_already_halted_context_skips_all_stages(self):
        """What it does: a context halted before the pipeline is returned as-is."""
        stage = Mock()
        context = RequestContext(build_request()).halt(PlainTextResponse("done"))

        result = run_pipeline(context, [stage])

        stage.assert_not_called()
        assert result is context

    def test_empty_stage_list(self):
        """What it does: no stages means no change."""
        context = RequestContext(build_request())

        assert run_pipeline(context, []) is context

    def test_uses_context_returned_by_stage(self):
        """
        What it does: Verifies that each stage receives the previous stage's result.
        Purpose: Stages may replace the context.
        """
        replacement = RequestContext(build_request(path="/other"))
        second = Mock(side_effect=lambda context: context)

        result = run_pipeline(
            RequestContext(build_request()),
            [lambda context: replacement, second],
        )

        second.assert_called_once_with(replacement)
        assert result is replacement

    def test_validation_gate_as_stage(self, make_context):
        """
        What it does: Runs a ValidationGate with a JSON handler through the pipeline.
        Purpose: A failing gate halts and later stages are skipped.
        """
        later = Mock()
        gate = ValidationGate(on_error=json_error_handler(422))

        result = run_pipeline(make_context(id="nope"), [gate, later])

        later.assert_not_called()
        assert result.halted is True
        assert result.response.status_code == 422
