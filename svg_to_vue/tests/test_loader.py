"""
Tests for the loader entry point.
"""

from __future__ import annotations

import pytest

from svg_to_vue.errors import CompilationError, ConfigFormatError, OptimizationError, PipelineFailure
from svg_to_vue.loader import LoaderContext, get_options, load
from svg_to_vue.pipeline.optimizer import Optimizer


class Recorder:
    """Host completion callback recording every invocation."""

    def __init__(self):
        self.calls = []

    def __call__(self, error, result):
        self.calls.append((error, result))


class IdentityOptimizer(Optimizer):
    def __init__(self):
        self.called = False

    def optimize(self, text, config):
        self.called = True
        return text


class FailingOptimizer(Optimizer):
    def optimize(self, text, config):
        raise OptimizationError("rejected")


def make_context(query=None):
    recorder = Recorder()
    return LoaderContext("icons/a.svg", query=query, on_complete=recorder), recorder


class TestGetOptions:
    def test_query_string_is_parsed(self):
        context, _ = make_context("?-svgo,size=2")
        assert get_options(context) == {"svgo": False, "size": "2"}

    def test_mapping_is_passed_through(self):
        query = {"svgo": {"remove_metadata": True}}
        context, _ = make_context(query)
        assert get_options(context) is query

    @pytest.mark.parametrize("query", [None, "", 42, ["svgo"]])
    def test_unsupported_shapes_yield_no_options(self, query):
        context, _ = make_context(query)
        assert get_options(context) is None

    def test_malformed_query_raises(self):
        context, _ = make_context("svgo=false")
        with pytest.raises(ConfigFormatError):
            get_options(context)


class TestLoad:
    def test_success(self):
        context, recorder = make_context("?svgo=false")
        load('<svg width="1"/>', context)

        assert len(recorder.calls) == 1
        error, result = recorder.calls[0]
        assert error is None
        assert 'attrs: Object.assign({"width":"1"}, attrs),' in result

    def test_mapping_query_disables_optimizer(self):
        optimizer = IdentityOptimizer()
        context, recorder = make_context({"svgo": False})
        load("<svg/>", context, optimizer=optimizer)

        assert not optimizer.called
        assert recorder.calls[0][0] is None

    def test_no_options_uses_optimizer(self):
        optimizer = IdentityOptimizer()
        context, recorder = make_context(42)
        load("<svg/>", context, optimizer=optimizer)

        assert optimizer.called
        assert recorder.calls[0][0] is None

    @pytest.mark.parametrize("query", ["?svgo=0", "?svgo=1", "?svgo[]=x"])
    def test_non_object_svgo_query_still_optimizes(self, query):
        optimizer = IdentityOptimizer()
        context, recorder = make_context(query)
        load('<svg viewBox="0 0 1 1"><path d="M0 0"/></svg>', context, optimizer=optimizer)

        assert optimizer.called
        assert len(recorder.calls) == 1
        error, result = recorder.calls[0]
        assert error is None
        assert "_c('path'" in result

    def test_compilation_error_reports_bare_failure(self):
        context, recorder = make_context("?-svgo")
        load("<svg>", context)

        assert len(recorder.calls) == 1
        error, result = recorder.calls[0]
        assert isinstance(error, PipelineFailure)
        assert result is None
        assert error.args == ()
        assert error.__cause__ is None
        assert error.__context__ is None

    def test_optimization_error_reports_failure(self):
        context, recorder = make_context()
        load("<svg/>", context, optimizer=FailingOptimizer())

        assert len(recorder.calls) == 1
        assert isinstance(recorder.calls[0][0], PipelineFailure)

    def test_malformed_query_reports_failure(self):
        context, recorder = make_context("svgo=false")
        load("<svg/>", context)

        assert len(recorder.calls) == 1
        assert isinstance(recorder.calls[0][0], PipelineFailure)

    def test_failure_is_logged(self, caplog):
        context, _ = make_context("?-svgo")
        with caplog.at_level("DEBUG", logger="svg_to_vue.loader"):
            load("<svg>", context)

        records = [r for r in caplog.records if r.name == "svg_to_vue.loader"]
        assert records
        assert records[0].exc_info[0] is CompilationError


class TestLoaderContext:
    def test_complete_only_once(self):
        context, recorder = make_context()
        context.complete(None, "source")
        with pytest.raises(RuntimeError):
            context.complete(None, "source")
        assert recorder.calls == [(None, "source")]

    def test_complete_without_callback(self):
        context = LoaderContext("a.svg")
        context.complete(None, "source")
