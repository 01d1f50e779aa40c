"""Tests for the tracer module."""

import json
import os

import numpy as np
import pytest


class TestSummarize:
    """Tests for object summarization."""

    def test_numpy_array_summary(self):
        from edgecurve.tracer import summarize

        summary = summarize(np.zeros((100, 200, 3), dtype=np.uint8))

        assert "ndarray" in summary
        assert "100x200x3" in summary
        assert "uint8" in summary

    def test_pixel_buffer_summary(self):
        from edgecurve.models import PixelBuffer
        from edgecurve.tracer import summarize

        buffer = PixelBuffer(np.zeros((30, 40, 3), dtype=np.uint8))

        assert summarize(buffer) == "PixelBuffer(40x30)"

    def test_point_summary(self):
        from edgecurve.models import Point
        from edgecurve.tracer import summarize

        assert summarize(Point(3, 4)) == "Point(x=3, y=4)"

    def test_path_summary(self):
        from edgecurve.models import Point
        from edgecurve.tracer import summarize

        summary = summarize([Point(0, 0), Point(1, 1)])

        assert "list" in summary
        assert "len=2" in summary
        assert "Point" in summary

    def test_fitting_result_summary(self):
        from edgecurve.models import FittingResult
        from edgecurve.tracer import summarize

        summary = summarize(FittingResult(formula="f(x) = 1.00"))

        assert "FittingResult" in summary

    def test_summary_capped_length(self):
        from edgecurve.tracer import summarize

        large_dict = {f"key_{i}": f"value_{i}" for i in range(100)}

        assert len(summarize(large_dict, max_len=20)) <= 20

    def test_long_string_summary(self):
        from edgecurve.tracer import summarize

        summary = summarize("a" * 1000)

        assert "len=1000" in summary

    def test_none_summary(self):
        from edgecurve.tracer import summarize

        assert summarize(None) == "None"


class TestTracerSpan:
    """Tests for tracer span functionality."""

    def test_span_nesting(self, capsys):
        from edgecurve.tracer import configure_tracer, get_tracer

        configure_tracer(enabled=True, level="INFO")
        tracer = get_tracer()

        try:
            with tracer.span("outer", module="test"):
                with tracer.span("inner", module="test"):
                    tracer.event("inside")
        finally:
            configure_tracer(enabled=False)

        lines = capsys.readouterr().err.strip().split("\n")

        assert len(lines) == 5
        assert "test:outer  start" in lines[0]
        assert "  test:inner  start" in lines[1]
        assert "test:inner  inside" in lines[2]
        assert "end ok" in lines[4]

    def test_tracer_disabled_no_output(self, capsys):
        from edgecurve.tracer import configure_tracer, get_tracer

        configure_tracer(enabled=False)
        tracer = get_tracer()

        with tracer.span("test", module="test"):
            tracer.event("should not appear")

        assert capsys.readouterr().err == ""

    def test_level_filter(self, capsys):
        from edgecurve.tracer import configure_tracer, get_tracer

        configure_tracer(enabled=True, level="WARN")
        tracer = get_tracer()

        try:
            tracer.event("quiet", level="DEBUG")
            tracer.event("loud", level="WARN")
        finally:
            configure_tracer(enabled=False)

        err = capsys.readouterr().err
        assert "quiet" not in err
        assert "loud" in err

    def test_span_error_reraised(self, capsys):
        from edgecurve.tracer import configure_tracer, get_tracer

        configure_tracer(enabled=True, level="INFO")
        tracer = get_tracer()

        try:
            with pytest.raises(RuntimeError):
                with tracer.span("boom", module="test"):
                    raise RuntimeError("bad")
            tracer.event("after")
        finally:
            configure_tracer(enabled=False)

        lines = capsys.readouterr().err.strip().split("\n")
        assert "ERROR" in lines[1]
        assert "RuntimeError: bad" in lines[1]
        # depth restored after the failed span
        assert lines[2].split("INFO", 1)[1] == "    after"

    def test_json_output_and_file(self, temp_dir, capsys):
        from edgecurve.tracer import configure_tracer, get_tracer

        path = os.path.join(temp_dir, "trace.log")
        configure_tracer(enabled=True, level="INFO", file_path=path, json_output=True)
        tracer = get_tracer()

        try:
            tracer.event("fitted", degree=3)
        finally:
            configure_tracer(enabled=False)

        with open(path, "r", encoding="utf-8") as f:
            lines = f.read().strip().split("\n")

        assert len(lines) == 2
        record = json.loads(lines[1])
        assert record["message"] == "fitted degree=3"
        assert record["meta"] == {"degree": "3"}
        capsys.readouterr()


class TestTraceDecorator:
    """Tests for the @trace decorator."""

    def test_decorator_runs_function(self):
        from edgecurve.tracer import configure_tracer, trace

        configure_tracer(enabled=False)

        @trace(label="test_func")
        def my_func(x):
            return x * 2

        assert my_func(5) == 10

    def test_decorator_traces_when_enabled(self, capsys):
        from edgecurve.tracer import configure_tracer, trace

        @trace(label="double", arg_names=["x"])
        def my_func(x):
            return x * 2

        configure_tracer(enabled=True)
        try:
            assert my_func(x=4) == 8
        finally:
            configure_tracer(enabled=False)

        err = capsys.readouterr().err
        assert "double  start x=4" in err

    def test_decorator_with_exception(self):
        from edgecurve.tracer import configure_tracer, trace

        configure_tracer(enabled=False)

        @trace(label="failing_func")
        def failing_func():
            raise ValueError("test error")

        with pytest.raises(ValueError):
            failing_func()
