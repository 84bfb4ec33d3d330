"""Tests for the minification profiler."""

import pytest
from json_minifier import JSONMinifier
from json_minifier.profiler import MinificationProfiler, MinificationMetrics


class TestMinificationProfiler:
    """Tests for MinificationProfiler class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.profiler = MinificationProfiler()
        self.minifier = JSONMinifier()

    def test_profile_records_sizes(self, large_json):
        """Test that a profiled run records input and output sizes."""
        with self.profiler.profile("large.json", large_json) as run:
            run["output"] = self.minifier.minify(large_json, "large.json")

        assert len(self.profiler.metrics_history) == 1
        metrics = self.profiler.metrics_history[0]
        assert metrics.source_path == "large.json"
        assert metrics.input_size == len(large_json.encode("utf-8"))
        assert metrics.output_size < metrics.input_size
        assert metrics.bytes_saved > 1000
        assert 0 < metrics.compression_ratio < 1
        assert metrics.duration >= 0
        assert metrics.memory_start_mb > 0

    def test_sizes_counted_in_utf8_bytes(self):
        """Test that sizes are UTF-8 byte counts."""
        content = '[ "世界" ]'
        with self.profiler.profile("u.json", content) as run:
            run["output"] = self.minifier.minify(content, "u.json")

        metrics = self.profiler.metrics_history[0]
        assert metrics.input_size == 12
        assert metrics.output_size == 10

    def test_failed_run_not_recorded(self):
        """Test that a run that raises is not recorded."""
        with pytest.raises(RuntimeError):
            with self.profiler.profile("x.json", "[]"):
                raise RuntimeError("boom")

        assert self.profiler.metrics_history == []

    def test_summary(self):
        """Test totals across several runs."""
        for content in ('{ "a": 1 }', '[ 1, 2 ]'):
            with self.profiler.profile("f.json", content) as run:
                run["output"] = self.minifier.minify(content, "f.json")

        summary = self.profiler.get_summary()
        assert summary["total_files"] == 2
        assert summary["total_input_bytes"] == 10 + 8
        assert summary["total_output_bytes"] == 7 + 5
        assert summary["total_bytes_saved"] == 6
        assert summary["memory_peak_mb"] > 0

    def test_empty_summary(self):
        """Test summary with no recorded runs."""
        assert self.profiler.get_summary() == {"total_files": 0}

    def test_metrics_ratio_with_empty_input(self):
        """Test derived figures for an empty input."""
        metrics = MinificationMetrics("e.json", 0.0, 0, 0, 1.0, 1.0)

        assert metrics.compression_ratio == 1.0
        assert metrics.throughput_mbps == 0.0
        assert metrics.bytes_saved == 0
