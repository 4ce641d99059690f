"""Tests for the performance profiler."""

import json
import pytest
from json_xml_converter.profiler import PerformanceProfiler


class TestPerformanceProfiler:
    """Tests for PerformanceProfiler class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.profiler = PerformanceProfiler()

    def test_profile_operation_records_metrics(self):
        """Test that a completed block records one metrics entry."""
        with self.profiler.profile_operation("json2xml", input_size=100) as session:
            session.output_size = 250

        assert len(self.profiler.metrics_history) == 1
        metrics = self.profiler.metrics_history[0]
        assert metrics.operation_name == "json2xml"
        assert metrics.input_size == 100
        assert metrics.output_size == 250
        assert metrics.size_ratio == 2.5
        assert metrics.duration >= 0

    def test_failed_operation_is_not_recorded(self):
        """Test that an exception leaves the history untouched."""
        with pytest.raises(RuntimeError):
            with self.profiler.profile_operation("xml2json", input_size=10):
                raise RuntimeError("boom")

        assert self.profiler.metrics_history == []

    def test_summary(self):
        """Test the aggregated summary."""
        assert self.profiler.get_performance_summary() == {"total_operations": 0}

        for size in (10, 30):
            with self.profiler.profile_operation("json2xml", input_size=size) as session:
                session.output_size = size * 2

        summary = self.profiler.get_performance_summary()
        assert summary["total_operations"] == 2
        assert summary["total_input_bytes"] == 40
        assert summary["total_output_bytes"] == 80
        assert summary["overall_size_ratio"] == 2.0

    def test_export_formats(self):
        """Test json, csv and summary exports."""
        with self.profiler.profile_operation("json2xml", input_size=5) as session:
            session.output_size = 5

        exported = json.loads(self.profiler.export_metrics("json"))
        assert exported[0]["operation"] == "json2xml"

        csv_lines = self.profiler.export_metrics("csv").splitlines()
        assert csv_lines[0].startswith("operation,duration")
        assert csv_lines[1].startswith("json2xml,")

        assert "Total Operations: 1" in self.profiler.export_metrics("summary")

    def test_unsupported_export_format(self):
        """Test that unknown formats are rejected."""
        with pytest.raises(ValueError, match="Unsupported export format"):
            self.profiler.export_metrics("yaml")
