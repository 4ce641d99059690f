"""Performance profiler for conversion operations."""

import json
import threading
import time
import psutil
import logging
from typing import Dict, Any, Optional, List
from dataclasses import dataclass
from contextlib import contextmanager


@dataclass
class PerformanceMetrics:
    """Performance metrics for one conversion."""
    operation_name: str
    start_time: float
    end_time: float
    duration: float
    input_size: int
    output_size: int
    memory_start_mb: float
    memory_end_mb: float
    throughput_mbps: float
    size_ratio: float


class ProfilingSession:
    """Measurements for one in-flight operation."""

    def __init__(self, operation_name: str, input_size: int):
        self.operation_name = operation_name
        self.input_size = input_size
        self.output_size = 0
        self.start_time = time.time()
        self.start_memory = _rss_mb()


def _rss_mb() -> float:
    return psutil.Process().memory_info().rss / 1024 / 1024


class PerformanceProfiler:
    """
    Records duration, memory and throughput of conversions.

    Sessions are independent, so one profiler can be shared by
    conversions running on different threads.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the performance profiler.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.metrics_history: List[PerformanceMetrics] = []
        self._lock = threading.Lock()

    @contextmanager
    def profile_operation(self, operation_name: str, input_size: int = 0):
        """
        Context manager for profiling operations.

        Set ``output_size`` on the yielded session before leaving the block.
        Metrics are recorded only when the block completes without error.

        Args:
            operation_name: Name of the operation being profiled
            input_size: Size of input data in bytes
        """
        session = ProfilingSession(operation_name, input_size)
        self.logger.debug(f"Started profiling: {operation_name}")
        yield session
        self._finish(session)

    def _finish(self, session: ProfilingSession) -> PerformanceMetrics:
        end_time = time.time()
        duration = end_time - session.start_time

        throughput = (session.input_size / 1024 / 1024) / duration if duration > 0 else 0  # MB/s
        size_ratio = session.output_size / session.input_size if session.input_size > 0 else 1.0

        metrics = PerformanceMetrics(
            operation_name=session.operation_name,
            start_time=session.start_time,
            end_time=end_time,
            duration=duration,
            input_size=session.input_size,
            output_size=session.output_size,
            memory_start_mb=session.start_memory,
            memory_end_mb=_rss_mb(),
            throughput_mbps=throughput,
            size_ratio=size_ratio
        )

        with self._lock:
            self.metrics_history.append(metrics)

        self.logger.info(
            f"{metrics.operation_name}: {metrics.input_size}B -> {metrics.output_size}B "
            f"in {metrics.duration * 1000:.1f}ms ({metrics.throughput_mbps:.2f} MB/s)"
        )
        return metrics

    def get_performance_summary(self) -> Dict[str, Any]:
        """
        Get summary of all performance metrics.

        Returns:
            Dictionary with performance summary
        """
        with self._lock:
            history = list(self.metrics_history)

        if not history:
            return {"total_operations": 0}

        total_input = sum(m.input_size for m in history)
        total_output = sum(m.output_size for m in history)

        return {
            "total_operations": len(history),
            "total_duration": sum(m.duration for m in history),
            "total_input_bytes": total_input,
            "total_output_bytes": total_output,
            "average_throughput_mbps": sum(m.throughput_mbps for m in history) / len(history),
            "peak_memory_mb": max(m.memory_end_mb for m in history),
            "overall_size_ratio": total_output / total_input if total_input > 0 else 1.0,
            "operations": [
                {
                    "name": m.operation_name,
                    "duration": m.duration,
                    "input_size": m.input_size,
                    "output_size": m.output_size
                }
                for m in history
            ]
        }

    def export_metrics(self, format: str = "json") -> str:
        """
        Export performance metrics in specified format.

        Args:
            format: Export format ("json", "csv", "summary")

        Returns:
            Formatted metrics string
        """
        with self._lock:
            history = list(self.metrics_history)

        if format == "json":
            return json.dumps([
                {
                    "operation": m.operation_name,
                    "duration": m.duration,
                    "input_size": m.input_size,
                    "output_size": m.output_size,
                    "memory_end_mb": m.memory_end_mb,
                    "throughput_mbps": m.throughput_mbps,
                    "size_ratio": m.size_ratio
                }
                for m in history
            ], indent=2)

        elif format == "csv":
            lines = ["operation,duration,input_size,output_size,memory_end_mb,throughput_mbps,size_ratio"]
            for m in history:
                lines.append(f"{m.operation_name},{m.duration},{m.input_size},{m.output_size},"
                             f"{m.memory_end_mb},{m.throughput_mbps},{m.size_ratio}")
            return "\n".join(lines)

        elif format == "summary":
            summary = self.get_performance_summary()
            if summary["total_operations"] == 0:
                return "Performance Summary:\n  Total Operations: 0"
            lines = [
                "Performance Summary:",
                f"  Total Operations: {summary['total_operations']}",
                f"  Total Duration: {summary['total_duration']:.3f}s",
                f"  Total Input: {summary['total_input_bytes']} bytes",
                f"  Total Output: {summary['total_output_bytes']} bytes",
                f"  Average Throughput: {summary['average_throughput_mbps']:.2f} MB/s",
                f"  Peak Memory: {summary['peak_memory_mb']:.1f} MB"
            ]
            return "\n".join(lines)

        else:
            raise ValueError(f"Unsupported export format: {format}")
