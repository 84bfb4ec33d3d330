"""Performance profiler for JSON minification runs."""

import time
import psutil
import logging
from typing import Dict, Any, Optional, List
from dataclasses import dataclass
from contextlib import contextmanager


@dataclass
class MinificationMetrics:
    """Metrics for a single minification."""
    source_path: str
    duration: float
    input_size: int
    output_size: int
    memory_start_mb: float
    memory_end_mb: float

    @property
    def bytes_saved(self) -> int:
        return self.input_size - self.output_size

    @property
    def compression_ratio(self) -> float:
        return self.output_size / self.input_size if self.input_size > 0 else 1.0

    @property
    def throughput_mbps(self) -> float:
        return (self.input_size / 1024 / 1024) / self.duration if self.duration > 0 else 0.0


class MinificationProfiler:
    """
    Collects size, timing and memory figures for minification runs.

    Sizes are measured in UTF-8 bytes. Memory is the resident set size of
    the current process as reported by psutil.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the profiler.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.metrics_history: List[MinificationMetrics] = []
        self._process = psutil.Process()

    @contextmanager
    def profile(self, source_path: Any, content: str):
        """
        Profile one minification.

        Yields a dict; the caller stores the minified text under ``"output"``.
        Metrics are recorded only when the block completes without raising.
        """
        run: Dict[str, Any] = {"output": None}
        start_memory = self._memory_mb()
        start_time = time.perf_counter()

        yield run

        duration = time.perf_counter() - start_time
        output = run["output"] if run["output"] is not None else content
        metrics = MinificationMetrics(
            source_path=str(source_path),
            duration=duration,
            input_size=len(content.encode("utf-8")),
            output_size=len(output.encode("utf-8")),
            memory_start_mb=start_memory,
            memory_end_mb=self._memory_mb(),
        )
        self.metrics_history.append(metrics)
        self.logger.debug(f"Minified {metrics.source_path}: {metrics.input_size} -> "
                          f"{metrics.output_size} bytes in {duration:.4f}s")

    def get_summary(self) -> Dict[str, Any]:
        """
        Get summary of all recorded runs.

        Returns:
            Dictionary with totals across the recorded runs
        """
        if not self.metrics_history:
            return {"total_files": 0}

        total_input = sum(m.input_size for m in self.metrics_history)
        total_output = sum(m.output_size for m in self.metrics_history)

        return {
            "total_files": len(self.metrics_history),
            "total_duration": sum(m.duration for m in self.metrics_history),
            "total_input_bytes": total_input,
            "total_output_bytes": total_output,
            "total_bytes_saved": total_input - total_output,
            "overall_compression_ratio": total_output / total_input if total_input > 0 else 1.0,
            "memory_peak_mb": max(max(m.memory_start_mb, m.memory_end_mb) for m in self.metrics_history),
        }

    def _memory_mb(self) -> float:
        try:
            return self._process.memory_info().rss / 1024 / 1024
        except psutil.Error as e:
            self.logger.warning(f"Memory sampling failed: {e}")
            return 0.0
