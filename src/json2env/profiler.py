"""Performance profiler for conversion runs."""

import time
import psutil
import logging
from typing import Dict, Any, Optional, List
from dataclasses import dataclass
from contextlib import contextmanager


@dataclass
class PerformanceMetrics:
    """Performance metrics for one profiled operation."""
    operation_name: str
    duration: float
    input_size: int
    output_size: int
    entries_emitted: int
    memory_start_mb: float
    memory_end_mb: float
    throughput_mbps: float


class PerformanceProfiler:
    """
    Profiler measuring duration, throughput and process memory.

    Metrics are logged at debug level so they only show up with --verbose.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the performance profiler.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.metrics_history: List[PerformanceMetrics] = []
        self.current_operation: Optional[str] = None
        self.start_time: Optional[float] = None
        self.start_memory: float = 0.0
        self.input_size = 0

    @contextmanager
    def profile_operation(self, operation_name: str, input_size: int = 0):
        """
        Context manager for profiling operations.

        Args:
            operation_name: Name of the operation being profiled
            input_size: Size of input data in bytes
        """
        self.start_profiling(operation_name, input_size)
        try:
            yield self
        finally:
            if self.current_operation:
                self.stop_profiling()

    def start_profiling(self, operation_name: str, input_size: int = 0):
        self.current_operation = operation_name
        self.start_time = time.perf_counter()
        self.input_size = input_size
        self.start_memory = self._rss_mb()

        self.logger.debug(f"Started profiling: {operation_name}")

    def stop_profiling(self, output_size: int = 0, entries_emitted: int = 0) -> PerformanceMetrics:
        """
        Stop profiling and return metrics.

        Args:
            output_size: Size of output data in bytes
            entries_emitted: Number of flattened entries produced

        Returns:
            PerformanceMetrics object with collected data
        """
        if not self.current_operation or self.start_time is None:
            raise ValueError("No active profiling session")

        duration = time.perf_counter() - self.start_time
        throughput = (self.input_size / 1024 / 1024) / duration if duration > 0 else 0

        metrics = PerformanceMetrics(
            operation_name=self.current_operation,
            duration=duration,
            input_size=self.input_size,
            output_size=output_size,
            entries_emitted=entries_emitted,
            memory_start_mb=self.start_memory,
            memory_end_mb=self._rss_mb(),
            throughput_mbps=throughput
        )
        self.metrics_history.append(metrics)

        self.logger.debug(f"Performance Summary - {self.current_operation}:")
        self.logger.debug(f"  Duration: {duration * 1000:.2f}ms")
        self.logger.debug(f"  Throughput: {throughput:.2f} MB/s")
        self.logger.debug(f"  Memory: {metrics.memory_start_mb:.1f} MB -> {metrics.memory_end_mb:.1f} MB")
        self.logger.debug(f"  Entries Emitted: {entries_emitted}")

        self.current_operation = None
        self.start_time = None

        return metrics

    def get_performance_summary(self) -> Dict[str, Any]:
        """Summarize all recorded operations."""
        if not self.metrics_history:
            return {"total_operations": 0}

        return {
            "total_operations": len(self.metrics_history),
            "total_duration": sum(m.duration for m in self.metrics_history),
            "total_input_bytes": sum(m.input_size for m in self.metrics_history),
            "total_entries": sum(m.entries_emitted for m in self.metrics_history),
            "peak_memory_mb": max(m.memory_end_mb for m in self.metrics_history),
        }

    def _rss_mb(self) -> float:
        try:
            return psutil.Process().memory_info().rss / 1024 / 1024
        except psutil.Error as e:
            self.logger.warning(f"Memory sampling failed: {e}")
            return 0.0
