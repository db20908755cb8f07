"""
Observability Module
====================

Timing hooks and count metrics for the text graph processor.

Standard library only. Metrics are off by default and cost a single
attribute check per call when disabled.

Example:
    from textgraph import TextGraphProcessor

    processor = TextGraphProcessor(enable_metrics=True)
    processor.load_text("the cat saw the dog")
    processor.compute_pagerank()

    print(processor.get_metrics()['compute_pagerank']['avg_ms'])
    print(processor.get_metrics_summary())

Logging Configuration:
    logging.getLogger('textgraph').setLevel(logging.DEBUG)
"""

import functools
import logging
import time
from collections import defaultdict
from typing import Any, Callable, Dict, Optional

logger = logging.getLogger(__name__)


class MetricsCollector:
    """
    Collects and aggregates timing and count metrics for operations.

    Not thread-safe; the processor is single-threaded.

    Attributes:
        enabled: Whether metrics collection is active
        timings: Dict mapping operation names to timing aggregates
        counts: Dict mapping metric names to counters
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self.timings: Dict[str, Dict[str, float]] = defaultdict(lambda: {
            'count': 0,
            'total_ms': 0.0,
            'min_ms': float('inf'),
            'max_ms': 0.0,
        })
        self.counts: Dict[str, int] = defaultdict(int)

    def record_timing(self, operation: str, duration_ms: float) -> None:
        """
        Record a timing measurement for an operation.

        Args:
            operation: Name of the operation (e.g., "compute_pagerank")
            duration_ms: Duration in milliseconds
        """
        if not self.enabled:
            return

        op_data = self.timings[operation]
        op_data['count'] += 1
        op_data['total_ms'] += duration_ms
        op_data['min_ms'] = min(op_data['min_ms'], duration_ms)
        op_data['max_ms'] = max(op_data['max_ms'], duration_ms)

    def record_count(self, metric_name: str, count: int = 1) -> None:
        """Add to a count metric (e.g., "bridge_words_inserted")."""
        if not self.enabled:
            return
        self.counts[metric_name] += count

    def get_operation_stats(self, operation: str) -> Dict[str, Any]:
        """
        Get statistics for a specific operation or count metric.

        Returns:
            Dict with count, total_ms, avg_ms, min_ms, max_ms for timed
            operations, just count for counters, empty if unknown
        """
        if operation in self.timings:
            op_data = self.timings[operation]
            return {
                'count': op_data['count'],
                'total_ms': op_data['total_ms'],
                'avg_ms': op_data['total_ms'] / op_data['count'] if op_data['count'] else 0.0,
                'min_ms': op_data['min_ms'] if op_data['min_ms'] != float('inf') else 0.0,
                'max_ms': op_data['max_ms'],
            }
        if operation in self.counts:
            return {'count': self.counts[operation]}
        return {}

    def get_all_stats(self) -> Dict[str, Dict[str, Any]]:
        """Statistics for every recorded operation and counter."""
        names = list(self.timings) + [name for name in self.counts if name not in self.timings]
        return {name: self.get_operation_stats(name) for name in names}

    def reset(self) -> None:
        """Clear all collected metrics."""
        self.timings.clear()
        self.counts.clear()

    def enable(self) -> None:
        """Enable metrics collection."""
        self.enabled = True

    def disable(self) -> None:
        """Disable metrics collection."""
        self.enabled = False

    def get_summary(self) -> str:
        """
        Get a human-readable summary of all metrics.

        Returns:
            Formatted string with metrics table
        """
        if not self.timings and not self.counts:
            return "No metrics collected."

        lines = ["Metrics Summary", "=" * 80]

        if self.timings:
            lines.append("\nTiming Operations:")
            lines.append(f"{'Operation':<30} {'Count':>8} {'Avg(ms)':>10} {'Min(ms)':>10} {'Max(ms)':>10} {'Total(ms)':>12}")
            lines.append("-" * 80)
            for op_name in sorted(self.timings):
                stats = self.get_operation_stats(op_name)
                lines.append(
                    f"{op_name:<30} {stats['count']:>8} "
                    f"{stats['avg_ms']:>10.2f} {stats['min_ms']:>10.2f} "
                    f"{stats['max_ms']:>10.2f} {stats['total_ms']:>12.2f}"
                )

        if self.counts:
            lines.append("\nCount Metrics:")
            lines.append(f"{'Metric':<40} {'Count':>10}")
            lines.append("-" * 50)
            for name in sorted(self.counts):
                lines.append(f"{name:<40} {self.counts[name]:>10}")

        return "\n".join(lines)


def timed(operation_name: Optional[str] = None):
    """
    Decorator for timing method calls and recording to metrics.

    The instance must expose a `_metrics` MetricsCollector; when it is
    missing or disabled the method runs untimed.

    Args:
        operation_name: Custom name for the operation (defaults to function name)

    Example:
        >>> class Engine:
        ...     @timed("rank")
        ...     def rank(self):
        ...         return {}
    """
    def decorator(func: Callable) -> Callable:
        op_name = operation_name or func.__name__

        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            metrics = getattr(self, '_metrics', None)
            if not metrics or not metrics.enabled:
                return func(self, *args, **kwargs)

            start = time.perf_counter()
            try:
                return func(self, *args, **kwargs)
            finally:
                duration_ms = (time.perf_counter() - start) * 1000.0
                metrics.record_timing(op_name, duration_ms)
                logger.debug("%s took %.2fms", op_name, duration_ms)

        return wrapper
    return decorator
