"""Metrics history - bounded CPU and memory series sampled from polled snapshots."""

from __future__ import annotations

import logging
import time
from collections import deque
from collections.abc import Callable
from typing import Any

from unitdeck.constants.defaults import METRICS_MAX_POINTS_DEFAULT
from unitdeck.models.core import EntitySnapshot
from unitdeck.models.metrics.metric_sample import MetricSample

logger = logging.getLogger(__name__)


class MetricsHistory:
    """Two FIFO series (CPU percent, memory bytes) capped at ``max_points``.

    Only running snapshots are sampled; a tick with a stopped entity or a
    missing metric adds nothing to that series. One instance belongs to one
    entity view and is discarded with it.
    """

    def __init__(
        self,
        max_points: int = METRICS_MAX_POINTS_DEFAULT,
        *,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if max_points < 1:
            raise ValueError(f"max_points must be positive, got {max_points}")
        self._max_points = max_points
        self._clock = clock
        self._cpu: deque[MetricSample] = deque(maxlen=max_points)
        self._memory: deque[MetricSample] = deque(maxlen=max_points)

    @property
    def max_points(self) -> int:
        return self._max_points

    def on_snapshot(self, snapshot: EntitySnapshot | None) -> bool:
        """Sample ``snapshot``.

        Returns:
            True if at least one series received a sample.
        """
        if snapshot is None or not snapshot.is_running:
            return False

        now_ms = int(self._clock() * 1000)
        sampled = False

        cpu = snapshot.cpu_usage
        if isinstance(cpu, (int, float)) and cpu >= 0:
            self._cpu.append(MetricSample(timestamp=now_ms, value=float(cpu)))
            sampled = True

        memory = snapshot.memory_usage
        if memory is not None:
            self._memory.append(MetricSample(timestamp=now_ms, value=float(memory)))
            sampled = True

        return sampled

    @property
    def cpu_history(self) -> list[MetricSample]:
        return list(self._cpu)

    @property
    def memory_history(self) -> list[MetricSample]:
        return list(self._memory)

    @property
    def cpu_chart_data(self) -> list[dict[str, Any]]:
        """``[{"index": i, "cpu": value}]``; the index is the chart x-axis."""
        return [{"index": index, "cpu": sample.value} for index, sample in enumerate(self._cpu)]

    @property
    def memory_chart_data(self) -> list[dict[str, Any]]:
        return [
            {"index": index, "memory": sample.value}
            for index, sample in enumerate(self._memory)
        ]

    @property
    def has_enough_data(self) -> bool:
        """Charts render only once a series has a line to draw."""
        return len(self._cpu) > 1 or len(self._memory) > 1


__all__ = ["MetricsHistory"]
