"""Tests for MetricsHistory."""

from __future__ import annotations

import itertools

import pytest

from unitdeck.models.core.container_info import ContainerInfo
from unitdeck.models.core.service_info import ServiceDetailsInfo, ServiceInfo
from unitdeck.models.metrics.metric_sample import MetricSample
from unitdeck.sync.metrics_history import MetricsHistory


def _clock(start: float = 1_700_000_000.0):
    ticks = itertools.count()
    return lambda: start + next(ticks)


def _service(cpu: float | None = 42.5, memory: int | None = 1024, running: bool = True) -> ServiceInfo:
    return ServiceInfo(
        name="nginx.service",
        active_state="active" if running else "inactive",
        sub_state="running" if running else "dead",
        cpu_usage=cpu,
        memory_usage=memory,
    )


@pytest.mark.unit
class TestMetricsHistory:
    """Tests for MetricsHistory sampling."""

    def test_samples_running_snapshot(self) -> None:
        history = MetricsHistory(clock=_clock())
        assert history.on_snapshot(_service(cpu=42.5, memory=2048)) is True

        assert history.cpu_history == [MetricSample(timestamp=1_700_000_000_000, value=42.5)]
        assert history.memory_history[0].value == 2048.0
        assert history.cpu_chart_data == [{"index": 0, "cpu": 42.5}]
        assert history.memory_chart_data == [{"index": 0, "memory": 2048.0}]

    def test_stopped_entity_is_not_sampled(self) -> None:
        history = MetricsHistory(clock=_clock())
        assert history.on_snapshot(_service(running=False)) is False
        assert history.on_snapshot(None) is False
        assert history.cpu_history == []
        assert history.memory_history == []

    def test_measuring_and_missing_cpu_are_skipped(self) -> None:
        history = MetricsHistory(clock=_clock())
        history.on_snapshot(_service(cpu=-1, memory=100))
        history.on_snapshot(_service(cpu=None, memory=200))

        assert history.cpu_history == []
        assert [sample.value for sample in history.memory_history] == [100.0, 200.0]

    def test_zero_values_are_samples(self) -> None:
        history = MetricsHistory(clock=_clock())
        history.on_snapshot(_service(cpu=0.0, memory=0))
        assert history.cpu_history[0].value == 0.0
        assert history.memory_history[0].value == 0.0

    def test_fifo_cap(self) -> None:
        history = MetricsHistory(max_points=3, clock=_clock())
        for cpu in (1.0, 2.0, 3.0, 4.0, 5.0):
            history.on_snapshot(_service(cpu=cpu))

        assert [sample.value for sample in history.cpu_history] == [3.0, 4.0, 5.0]
        assert [point["index"] for point in history.cpu_chart_data] == [0, 1, 2]
        timestamps = [sample.timestamp for sample in history.cpu_history]
        assert timestamps == sorted(timestamps)

    def test_has_enough_data(self) -> None:
        history = MetricsHistory(clock=_clock())
        assert not history.has_enough_data
        history.on_snapshot(_service())
        assert not history.has_enough_data
        history.on_snapshot(_service())
        assert history.has_enough_data

    def test_accepts_details_and_containers(self) -> None:
        history = MetricsHistory(clock=_clock())
        details = ServiceDetailsInfo(service=_service(cpu=5.0))
        container = ContainerInfo.model_validate(
            {"id": "abc", "status": {"running": True}, "cpuUsage": 7.5, "memoryUsage": 10}
        )
        history.on_snapshot(details)
        history.on_snapshot(container)
        assert [sample.value for sample in history.cpu_history] == [5.0, 7.5]

    def test_invalid_max_points(self) -> None:
        with pytest.raises(ValueError):
            MetricsHistory(max_points=0)
