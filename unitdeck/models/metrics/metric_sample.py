"""Metric sample models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MetricSample:
    """One observation of a metric.

    Attributes:
        timestamp: Epoch milliseconds when the sample was taken.
        value: CPU percent or memory bytes.
    """

    timestamp: int
    value: float
