"""Reusable widgets."""

from unitdeck.widgets.metrics_charts import MetricsCharts

__all__ = ["MetricsCharts"]
