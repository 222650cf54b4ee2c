from unitdeck.models.metrics.metric_sample import MetricSample

__all__ = ["MetricSample"]
