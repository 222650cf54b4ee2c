"""CPU and memory history charts for a detail view."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Static
from textual_plotext import PlotextPlot

from unitdeck.constants.values import COLLECTING_DATA_LABEL
from unitdeck.sync.metrics_history import MetricsHistory

_MIB = 1024 * 1024


class MetricsCharts(Vertical):
    """Two line charts fed from a MetricsHistory.

    A placeholder is shown until one of the series has two samples.
    """

    DEFAULT_CSS = """
    MetricsCharts {
        height: 16;
        border: round $primary;
        border-title-color: $primary;
    }

    MetricsCharts #metrics-placeholder {
        height: 1fr;
        content-align: center middle;
        color: $text-muted;
    }

    MetricsCharts #metrics-plots {
        height: 1fr;
    }

    MetricsCharts PlotextPlot {
        width: 1fr;
    }
    """

    def compose(self) -> ComposeResult:
        yield Static(COLLECTING_DATA_LABEL, id="metrics-placeholder")
        with Horizontal(id="metrics-plots"):
            yield PlotextPlot(id="cpu-plot")
            yield PlotextPlot(id="memory-plot")

    def on_mount(self) -> None:
        self.border_title = "Resource usage"
        self.query_one("#metrics-plots").display = False

    def update_history(self, history: MetricsHistory) -> None:
        enough = history.has_enough_data
        self.query_one("#metrics-placeholder").display = not enough
        self.query_one("#metrics-plots").display = enough
        if not enough:
            return

        cpu = history.cpu_chart_data
        self._render_plot(
            "#cpu-plot",
            [point["index"] for point in cpu],
            [point["cpu"] for point in cpu],
            title="CPU",
            color="cyan",
            y_label="%",
        )
        memory = history.memory_chart_data
        self._render_plot(
            "#memory-plot",
            [point["index"] for point in memory],
            [point["memory"] / _MIB for point in memory],
            title="Memory",
            color="magenta",
            y_label="MiB",
        )

    def _render_plot(
        self,
        plot_id: str,
        x_values: list[int],
        y_values: list[float],
        *,
        title: str,
        color: str,
        y_label: str,
    ) -> None:
        plot = self.query_one(plot_id, PlotextPlot)
        plt = plot.plt
        plt.clear_data()
        plt.title(title)
        plt.ylabel(y_label)
        if x_values:
            plt.plot(x_values, y_values, color=color, marker="dot")
        plot.refresh()
