"""Bar chart rendering for top-N address histograms."""

from __future__ import annotations

from io import BytesIO
from typing import Optional

from ..core.config import settings
from ..core.decorators import handle_render_errors
from ..core.dependencies import container
from ..core.models import TopNResult
from .plot import PlotConfig


def _heading(config: PlotConfig) -> str:
    if config.subtitle:
        return f"{config.title}\n{config.subtitle}" if config.title else config.subtitle
    return config.title


@handle_render_errors
def address_bar_chart(
    result: TopNResult,
    config: Optional[PlotConfig] = None,
    *,
    width: Optional[float] = None,
    height: Optional[float] = None,
) -> bytes:
    """Return a PNG bar chart with one bar per slot of ``result``.

    Padding slots keep their position so charts of the same capacity share a
    layout. An empty result renders nothing and returns ``b""``.
    """
    if not result.non_empty():
        return b""
    plt = container.get("pyplot", feature="chart rendering")
    config = config or PlotConfig()

    labels = [entry.key for entry in result]
    values = [entry.count for entry in result]
    positions = list(range(len(values)))

    fig, ax = plt.subplots(
        figsize=(width or settings.chart_width, height or settings.chart_height)
    )
    ax.bar(positions, values)
    ax.set_xticks(positions)
    ax.set_xticklabels(labels, rotation=45, ha="right")
    ax.set_xlim(
        -0.5 - config.pad_left_factor,
        len(positions) - 0.5 + config.pad_right_factor,
    )
    if config.x_label:
        ax.set_xlabel(config.x_label)
    if config.y_label:
        ax.set_ylabel(config.y_label)
    ax.text(
        0.99,
        0.98,
        f"{result.shown_count} of {result.total_count}",
        transform=ax.transAxes,
        ha="right",
        va="top",
        fontsize="small",
    )

    heading = _heading(config)
    if heading:
        if config.title_on_bottom:
            fig.text(0.5, 0.01, heading, ha="center", va="bottom")
        else:
            ax.set_title(heading)

    buf = BytesIO()
    fig.savefig(buf, format="png", bbox_inches="tight")
    plt.close(fig)
    return buf.getvalue()
