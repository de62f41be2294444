"""Static layout settings handed to the chart renderer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PlotConfig:
    """Title, labels and padding of a bar chart.

    ``pad_left_factor`` and ``pad_right_factor`` widen the x-range by that
    fraction of one bar slot on each side.
    """

    title: str = ""
    subtitle: str = ""
    x_label: str = ""
    y_label: str = ""
    title_on_bottom: bool = False
    pad_left_factor: float = 0.0
    pad_right_factor: float = 0.0

    def __post_init__(self) -> None:
        if self.pad_left_factor < 0 or self.pad_right_factor < 0:
            raise ValueError("padding factors must not be negative")
