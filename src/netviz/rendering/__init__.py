from .plot import PlotConfig
from .chart_generator import address_bar_chart

__all__ = ["PlotConfig", "address_bar_chart"]
