import io
import logging
from typing import Optional, Sequence

from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure
from matplotlib.ticker import FuncFormatter

from schemas import PriceMap

logger = logging.getLogger("ChartRenderer")

HIGHLIGHT_COLOR = (6 / 255, 182 / 255, 212 / 255, 0.95)
BASE_COLOR = (99 / 255, 102 / 255, 241 / 255, 0.8)


def _usd_tick(val, _pos) -> str:
    return f"${val:,.0f}"


class ChartRenderer:
    """Bar chart of the watchlist prices with one highlighted symbol.

    Figures are standalone and never registered with pyplot.
    """

    def __init__(self, watchlist: Sequence[str], figsize=(8, 4.5), dpi: int = 100):
        self.watchlist = tuple(watchlist)
        self.figsize = figsize
        self.dpi = dpi
        self.fig: Optional[Figure] = None
        self.last_png: Optional[bytes] = None
        self.last_values: Optional[list] = None
        self.last_colors: Optional[list] = None
        self.last_highlight: Optional[str] = None

    def bar_colors(self, highlight: Optional[str]) -> list:
        return [HIGHLIGHT_COLOR if sym == highlight else BASE_COLOR for sym in self.watchlist]

    def render(self, price_map: PriceMap, highlight: Optional[str]) -> bytes:
        # the previous figure is dropped; every call starts from scratch
        if self.fig is not None:
            self.fig.clear()
            self.fig = None

        labels = list(self.watchlist)
        values = [price_map.get(sym) or 0 for sym in labels]
        colors = self.bar_colors(highlight)

        self.fig = Figure(figsize=self.figsize)
        FigureCanvasAgg(self.fig)
        ax = self.fig.add_subplot(111)
        ax.bar(labels, values, color=colors)
        ax.set_ylabel("Price (USD)")
        ax.yaxis.set_major_formatter(FuncFormatter(_usd_tick))
        ax.grid(axis="y", alpha=0.3)
        ax.set_axisbelow(True)
        self.fig.tight_layout()

        buf = io.BytesIO()
        self.fig.savefig(buf, format="png", dpi=self.dpi)

        self.last_png = buf.getvalue()
        self.last_values = values
        self.last_colors = colors
        self.last_highlight = highlight
        logger.debug(f"Chart rendered, highlight={highlight}")
        return self.last_png
