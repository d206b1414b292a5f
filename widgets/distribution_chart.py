from __future__ import annotations

import wx

from utils.constants import (
    CHART_BAR_GAP,
    CHART_LABEL_HEIGHT,
    CHART_MIN_HEIGHT,
    DARK_PANEL,
    LIGHT_TEXT,
    SUBDUED_TEXT,
)
from utils.probability_display import ChartBar


class DistributionChartPanel(wx.Panel):
    """Bar chart of P(X = k), one bar per number of targets drawn."""

    _PADDING = 8
    _MAX_BAR_WIDTH = 60

    def __init__(self, parent: wx.Window) -> None:
        super().__init__(parent, style=wx.BORDER_NONE)
        self._bars: list[ChartBar] = []
        self.SetBackgroundStyle(wx.BG_STYLE_PAINT)
        self.SetBackgroundColour(DARK_PANEL)
        self.SetMinSize((-1, CHART_MIN_HEIGHT))
        self.Bind(wx.EVT_PAINT, self._on_paint)
        self.Bind(wx.EVT_SIZE, self._on_size)

    def set_bars(self, bars: list[ChartBar]) -> None:
        self._bars = list(bars)
        self.Refresh()

    def clear(self) -> None:
        self.set_bars([])

    def _on_size(self, event: wx.SizeEvent) -> None:
        self.Refresh()
        event.Skip()

    def _on_paint(self, _event: wx.PaintEvent) -> None:
        dc = wx.AutoBufferedPaintDC(self)
        dc.SetBackground(wx.Brush(self.GetBackgroundColour()))
        dc.Clear()
        if not self._bars:
            return

        width, height = self.GetClientSize()
        plot_top = self._PADDING + CHART_LABEL_HEIGHT
        plot_bottom = height - self._PADDING - CHART_LABEL_HEIGHT
        plot_height = max(plot_bottom - plot_top, 0)
        slot_width = max((width - self._PADDING * 2) // len(self._bars), 1)
        bar_width = max(min(slot_width - CHART_BAR_GAP, self._MAX_BAR_WIDTH), 1)

        font = self.GetFont()
        font.SetPointSize(max(font.GetPointSize() - 1, 7))
        dc.SetFont(font)

        for index, bar in enumerate(self._bars):
            slot_x = self._PADDING + index * slot_width
            center_x = slot_x + slot_width // 2
            bar_height = int(plot_height * bar.height_percent / 100)
            bar_top = plot_bottom - bar_height

            if bar_height > 0:
                colour = wx.Colour(*bar.color)
                dc.SetBrush(wx.Brush(colour))
                dc.SetPen(wx.Pen(colour))
                dc.DrawRectangle(center_x - bar_width // 2, bar_top, bar_width, bar_height)

            dc.SetTextForeground(wx.Colour(*LIGHT_TEXT))
            value_width, value_height = dc.GetTextExtent(bar.label)
            dc.DrawText(bar.label, center_x - value_width // 2, bar_top - value_height - 2)

            k_label = str(bar.successes)
            dc.SetTextForeground(wx.Colour(*SUBDUED_TEXT))
            k_width, _ = dc.GetTextExtent(k_label)
            dc.DrawText(k_label, center_x - k_width // 2, plot_bottom + 2)
