"""wxPython window for the draw odds calculator."""

from __future__ import annotations

from typing import TYPE_CHECKING

import wx
from loguru import logger

from services.draw_odds_service import DrawOddsResult
from utils.constants import (
    CARDS_DRAWN_PER_TURN,
    DARK_BG,
    DARK_PANEL,
    DRAW_ODDS_FRAME_MIN_SIZE,
    DRAW_ODDS_FRAME_SIZE,
    ERROR_TEXT,
    LIGHT_TEXT,
    MAX_DECK_SIZE_INPUT,
    MAX_TURNS_INPUT,
    OPENING_HAND_SIZE,
    PADDING_LG,
    PADDING_MD,
    PADDING_SM,
    SPIN_CTRL_WIDTH,
    SUBDUED_TEXT,
)
from utils.probability_display import (
    EMPTY_VALUE,
    SUMMARY_FIELDS,
    SUMMARY_TITLES,
    build_chart_bars,
    probability_color,
    summary_labels,
)
from widgets.distribution_chart import DistributionChartPanel

if TYPE_CHECKING:
    from controllers.calculator_controller import CalculatorController


class DrawOddsFrame(wx.Frame):
    """Live hypergeometric calculator: every input change recalculates."""

    PRESETS = [
        ("Open 50", 50, OPENING_HAND_SIZE),
        ("Open 60", 60, OPENING_HAND_SIZE),
        ("Draw 2", 50, CARDS_DRAWN_PER_TURN),
    ]

    def __init__(self, controller: CalculatorController, parent: wx.Window | None = None) -> None:
        super().__init__(parent, title="Draw Odds Calculator", size=DRAW_ODDS_FRAME_SIZE)
        self.controller = controller
        self.controller.on_result = self._on_result
        self._suppress_events = False
        self.stat_labels: dict[str, wx.StaticText] = {}

        self._build_ui()
        self.SetMinSize(DRAW_ODDS_FRAME_MIN_SIZE)
        self.Centre(wx.BOTH)
        self.Bind(wx.EVT_CLOSE, self.on_close)

        self._sync_inputs_from_controller()
        wx.CallAfter(self.controller.recalculate)

    # ------------------------------------------------------------------ UI ------------------------------------------------------------------
    def _build_ui(self) -> None:
        self.SetBackgroundColour(DARK_BG)

        panel = wx.Panel(self)
        panel.SetBackgroundColour(DARK_BG)
        sizer = wx.BoxSizer(wx.VERTICAL)
        panel.SetSizer(sizer)

        title = wx.StaticText(panel, label="Hypergeometric Draw Odds")
        self._stylize_label(title, bold=True)
        sizer.Add(title, 0, wx.ALL, PADDING_LG)

        sizer.Add(self._build_inputs(panel), 0, wx.LEFT | wx.RIGHT | wx.EXPAND, PADDING_LG)

        self.deck_status_label = wx.StaticText(panel, label="")
        self._stylize_label(self.deck_status_label, subtle=True)
        sizer.Add(self.deck_status_label, 0, wx.ALL, PADDING_LG)

        self.error_label = wx.StaticText(panel, label="")
        self.error_label.SetForegroundColour(ERROR_TEXT)
        self.error_label.SetBackgroundColour(DARK_BG)
        sizer.Add(self.error_label, 0, wx.LEFT | wx.RIGHT | wx.EXPAND, PADDING_LG)

        sizer.Add(self._build_stats(panel), 0, wx.ALL | wx.EXPAND, PADDING_LG)

        chart_title = wx.StaticText(panel, label="Distribution of targets drawn")
        self._stylize_label(chart_title, subtle=True)
        sizer.Add(chart_title, 0, wx.LEFT | wx.RIGHT, PADDING_LG)

        self.chart = DistributionChartPanel(panel)
        sizer.Add(self.chart, 1, wx.ALL | wx.EXPAND, PADDING_LG)

    def _build_inputs(self, panel: wx.Panel) -> wx.Sizer:
        inputs = wx.BoxSizer(wx.VERTICAL)

        grid = wx.FlexGridSizer(4, 2, PADDING_SM, PADDING_MD)
        inputs.Add(grid, 0, wx.EXPAND)

        self.spin_deck_size = self._add_spin(
            panel, grid, "Deck Size:", MAX_DECK_SIZE_INPUT, "Total cards in deck"
        )
        self.spin_turns = self._add_spin(
            panel,
            grid,
            "Turns Elapsed:",
            MAX_TURNS_INPUT,
            f"Each turn draws {CARDS_DRAWN_PER_TURN} cards from the deck",
        )
        self.spin_sample = self._add_spin(
            panel, grid, "Cards Drawn:", MAX_DECK_SIZE_INPUT, "Number of cards drawn (n)"
        )
        self.spin_targets = self._add_spin(
            panel, grid, "Targets in Deck:", MAX_DECK_SIZE_INPUT, "Number of target cards (K)"
        )

        buttons = wx.BoxSizer(wx.HORIZONTAL)
        inputs.Add(buttons, 0, wx.TOP, PADDING_MD)
        for label, deck, drawn in self.PRESETS:
            btn = wx.Button(panel, label=label, size=(70, 24))
            self._stylize_secondary_button(btn)
            btn.Bind(wx.EVT_BUTTON, lambda _evt, d=deck, n=drawn: self._apply_preset(d, n))
            buttons.Add(btn, 0, wx.RIGHT, PADDING_SM)

        reset_btn = wx.Button(panel, label="Reset", size=(70, 24))
        self._stylize_secondary_button(reset_btn)
        reset_btn.Bind(wx.EVT_BUTTON, self._on_reset)
        buttons.Add(reset_btn, 0)
        return inputs

    def _add_spin(
        self, panel: wx.Panel, grid: wx.FlexGridSizer, label: str, maximum: int, tooltip: str
    ) -> wx.SpinCtrl:
        text = wx.StaticText(panel, label=label)
        self._stylize_label(text)
        spin = wx.SpinCtrl(panel, min=0, max=maximum, size=(SPIN_CTRL_WIDTH, -1))
        spin.SetToolTip(tooltip)
        spin.Bind(wx.EVT_TEXT, self._on_input_changed)
        grid.Add(text, 0, wx.ALIGN_CENTER_VERTICAL)
        grid.Add(spin, 0)
        return spin

    def _build_stats(self, panel: wx.Panel) -> wx.Sizer:
        box = wx.Panel(panel)
        box.SetBackgroundColour(DARK_PANEL)
        grid = wx.FlexGridSizer(len(SUMMARY_FIELDS), 2, PADDING_SM, PADDING_LG)
        grid.AddGrowableCol(1)
        for name in SUMMARY_FIELDS:
            title = wx.StaticText(box, label=SUMMARY_TITLES[name])
            title.SetForegroundColour(LIGHT_TEXT)
            value = wx.StaticText(box, label=EMPTY_VALUE)
            value.SetForegroundColour(LIGHT_TEXT)
            font = value.GetFont()
            font.MakeBold()
            value.SetFont(font)
            grid.Add(title, 0, wx.ALIGN_CENTER_VERTICAL)
            grid.Add(value, 0, wx.ALIGN_RIGHT)
            self.stat_labels[name] = value
        outer = wx.BoxSizer(wx.VERTICAL)
        outer.Add(grid, 0, wx.ALL | wx.EXPAND, PADDING_MD)
        box.SetSizer(outer)

        sizer = wx.BoxSizer(wx.VERTICAL)
        sizer.Add(box, 0, wx.EXPAND)
        return sizer

    def _stylize_label(
        self, label: wx.StaticText, *, bold: bool = False, subtle: bool = False
    ) -> None:
        label.SetForegroundColour(SUBDUED_TEXT if subtle else LIGHT_TEXT)
        label.SetBackgroundColour(DARK_BG)
        font = label.GetFont()
        if bold:
            font.MakeBold()
            font.SetPointSize(font.GetPointSize() + 1)
        label.SetFont(font)

    def _stylize_secondary_button(self, button: wx.Button) -> None:
        button.SetBackgroundColour(DARK_PANEL)
        button.SetForegroundColour(LIGHT_TEXT)

    # ------------------------------------------------------------------ Event handlers -------------------------------------------------------
    def _sync_inputs_from_controller(self) -> None:
        scenario = self.controller.scenario
        self._suppress_events = True
        try:
            self.spin_deck_size.SetValue(scenario.deck_size)
            self.spin_turns.SetValue(scenario.turns_elapsed)
            self.spin_sample.SetValue(scenario.sample_size)
            self.spin_targets.SetValue(scenario.targets)
        finally:
            self._suppress_events = False

    def _on_input_changed(self, event: wx.CommandEvent) -> None:
        if not self._suppress_events:
            self.controller.update_inputs(
                deck_size=self.spin_deck_size.GetValue(),
                turns_elapsed=self.spin_turns.GetValue(),
                sample_size=self.spin_sample.GetValue(),
                targets=self.spin_targets.GetValue(),
            )
        event.Skip()

    def _apply_preset(self, deck_size: int, cards_drawn: int) -> None:
        self.controller.update_inputs(deck_size=deck_size, turns_elapsed=0, sample_size=cards_drawn)
        self._sync_inputs_from_controller()

    def _on_reset(self, _event: wx.CommandEvent) -> None:
        self.controller.reset()
        self._sync_inputs_from_controller()

    def _on_result(self, result: DrawOddsResult) -> None:
        self.deck_status_label.SetLabel(
            f"Turn {result.turns_elapsed}: {result.remaining_deck} cards remaining in deck"
        )
        self.error_label.SetLabel(". ".join(result.errors))

        labels = summary_labels(result.summary)
        for name, widget in self.stat_labels.items():
            widget.SetLabel(labels[name])
            if result.summary is None:
                widget.SetForegroundColour(LIGHT_TEXT)
                continue
            colour = probability_color(getattr(result.summary, name))
            widget.SetForegroundColour(wx.Colour(*colour))

        self.chart.set_bars(build_chart_bars(result.distribution))
        self.Layout()

    def on_close(self, event: wx.CloseEvent) -> None:
        logger.info("Closing draw odds calculator")
        self.controller.on_result = None
        event.Skip()
