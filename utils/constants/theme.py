"""Colors, sizes and spacing used by the calculator window."""

DARK_BG = (20, 22, 27)
DARK_PANEL = (34, 39, 46)
LIGHT_TEXT = (236, 236, 236)
SUBDUED_TEXT = (185, 191, 202)
ERROR_TEXT = (240, 110, 110)

PADDING_SM = 4
PADDING_MD = 8
PADDING_LG = 12

DRAW_ODDS_FRAME_SIZE = (560, 620)
DRAW_ODDS_FRAME_MIN_SIZE = (480, 520)
SPIN_CTRL_WIDTH = 80

CHART_MIN_HEIGHT = 220
CHART_BAR_GAP = 6
CHART_LABEL_HEIGHT = 18
