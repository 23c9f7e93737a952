"""Color palette."""

# RGB tuples
BG = (245, 245, 245)
TILE = (24, 24, 28)
GUIDE_IDLE = (211, 211, 211)
GUIDE_PRESSED = (128, 128, 128)
GUIDE_FAILED = (220, 40, 40)
GUIDE_TEXT = (24, 24, 28)
SCORE_TEXT = (220, 60, 60)
MENU_OVERLAY = (177, 177, 177, 178)
MENU_TEXT = (24, 24, 28)
MENU_HINT = (70, 70, 90)
PICKER_BG = (18, 18, 24)
PICKER_TEXT = (220, 220, 220)
PICKER_SELECTED = (80, 220, 100)
PICKER_ERROR = (220, 60, 60)
