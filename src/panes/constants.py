"""
Default values for text formats and the built-in metrics providers.
"""

# Text format defaults
DEFAULT_FONT_SIZE = 16
DEFAULT_LINE_SPACING = 1.0

# Heuristic metrics: widths in the character table are pixels at this size
HEURISTIC_REFERENCE_SIZE = 16
HEURISTIC_LINE_HEIGHT_RATIO = 1.0

# Monospace metrics defaults, as fractions of the font size
MONOSPACE_ADVANCE_RATIO = 0.6
MONOSPACE_LINE_HEIGHT_RATIO = 1.2

# Font size search bounds used by fit_font_size
MIN_FONT_SIZE = 1

# Relative slack when comparing measured text against the space it was measured for.
# Weighted splits can hand a pane a few ulps less than content_size asked for.
FIT_TOLERANCE = 1e-9
