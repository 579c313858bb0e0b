"""
Theme definitions for Fit Route.

Each theme is a dict mapping semantic color names to RGBA tuples, so
widgets and the view tree reference intent ("btn_primary") rather than
raw color values.  The landing screen ships with a single light theme.
"""

THEMES = {
    "light": {
        # -- Backgrounds --
        "bg_root":            (1, 1, 1, 1),
        "scrim":              (1, 1, 1, 1),  # alpha comes from the gradient

        # -- Text --
        "text_eyebrow":       (0, 0, 0, 1),
        "text_headline":      (0, 0, 0, 1),
        "text_body":          (0, 0, 0, 0.87),   # black87
        "text_fine_print":    (0, 0, 0, 0.54),   # black54

        # -- Buttons --
        "btn_primary":        (0.298, 0.686, 0.314, 1),  # Material green 500
        "btn_secondary":      (0, 0, 0, 1),
        "text_btn_primary":   (1, 1, 1, 1),
        "text_btn_secondary": (1, 1, 1, 1),
    },
}

CURRENT_THEME = "light"

MISSING_COLOR = (1, 0, 1, 1)  # magenta


def get_color(name):
    """Return RGBA tuple for semantic color name in the app theme."""
    # Magenta makes missing keys visible without crashing the app.
    return THEMES[CURRENT_THEME].get(name, MISSING_COLOR)
