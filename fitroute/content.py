"""
Static presentation content for the Fit Route landing screen.

Every string and style constant the screen shows lives here so the view
tree in ``fitroute.view`` is a pure function of this module.  Sizes are
density-independent: ``*_SP`` values are font sizes in sp, everything
else is in dp.  Colors are semantic names resolved by ``app.theme``.
"""

APP_TITLE = "Fit Route"

# ── Assets ────────────────────────────────────────────────────────────
BACKGROUND_IMAGE = "runners.png"

# ── Copy ──────────────────────────────────────────────────────────────
EYEBROW_TEXT = "Fit Route"
HEADLINE_TEXT = "Force multiplier for\nyour daily walk."
BODY_TEXT = (
    "Combining the power of cardio and strength training, "
    "helping you stay fit—one step at a time."
)
PRIMARY_CTA_LABEL = "Subscribe Now"
SECONDARY_CTA_LABEL = "Start Free Trial"
FINE_PRINT_TEXT = "30 days free trial, then $19/month"

# ── Scrim ─────────────────────────────────────────────────────────────
# Top color holds until the first stop, bottom color from the last stop on.
GRADIENT_STOPS = (0.5, 0.9)
GRADIENT_TOP_ALPHA = 0.0
GRADIENT_BOTTOM_ALPHA = 0.95

# ── Typography ────────────────────────────────────────────────────────
EYEBROW_SP = 24
HEADLINE_SP = 32
BODY_SP = 16
CTA_SP = 16
FINE_PRINT_SP = 14

# ── Layout ────────────────────────────────────────────────────────────
COLUMN_PADDING = 20
GAP_AFTER_EYEBROW = 8
GAP_AFTER_HEADLINE = 16
GAP_BETWEEN_CTAS = 12
GAP_BEFORE_FINE_PRINT = 8
GAP_AFTER_FINE_PRINT = 20
CTA_PADDING_V = 16
CTA_RADIUS = 8
