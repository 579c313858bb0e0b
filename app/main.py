"""
Fit Route – Kivy application entry point.

Single landing screen: background photo, gradient scrim, marketing copy
and two call-to-action buttons.
"""

import os
import sys

# ---------------------------------------------------------------------------
# Ensure the repo root is on sys.path so `fitroute.*` and `app.*` imports
# work regardless of how the app is launched (CLI, IDE, PyInstaller,
# Buildozer).
# ---------------------------------------------------------------------------
_REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _REPO_ROOT not in sys.path:
    sys.path.insert(0, _REPO_ROOT)

# ---------------------------------------------------------------------------
# PyInstaller --windowed: redirect stdio so Kivy's console logger doesn't
# recurse when sys.stderr is None (frozen builds have no console).
# ---------------------------------------------------------------------------
if getattr(sys, "frozen", False) and sys.stderr is None:
    sys.stderr = open(os.devnull, "w")
if getattr(sys, "frozen", False) and sys.stdout is None:
    sys.stdout = open(os.devnull, "w")

# ---------------------------------------------------------------------------
# Kivy configuration – must come BEFORE any other kivy import
# ---------------------------------------------------------------------------
from kivy.config import Config  # noqa: E402

# Portrait phone-sized window on desktop; ignored on Android
Config.set("graphics", "width", "390")
Config.set("graphics", "height", "844")
Config.set("graphics", "resizable", "1")

from kivy.app import App  # noqa: E402
from kivy.core.text import LabelBase  # noqa: E402
from kivy.core.window import Window  # noqa: E402
from kivy.lang import Builder  # noqa: E402
from kivy.properties import StringProperty  # noqa: E402

from fitroute.logutil import setup_logging, get_logger  # noqa: E402
from fitroute import content  # noqa: E402
from fitroute.assets import FONT_NAME, font_files, resource_path  # noqa: E402
from fitroute.view import noop  # noqa: E402
from app.landing_screen import LandingScreen  # noqa: E402
from app.theme import get_color  # noqa: E402

# ---------------------------------------------------------------------------
# Platform detection
# ---------------------------------------------------------------------------
try:
    import android  # noqa: F401
    ON_ANDROID = True
except ImportError:
    ON_ANDROID = False

DEFAULT_FONT = "Roboto"

setup_logging()
log = get_logger("app")

# KV rules are loaded after the widget classes above are imported so the
# parser can resolve their names.
_KV_PATH = resource_path("app", "app.kv")
Builder.load_file(_KV_PATH)


def register_font():
    """Register the bundled display font, returning the font name to use."""
    files = font_files()
    if files is None:
        log.info("%s font not bundled, using %s", FONT_NAME, DEFAULT_FONT)
        return DEFAULT_FONT
    regular, bold = files
    LabelBase.register(name=FONT_NAME, fn_regular=regular, fn_bold=bold)
    log.info("Registered font %s (%s)", FONT_NAME, regular)
    return FONT_NAME


# ═══════════════════════════════════════════════════════════════════════════
# App
# ═══════════════════════════════════════════════════════════════════════════

class FitRouteApp(App):
    title = content.APP_TITLE
    font_name = StringProperty(DEFAULT_FONT)

    def __init__(self, on_primary_action=noop, on_secondary_action=noop,
                 **kwargs):
        # Host-supplied flows; both default to no-ops
        self._on_primary_action = on_primary_action
        self._on_secondary_action = on_secondary_action
        super().__init__(**kwargs)

    def build(self):
        self.font_name = register_font()
        Window.clearcolor = get_color("bg_root")
        log.info("Building landing screen (android=%s)", ON_ANDROID)
        return LandingScreen(
            on_primary_action=self._on_primary_action,
            on_secondary_action=self._on_secondary_action,
            font_name=self.font_name,
        )

    def on_pause(self):
        return True

    def on_stop(self):
        log.info("Application stopping")


def main():
    FitRouteApp().run()


if __name__ == "__main__":
    main()
