"""
Asset path resolution for Fit Route.

Assets live in ``app/assets/`` and install as package data of ``app``.
PyInstaller bundles data files under ``sys._MEIPASS``, so frozen builds
resolve from there.
"""

import os
import sys

from fitroute import content
from fitroute.logutil import get_logger

log = get_logger("assets")

REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
ASSET_DIR = os.path.join("app", "assets")
FONT_DIR = os.path.join(ASSET_DIR, "fonts")

# Font family requested by the original design; optional.
FONT_NAME = "SFProDisplay"
FONT_REGULAR = "SFProDisplay-Regular.ttf"
FONT_BOLD = "SFProDisplay-Bold.ttf"


def base_dir():
    if getattr(sys, "frozen", False):
        return sys._MEIPASS
    return REPO_ROOT


def resource_path(*parts):
    """Return an absolute path to a bundled resource."""
    return os.path.join(base_dir(), *parts)


def background_image_path():
    return resource_path(ASSET_DIR, content.BACKGROUND_IMAGE)


def asset_exists(path):
    return os.path.isfile(path)


def check_background_image():
    """Return the background image path, warning if the file is missing.

    A missing image is not fatal; Kivy renders an empty Image widget.
    """
    path = background_image_path()
    if not asset_exists(path):
        log.warning("Background image missing: %s", path)
    return path


def font_files():
    """Return ``(regular, bold)`` font paths, or None when not bundled.

    The bold path falls back to the regular face if only that is present.
    """
    regular = resource_path(FONT_DIR, FONT_REGULAR)
    if not asset_exists(regular):
        return None
    bold = resource_path(FONT_DIR, FONT_BOLD)
    return regular, bold if asset_exists(bold) else regular
