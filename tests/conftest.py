"""
Pytest configuration.

Kivy parses sys.argv and installs its console logger on import; both are
disabled so tests can import the UI modules without a window.
"""

import os

os.environ.setdefault("KIVY_NO_ARGS", "1")
os.environ.setdefault("KIVY_NO_CONSOLELOG", "1")
os.environ.setdefault("KIVY_NO_FILELOG", "1")
