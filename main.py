"""
Buildozer entry point.  Buildozer runs ``main.py`` from source.dir, so this
file only puts the repo root on the path and hands over to ``app.main``.
"""

import os
import sys

# The app takes no command-line options; keep Kivy from parsing sys.argv
os.environ.setdefault("KIVY_NO_ARGS", "1")

_HERE = os.path.dirname(os.path.abspath(__file__))
if _HERE not in sys.path:
    sys.path.insert(0, _HERE)

from app.main import main  # noqa: E402

if __name__ == "__main__":
    main()
