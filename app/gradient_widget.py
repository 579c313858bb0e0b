"""
Canvas-drawn gradient scrim for the landing screen.

The gradient is baked into a 1-pixel-wide texture (see
``fitroute.gradient``) and stretched over the widget with linear
filtering, which is how Kivy renders smooth vertical fades.
"""

from kivy.graphics import Color, Rectangle
from kivy.graphics.texture import Texture
from kivy.properties import ListProperty, NumericProperty
from kivy.uix.widget import Widget

from app.theme import get_color
from fitroute import content
from fitroute.gradient import DEFAULT_ROWS, gradient_buffer


class GradientScrim(Widget):
    """Vertical white fade from transparent to nearly opaque."""

    stops = ListProperty(list(content.GRADIENT_STOPS))
    alphas = ListProperty([content.GRADIENT_TOP_ALPHA,
                           content.GRADIENT_BOTTOM_ALPHA])
    rows = NumericProperty(DEFAULT_ROWS)

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self._rect = None
        self._rebuild()
        self.bind(pos=self._sync_rect, size=self._sync_rect,
                  stops=self._rebuild, alphas=self._rebuild, rows=self._rebuild)

    def _rebuild(self, *_args):
        rows = int(self.rows)
        tex = Texture.create(size=(1, rows), colorfmt="rgba")
        tex.mag_filter = "linear"
        tex.min_filter = "linear"
        tex.blit_buffer(
            gradient_buffer(rows, tuple(self.stops), tuple(self.alphas)),
            colorfmt="rgba", bufferfmt="ubyte")
        self.canvas.clear()
        with self.canvas:
            # Texture carries the alpha; Color tints it with the scrim hue
            Color(*get_color("scrim"))
            self._rect = Rectangle(texture=tex, pos=self.pos, size=self.size)

    def _sync_rect(self, *_args):
        if self._rect is not None:
            self._rect.pos = self.pos
            self._rect.size = self.size
