"""
Landing screen widget for Fit Route.

Walks the view tree produced by ``fitroute.view.render()`` and creates one
widget per node inside the column declared in ``app.kv``.  The two call-to-
action buttons delegate to injectable callables so a host application can
bind real subscription / trial flows without touching this module.
"""

from functools import partial

from kivy.metrics import dp, sp
from kivy.properties import ListProperty, NumericProperty, StringProperty
from kivy.uix.button import Button
from kivy.uix.floatlayout import FloatLayout
from kivy.uix.label import Label
from kivy.uix.widget import Widget

from app.gradient_widget import GradientScrim  # noqa: F401  (used in app.kv)
from app.theme import get_color
from fitroute.assets import check_background_image
from fitroute.logutil import get_logger
from fitroute.view import ButtonNode, Gap, Spacer, TextNode, noop, render

log = get_logger("landing")


class LandingText(Label):
    """Wrapping label whose height follows its text (styled in app.kv)."""
    pass


class CTAButton(Button):
    """Full-width rounded call-to-action button (styled in app.kv)."""
    fill_color = ListProperty([0, 0, 0, 1])
    padding_v = NumericProperty(0)
    radius = NumericProperty(0)


class LandingScreen(FloatLayout):
    """Background image, gradient scrim and the static content column."""

    font_name = StringProperty("Roboto")
    background_source = StringProperty("")

    def __init__(self, on_primary_action=noop, on_secondary_action=noop,
                 view=None, **kwargs):
        self._actions = {
            "primary": on_primary_action,
            "secondary": on_secondary_action,
        }
        self.view = view or render()
        super().__init__(**kwargs)
        self.background_source = check_background_image()
        self.ids.scrim.stops = list(self.view.gradient_stops)
        self.ids.scrim.alphas = list(self.view.gradient_alphas)
        self._build_column()

    # ── Column construction ──────────────────────────────────────────

    def _build_column(self):
        column = self.ids.column
        column.clear_widgets()
        column.padding = [dp(self.view.padding)] * 4
        for node in self.view.children:
            column.add_widget(self._make_widget(node))
        log.debug("Landing column built with %d widgets",
                  len(self.view.children))

    def _make_widget(self, node):
        if isinstance(node, Spacer):
            return Widget(size_hint_y=node.flex)
        if isinstance(node, Gap):
            return Widget(size_hint_y=None, height=dp(node.height))
        if isinstance(node, TextNode):
            return LandingText(
                text=node.text,
                font_size=sp(node.font_size),
                bold=node.bold,
                halign=node.halign,
                color=list(get_color(node.color)),
                font_name=self.font_name,
            )
        if isinstance(node, ButtonNode):
            btn = CTAButton(
                text=node.label,
                font_size=sp(node.font_size),
                fill_color=list(get_color(node.background)),
                color=list(get_color(node.text_color)),
                padding_v=dp(node.padding_v),
                radius=dp(node.radius),
                font_name=self.font_name,
            )
            btn.bind(on_release=partial(self._on_button_release, node.role))
            return btn
        raise TypeError(f"Unsupported view node: {node!r}")

    # ── Actions ──────────────────────────────────────────────────────

    def _on_button_release(self, role, _btn):
        self.trigger_action(role)

    def trigger_action(self, role):
        """Invoke the hook bound to *role* ("primary" or "secondary")."""
        callback = self._actions[role]
        log.debug("%s action triggered", role)
        try:
            callback()
        except Exception:
            log.exception("%s action handler failed", role)
            raise

    def on_primary_action(self):
        self.trigger_action("primary")

    def on_secondary_action(self):
        self.trigger_action("secondary")
