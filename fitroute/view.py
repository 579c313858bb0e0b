"""
Toolkit-independent view tree for the landing screen.

``render()`` turns the constants in ``fitroute.content`` into a small tree
of frozen dataclasses.  The Kivy layer (``app.landing_screen``) walks the
tree and creates one widget per node, so all ordering and styling
decisions are made here and can be tested without a window.
"""

from dataclasses import dataclass
from typing import Tuple, Union

from fitroute import content as c


@dataclass(frozen=True)
class TextNode:
    role: str
    text: str
    font_size: float
    color: str            # semantic theme color name
    bold: bool = False
    halign: str = "left"


@dataclass(frozen=True)
class ButtonNode:
    role: str             # "primary" or "secondary"; selects the action hook
    label: str
    font_size: float
    background: str
    text_color: str
    padding_v: float = c.CTA_PADDING_V
    radius: float = c.CTA_RADIUS


@dataclass(frozen=True)
class Gap:
    """Fixed vertical gap in dp."""
    height: float


@dataclass(frozen=True)
class Spacer:
    """Flexible region that absorbs vertical slack."""
    flex: float = 1.0


ColumnChild = Union[TextNode, ButtonNode, Gap, Spacer]


@dataclass(frozen=True)
class LandingView:
    background_image: str
    gradient_stops: Tuple[float, float]
    gradient_alphas: Tuple[float, float]
    padding: float
    children: Tuple[ColumnChild, ...]


def render() -> LandingView:
    """Build the landing screen description.  Pure; same result every call."""
    children = (
        Spacer(),
        TextNode("eyebrow", c.EYEBROW_TEXT, c.EYEBROW_SP,
                 "text_eyebrow", bold=True),
        Gap(c.GAP_AFTER_EYEBROW),
        TextNode("headline", c.HEADLINE_TEXT, c.HEADLINE_SP,
                 "text_headline", bold=True),
        Gap(c.GAP_AFTER_HEADLINE),
        TextNode("body", c.BODY_TEXT, c.BODY_SP, "text_body"),
        Spacer(),
        ButtonNode("primary", c.PRIMARY_CTA_LABEL, c.CTA_SP,
                   "btn_primary", "text_btn_primary"),
        Gap(c.GAP_BETWEEN_CTAS),
        ButtonNode("secondary", c.SECONDARY_CTA_LABEL, c.CTA_SP,
                   "btn_secondary", "text_btn_secondary"),
        Gap(c.GAP_BEFORE_FINE_PRINT),
        TextNode("fine_print", c.FINE_PRINT_TEXT, c.FINE_PRINT_SP,
                 "text_fine_print", halign="center"),
        Gap(c.GAP_AFTER_FINE_PRINT),
    )
    return LandingView(
        background_image=c.BACKGROUND_IMAGE,
        gradient_stops=c.GRADIENT_STOPS,
        gradient_alphas=(c.GRADIENT_TOP_ALPHA, c.GRADIENT_BOTTOM_ALPHA),
        padding=c.COLUMN_PADDING,
        children=children,
    )


def text_values(view):
    """Return every visible string in the column, top to bottom."""
    values = []
    for node in view.children:
        if isinstance(node, TextNode):
            values.append(node.text)
        elif isinstance(node, ButtonNode):
            values.append(node.label)
    return values


def find_node(view, role):
    """Return the text or button node with the given role, or None."""
    for node in view.children:
        if getattr(node, "role", None) == role:
            return node
    return None


def noop(*_args):
    """Default action hook: does nothing."""
    return None
