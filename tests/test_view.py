"""Tests for the landing screen view tree."""

from fitroute import content
from fitroute.view import (
    ButtonNode, Gap, LandingView, Spacer, TextNode,
    find_node, noop, render, text_values,
)


def test_render_is_pure():
    assert render() == render()


def test_render_returns_landing_view():
    view = render()
    assert isinstance(view, LandingView)
    assert view.background_image == "runners.png"
    assert view.gradient_stops == (0.5, 0.9)
    assert view.gradient_alphas == (0.0, 0.95)
    assert view.padding == 20


def test_text_values_in_order():
    assert text_values(render()) == [
        "Fit Route",
        "Force multiplier for\nyour daily walk.",
        "Combining the power of cardio and strength training, "
        "helping you stay fit—one step at a time.",
        "Subscribe Now",
        "Start Free Trial",
        "30 days free trial, then $19/month",
    ]


def test_headline_has_single_line_break():
    headline = find_node(render(), "headline").text
    assert headline.count("\n") == 1
    first, second = headline.split("\n")
    assert first.endswith("for")
    assert second == "your daily walk."


def test_buttons_carry_roles_and_styles():
    view = render()
    primary = find_node(view, "primary")
    secondary = find_node(view, "secondary")
    assert isinstance(primary, ButtonNode)
    assert primary.label == content.PRIMARY_CTA_LABEL
    assert primary.background == "btn_primary"
    assert secondary.label == content.SECONDARY_CTA_LABEL
    assert secondary.background == "btn_secondary"
    assert primary.radius == secondary.radius == 8
    assert primary.padding_v == secondary.padding_v == 16


def test_text_styles():
    view = render()
    eyebrow = find_node(view, "eyebrow")
    headline = find_node(view, "headline")
    body = find_node(view, "body")
    fine = find_node(view, "fine_print")
    assert (eyebrow.font_size, eyebrow.bold) == (24, True)
    assert (headline.font_size, headline.bold) == (32, True)
    assert (body.font_size, body.bold) == (16, False)
    assert fine.font_size == 14
    assert fine.halign == "center"
    assert body.halign == "left"


def test_two_spacers_absorb_slack():
    children = render().children
    spacer_idx = [i for i, n in enumerate(children) if isinstance(n, Spacer)]
    assert len(spacer_idx) == 2
    # Before the eyebrow and before the primary CTA
    assert children[spacer_idx[0] + 1].role == "eyebrow"
    assert children[spacer_idx[1] + 1].role == "primary"
    fixed = [n for n in children if not isinstance(n, Spacer)]
    assert all(isinstance(n, (TextNode, ButtonNode, Gap)) for n in fixed)


def test_gap_heights():
    gaps = [n.height for n in render().children if isinstance(n, Gap)]
    assert gaps == [8, 16, 12, 8, 20]


def test_find_node_unknown_role():
    assert find_node(render(), "missing") is None


def test_noop_accepts_any_args_and_returns_none():
    assert noop() is None
    assert noop(object(), 1) is None
