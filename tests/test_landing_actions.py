"""Tests for the landing screen action hooks.

The hooks are exercised through ``LandingScreen``'s methods on a stand-in
object so no window or GL context is needed.
"""

import inspect
from types import SimpleNamespace

import pytest

from app.landing_screen import LandingScreen
from fitroute.view import ButtonNode, noop, render


def _screen(primary=noop, secondary=noop):
    fake = SimpleNamespace(_actions={"primary": primary, "secondary": secondary})
    fake.trigger_action = lambda role: LandingScreen.trigger_action(fake, role)
    return fake


def test_default_actions_are_noops():
    fake = _screen()
    before = dict(fake._actions)
    LandingScreen.on_primary_action(fake)
    LandingScreen.on_secondary_action(fake)
    assert fake._actions == before


def test_bound_actions_are_called():
    calls = []
    fake = _screen(primary=lambda: calls.append("subscribe"),
                   secondary=lambda: calls.append("trial"))
    LandingScreen.on_primary_action(fake)
    LandingScreen.on_secondary_action(fake)
    assert calls == ["subscribe", "trial"]


def test_handler_errors_propagate():
    def boom():
        raise RuntimeError("payment flow unavailable")

    fake = _screen(primary=boom)
    with pytest.raises(RuntimeError):
        LandingScreen.on_primary_action(fake)


def test_unknown_role_raises_key_error():
    with pytest.raises(KeyError):
        LandingScreen.trigger_action(_screen(), "tertiary")


def test_unsupported_node_type():
    fake = SimpleNamespace(font_name="Roboto")
    with pytest.raises(TypeError):
        LandingScreen._make_widget(fake, object())


def test_constructor_defaults_are_noop():
    params = inspect.signature(LandingScreen.__init__).parameters
    assert params["on_primary_action"].default is noop
    assert params["on_secondary_action"].default is noop


def test_cta_buttons_release_fires_matching_hooks():
    calls = []
    fake = _screen(primary=lambda: calls.append("primary"),
                   secondary=lambda: calls.append("secondary"))
    fake.font_name = "Roboto"
    fake._on_button_release = (
        lambda role, btn: LandingScreen._on_button_release(fake, role, btn))
    buttons = [LandingScreen._make_widget(fake, node)
               for node in render().children if isinstance(node, ButtonNode)]
    assert [b.text for b in buttons] == ["Subscribe Now", "Start Free Trial"]
    for btn in buttons:
        btn.dispatch("on_release")
    assert calls == ["primary", "secondary"]
