"""Tests for the Android packaging configuration."""

import configparser
import os

import pytest

from fitroute.assets import REPO_ROOT


@pytest.fixture
def app_section():
    parser = configparser.ConfigParser(interpolation=None)
    parser.read(os.path.join(REPO_ROOT, "buildozer.spec"), encoding="utf-8")
    return parser["app"]


def test_window_keeps_system_bars(app_section):
    assert app_section.getint("fullscreen") == 0


def test_portrait_orientation(app_section):
    assert app_section["orientation"] == "portrait"


def test_bundles_kv_and_images(app_section):
    exts = {e.strip() for e in app_section["source.include_exts"].split(",")}
    assert {"py", "kv", "png", "ttf"} <= exts


def test_requires_kivy(app_section):
    reqs = [r.strip() for r in app_section["requirements"].split(",")]
    assert "kivy" in reqs
