"""Tests for environment-driven settings."""

from __future__ import annotations

from vd2svg.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("VD2SVG_LOG_LEVEL", raising=False)
    monkeypatch.delenv("VD2SVG_INDENT", raising=False)
    s = Settings(_env_file=None)
    assert s.vd2svg_log_level == "warning"
    assert s.vd2svg_indent == 2


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("VD2SVG_LOG_LEVEL", "debug")
    monkeypatch.setenv("VD2SVG_INDENT", "4")
    s = Settings(_env_file=None)
    assert s.vd2svg_log_level == "debug"
    assert s.vd2svg_indent == 4


def test_reads_env_file(tmp_path, monkeypatch):
    monkeypatch.delenv("VD2SVG_INDENT", raising=False)
    env = tmp_path / ".env"
    env.write_text("VD2SVG_INDENT=8\n", encoding="utf-8")
    assert Settings(_env_file=env).vd2svg_indent == 8
