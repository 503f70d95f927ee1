"""Tests for configuration commands."""

import json

import pytest
from typer.testing import CliRunner

from tasklist_cli.commands.config_command import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated(tmp_config):
    yield tmp_config


def test_view_json():
    result = runner.invoke(app, ["view", "-o", "json"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["reminders"]["lead_minutes"] == 15


def test_view_pretty():
    result = runner.invoke(app, ["view"])
    assert result.exit_code == 0
    assert "storage.key" in result.output


def test_get_value():
    result = runner.invoke(app, ["get", "storage.key"])
    assert result.exit_code == 0
    assert "tasks" in result.output


def test_get_unknown_key():
    result = runner.invoke(app, ["get", "nope"])
    assert result.exit_code == 5
    assert "not found" in result.output


def test_set_coerces_values(tmp_config):
    result = runner.invoke(app, ["set", "reminders.lead_minutes", "30"])
    assert result.exit_code == 0
    assert tmp_config.get("reminders.lead_minutes") == 30

    runner.invoke(app, ["set", "reminders.enabled", "false"])
    assert tmp_config.get("reminders.enabled") is False


def test_set_unknown_key():
    result = runner.invoke(app, ["set", "nope.key", "1"])
    assert result.exit_code == 5


def test_set_invalid_value():
    result = runner.invoke(app, ["set", "notifications.permission", "maybe"])
    assert result.exit_code == 2
    assert "Invalid value" in result.output


def test_reset_key(tmp_config):
    tmp_config.set("reminders.lead_minutes", 45)
    result = runner.invoke(app, ["reset", "reminders.lead_minutes", "--yes"])
    assert result.exit_code == 0
    assert tmp_config.get("reminders.lead_minutes") == 15


def test_reset_cancelled(tmp_config):
    tmp_config.set("reminders.lead_minutes", 45)
    result = runner.invoke(app, ["reset"], input="n\n")
    assert result.exit_code == 0
    assert tmp_config.get("reminders.lead_minutes") == 45
