import json

import pytest
from click.testing import CliRunner

from opentok_sdk.cli import main as cli_main
from opentok_sdk.tokens import decode_token

from conftest import API_KEY, API_SECRET, SESSION_ID


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    monkeypatch.setattr(cli_main, "CONFIG_FILE", path)
    return path


def test_login_status_logout(config_file):
    runner = CliRunner()
    result = runner.invoke(cli_main.main, ["auth", "login"], input=f"{API_KEY}\n{API_SECRET}\n")
    assert result.exit_code == 0
    cfg = json.loads(config_file.read_text())
    assert cfg["api_key"] == API_KEY
    assert cfg["api_secret"] == API_SECRET

    result = runner.invoke(cli_main.main, ["auth", "status"])
    assert str(API_KEY) in result.output

    runner.invoke(cli_main.main, ["auth", "logout"])
    assert json.loads(config_file.read_text()) == {}


def test_token_command(config_file):
    config_file.write_text(json.dumps({"api_key": API_KEY, "api_secret": API_SECRET}))
    result = CliRunner().invoke(
        cli_main.main,
        ["token", SESSION_ID, "--role", "moderator", "--layout-class", "focus", "--layout-class", "full"],
    )
    assert result.exit_code == 0
    data = decode_token(result.output.strip())
    assert data["role"] == "moderator"
    assert data["initial_layout_class_list"] == "focus full"
    assert data["partner_id"] == str(API_KEY)


def test_token_command_invalid_session(config_file):
    config_file.write_text(json.dumps({"api_key": API_KEY, "api_secret": API_SECRET}))
    result = CliRunner().invoke(cli_main.main, ["token", "NOT A VALID SESSION ID"])
    assert result.exit_code == 1


def test_commands_require_credentials(config_file):
    result = CliRunner().invoke(cli_main.main, ["token", SESSION_ID])
    assert result.exit_code == 1
