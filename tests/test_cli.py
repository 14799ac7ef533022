import json

import pytest
from click.testing import CliRunner

from conftest import BLOCK_NUMBER_OK, BLOCK_NUMBER_RATE_LIMITED, BLOCK_REWARD_OK, FakeSession
from eth_proxy.api.config import get_config
from eth_proxy.cli.main import cli


@pytest.fixture
def configured(env, monkeypatch):
    for name, value in env.items():
        monkeypatch.setenv(name, value)
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    monkeypatch.setenv("LOG_CONFIG_FILE", "")
    get_config.cache_clear()
    yield
    get_config.cache_clear()


def _upstream(monkeypatch, *answers) -> FakeSession:
    session = FakeSession(*answers)
    monkeypatch.setattr("eth_proxy.etherscan.client.create_session", lambda: session)
    return session


def _last_json_line(output: str):
    return json.loads(output.strip().splitlines()[-1])


def test_current_block_time_prints_json(configured, monkeypatch) -> None:
    _upstream(monkeypatch, BLOCK_NUMBER_OK, BLOCK_REWARD_OK)
    result = CliRunner().invoke(cli, ["current-block-time"], obj={})
    assert result.exit_code == 0
    assert _last_json_line(result.output) == {"block_number": 427, "timestamp": 123456789}


def test_current_block_time_failure_exits_nonzero(configured, monkeypatch) -> None:
    session = _upstream(monkeypatch, BLOCK_NUMBER_RATE_LIMITED)
    result = CliRunner().invoke(cli, ["current-block-time"], obj={})
    assert result.exit_code == 1
    assert _last_json_line(result.output) == {"message": "Max rate limit reached"}
    assert len(session.calls) == 1


def test_missing_config_is_reported(monkeypatch) -> None:
    for name in ("HOST", "PORT", "ETHERSCAN_DOMAIN", "ETHERSCAN_API_KEY"):
        monkeypatch.delenv(name, raising=False)
    get_config.cache_clear()
    result = CliRunner().invoke(cli, ["current-block-time"], obj={})
    get_config.cache_clear()
    assert result.exit_code != 0
    assert "Missing 'HOST' variable" in result.output
