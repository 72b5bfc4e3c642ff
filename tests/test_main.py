from pathlib import Path

import pytest

from argtree.__main__ import main, split_config_path
from fixtures import handlers

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("ARGTREE_CONFIG", raising=False)
    handlers.CALLS.clear()
    yield
    handlers.CALLS.clear()


def test_split_config_path_from_first_token():
    path, tokens = split_config_path(["shop.yaml", "trading", "sell"])
    assert path == Path("shop.yaml")
    assert tokens == ["trading", "sell"]


def test_split_config_path_from_environment(monkeypatch):
    monkeypatch.setenv("ARGTREE_CONFIG", "tree.toml")
    path, tokens = split_config_path(["status", "-v"])
    assert path == Path("tree.toml")
    assert tokens == ["status", "-v"]


def test_split_config_path_without_config():
    assert split_config_path(["status"]) == (None, ["status"])


def test_main_without_config(capsys):
    assert main(["status"]) == 2
    assert "No config file given" in capsys.readouterr().out


def test_main_runs_config(capsys):
    config = str(FIXTURES / "shop.yaml")
    assert main([config, "status"]) == 3
    assert handlers.CALLS == [("status", {})]


def test_main_reads_sys_argv(monkeypatch):
    monkeypatch.setattr(
        "sys.argv", ["argtree", str(FIXTURES / "shop.toml"), "status", "--verbose"]
    )
    assert main() == 3
    assert handlers.CALLS == [("status", {"verbose": True})]


def test_main_reports_usage_errors():
    config = str(FIXTURES / "shop.yaml")
    assert main([config, "trading", "sell"]) == 2
    assert handlers.CALLS == []


def test_main_reports_config_errors(tmp_path, capsys):
    broken = tmp_path / "broken.yaml"
    broken.write_text("commands:\n  - name: go\n", encoding="UTF-8")
    assert main([str(broken)]) == 2
    assert "Invalid config file" in capsys.readouterr().out
