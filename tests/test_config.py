import pytest
from pathlib import Path
from zbledger.core.config import NodeConfig, load_config_from_env


def test_config_defaults():
    """Test that the configuration has expected defaults."""
    config = NodeConfig()

    assert config.root_dir == Path.home() / ".zbledger"
    assert config.moniker == "node"
    assert config.accounts_module == "auth"

    # Derived paths
    assert config.config_file == Path.home() / ".zbledger" / "config" / "config.toml"
    assert config.genesis_path() == Path.home() / ".zbledger" / "config" / "genesis.json"
    assert config.gentxs_path() == Path.home() / ".zbledger" / "config" / "gentx"


def test_explicit_paths_override_root(tmp_path):
    config = NodeConfig(
        root_dir=tmp_path,
        genesis_file=tmp_path / "g.json",
        gentxs_dir=tmp_path / "txs",
    )

    assert config.genesis_path() == tmp_path / "g.json"
    assert config.gentxs_path() == tmp_path / "txs"
    assert config.config_file == tmp_path / "config" / "config.toml"


def test_config_override(monkeypatch, tmp_path):
    """Test that environment variables override defaults."""
    monkeypatch.setenv("ZBLEDGER_HOME", str(tmp_path))
    monkeypatch.setenv("ZBLEDGER_MONIKER", "alice")
    monkeypatch.setenv("ZBLEDGER_GENTXS_DIR", str(tmp_path / "gentxs"))
    monkeypatch.setenv("ZBLEDGER_ACCOUNTS_MODULE", "bank")

    config = load_config_from_env()

    assert config.root_dir == tmp_path
    assert config.moniker == "alice"
    assert config.gentxs_path() == tmp_path / "gentxs"
    assert config.accounts_module == "bank"


def test_explicit_values_beat_environment(monkeypatch):
    monkeypatch.setenv("ZBLEDGER_MONIKER", "alice")

    assert load_config_from_env(moniker="bob").moniker == "bob"
    # None means "not given"
    assert load_config_from_env(moniker=None).moniker == "alice"


def test_config_validation():
    """Test that configuration values are validated."""
    with pytest.raises(ValueError):
        NodeConfig(moniker="   ")

    with pytest.raises(ValueError):
        NodeConfig(accounts_module="")

    config = NodeConfig(moniker="validator-1")
    assert config.moniker == "validator-1"
