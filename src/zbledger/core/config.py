from pathlib import Path
from typing import Optional
from pydantic import BaseModel, Field, field_validator


class NodeConfig(BaseModel):
    """Configuration of the local node taking part in genesis assembly.

    The config is built once (defaults, then environment) and handed to the
    genesis tooling explicitly.
    """
    # Node identity
    root_dir: Path = Field(
        default=Path.home() / ".zbledger",
        description="Root directory of the node's configuration and data"
    )
    moniker: str = Field(
        default="node",
        description="Human readable name of the local node"
    )

    # Genesis Configuration
    genesis_file: Optional[Path] = Field(
        default=None,
        description="Path to the genesis file, defaults to <root>/config/genesis.json"
    )
    gentxs_dir: Optional[Path] = Field(
        default=None,
        description="Directory of genesis transactions, defaults to <root>/config/gentx"
    )
    accounts_module: str = Field(
        default="auth",
        description="App state module holding the genesis accounts"
    )

    @field_validator('moniker')
    def validate_moniker(cls, value):
        """Validate moniker is not blank."""
        if not value.strip():
            raise ValueError("Moniker cannot be empty")
        return value

    @field_validator('accounts_module')
    def validate_accounts_module(cls, value):
        """Validate accounts module name is not blank."""
        if not value.strip():
            raise ValueError("Accounts module cannot be empty")
        return value

    @property
    def config_dir(self) -> Path:
        return self.root_dir / "config"

    @property
    def config_file(self) -> Path:
        """Path of the node's network configuration file."""
        return self.config_dir / "config.toml"

    def genesis_path(self) -> Path:
        return self.genesis_file or self.config_dir / "genesis.json"

    def gentxs_path(self) -> Path:
        return self.gentxs_dir or self.config_dir / "gentx"

    model_config = {
        "validate_assignment": True,
    }


def load_config_from_env(**overrides) -> NodeConfig:
    """Load configuration from environment variables.

    Args:
        **overrides: Explicit values that take precedence over the environment

    Returns:
        NodeConfig: Configuration instance with values from environment
    """
    import os

    # Create a dict of settings from environment variables
    env_settings = {}

    # Map environment variables to config fields
    env_mappings = {
        "ZBLEDGER_HOME": "root_dir",
        "ZBLEDGER_MONIKER": "moniker",
        "ZBLEDGER_GENESIS_FILE": "genesis_file",
        "ZBLEDGER_GENTXS_DIR": "gentxs_dir",
        "ZBLEDGER_ACCOUNTS_MODULE": "accounts_module",
    }

    # Get values from environment
    for env_var, field_name in env_mappings.items():
        if env_var in os.environ:
            value = os.environ[env_var]

            if field_name in ["root_dir", "genesis_file", "gentxs_dir"]:
                value = Path(value).expanduser()

            env_settings[field_name] = value

    env_settings.update({k: v for k, v in overrides.items() if v is not None})

    # Create config with environment settings
    return NodeConfig(**env_settings)
