"""
Genesis document models for bootstrapping a zb-ledger network.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Dict

# Module slot of the app state that holds the collected genesis transactions
GENUTIL_MODULE = "genutil"


class GenesisAccount(BaseModel):
    """An account pre-declared in the draft genesis app state."""
    model_config = ConfigDict(extra="allow", frozen=True)

    address: str = Field(..., description="Account address")

    @field_validator("address")
    def validate_address(cls, value):
        """Addresses are index keys and must not be blank."""
        if not value.strip():
            raise ValueError("Account address cannot be empty")
        return value


class GenesisDoc(BaseModel):
    """The genesis document shared by every node of the network.

    Only the chain identifier and the app state are interpreted here; every
    other field (genesis_time, consensus_params, validators, app_hash, ...) is
    carried through untouched.
    """
    model_config = ConfigDict(extra="allow")

    chain_id: str = Field(..., description="Identifier of the chain")
    app_state: Dict[str, Any] = Field(
        default_factory=dict, description="Module name to module genesis state"
    )

    def to_dict(self) -> dict:
        """Convert the genesis document to a dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict) -> "GenesisDoc":
        """Create a GenesisDoc from a dictionary."""
        return cls.model_validate(data)


class InitConfig(BaseModel):
    """Parameters of a single node initialization run."""
    chain_id: str = Field(..., description="Chain the node is being initialized for")
    gentxs_dir: str = Field(..., description="Directory holding the genesis transactions")
    node_id: str = Field("", description="ID of the local node")
