"""
Genesis transaction models.

A genesis transaction (gentx) is a signed envelope produced offline by each
founding validator operator. Its memo carries the operator's node address as
"<node-id>@<ip>:<port>" and its single message declares the validator.
"""
from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag
from typing import Annotated, Any, List, Union

MSG_CREATE_VALIDATOR = "create_validator"


class MsgCreateValidator(BaseModel):
    """Message declaring a new validator."""
    model_config = ConfigDict(extra="allow")

    kind: str = Field(MSG_CREATE_VALIDATOR, description="Message kind")
    signer: str = Field(..., description="Address of the account signing the message")
    display_name: str = Field(..., description="Validator display name (node moniker)")


class OpaqueMsg(BaseModel):
    """Any message kind other than validator creation."""
    model_config = ConfigDict(extra="allow")

    kind: str = Field(..., description="Message kind")


def _message_tag(value: Any) -> str:
    if isinstance(value, dict):
        kind = value.get("kind")
    else:
        kind = getattr(value, "kind", None)
    return "create_validator" if kind == MSG_CREATE_VALIDATOR else "opaque"


Message = Annotated[
    Union[
        Annotated[MsgCreateValidator, Tag("create_validator")],
        Annotated[OpaqueMsg, Tag("opaque")],
    ],
    Discriminator(_message_tag),
]


class StdTx(BaseModel):
    """A decoded genesis transaction.

    Fee, signatures and any other envelope fields are carried opaquely so the
    transaction can be written back into the genesis document unchanged.
    """
    model_config = ConfigDict(extra="allow")

    messages: List[Message] = Field(..., description="Embedded messages")
    memo: str = Field("", description="Node address of the validator operator")

    def to_dict(self) -> dict:
        return self.model_dump(mode="json")
