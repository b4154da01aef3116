"""
Structural and referential checks applied to each genesis transaction.

No signature or stake checks are done here; the consensus engine performs
them when the chain starts.
"""
from typing import Mapping, NamedTuple

from zbledger.core.genutil.errors import GenTxValidationError
from zbledger.core.models.genesis import GenesisAccount
from zbledger.core.models.transaction import MsgCreateValidator, StdTx


class ValidatedGenTx(NamedTuple):
    """A gentx that passed validation, with the fields needed for the peer list."""
    tx: StdTx
    file_name: str
    node_address: str
    display_name: str


def validate_gentx(
    tx: StdTx, file_name: str, account_index: Mapping[str, GenesisAccount]
) -> ValidatedGenTx:
    """Validate a decoded gentx against the genesis accounts.

    Args:
        tx: The decoded genesis transaction
        file_name: Name of the file the transaction was read from
        account_index: Genesis accounts keyed by address

    Returns:
        ValidatedGenTx: The transaction with its node address and display name

    Raises:
        GenTxValidationError: If the memo is empty, the transaction does not hold
            exactly one message, the message is not a validator creation, or
            the signer is not a genesis account
    """
    # the memo carries "<node-id>@<ip>:<port>"
    node_address = tx.memo
    if not node_address:
        raise GenTxValidationError("missing node address", file_name)

    if len(tx.messages) != 1:
        raise GenTxValidationError("must be single-message", file_name)

    msg = tx.messages[0]
    if not isinstance(msg, MsgCreateValidator):
        raise GenTxValidationError("unexpected message kind", file_name)

    if msg.signer not in account_index:
        raise GenTxValidationError(
            "signer not in genesis accounts",
            file_name,
            address=msg.signer,
            known_addresses=account_index.keys(),
        )

    return ValidatedGenTx(
        tx=tx,
        file_name=file_name,
        node_address=node_address,
        display_name=msg.display_name,
    )
