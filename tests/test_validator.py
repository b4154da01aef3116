import pytest

from conftest import gentx_data
from zbledger.core.genutil.errors import GenTxValidationError
from zbledger.core.genutil.validator import validate_gentx
from zbledger.core.models.genesis import GenesisAccount
from zbledger.core.models.transaction import StdTx


@pytest.fixture
def account_index():
    return {address: GenesisAccount(address=address) for address in ["addr1", "addr2"]}


def test_valid_gentx(account_index):
    tx = StdTx.model_validate(gentx_data("nodeA@10.0.0.1:26656", "alice", "addr1"))

    validated = validate_gentx(tx, "v1.json", account_index)

    assert validated.tx is tx
    assert validated.file_name == "v1.json"
    assert validated.node_address == "nodeA@10.0.0.1:26656"
    assert validated.display_name == "alice"


def test_missing_memo(account_index):
    tx = StdTx.model_validate(gentx_data("", "alice", "addr1"))

    with pytest.raises(GenTxValidationError) as exc_info:
        validate_gentx(tx, "v1.json", account_index)

    assert exc_info.value.reason == "missing node address"
    assert exc_info.value.file_name == "v1.json"
    assert "v1.json" in str(exc_info.value)


def test_memo_absent_from_envelope(account_index):
    data = gentx_data("ignored", "alice", "addr1")
    del data["memo"]
    tx = StdTx.model_validate(data)

    with pytest.raises(GenTxValidationError, match="missing node address"):
        validate_gentx(tx, "v1.json", account_index)


def test_no_messages(account_index):
    data = gentx_data("nodeA@10.0.0.1:26656", "alice", "addr1")
    data["messages"] = []
    tx = StdTx.model_validate(data)

    with pytest.raises(GenTxValidationError, match="must be single-message"):
        validate_gentx(tx, "v1.json", account_index)


def test_two_messages(account_index):
    tx = StdTx.model_validate(
        gentx_data("nodeA@10.0.0.1:26656", "alice", "addr1", extra_messages=1)
    )

    with pytest.raises(GenTxValidationError, match="must be single-message"):
        validate_gentx(tx, "v1.json", account_index)


def test_unexpected_message_kind(account_index):
    tx = StdTx.model_validate(
        gentx_data("nodeA@10.0.0.1:26656", "alice", "addr1", kind="delegate")
    )

    with pytest.raises(GenTxValidationError) as exc_info:
        validate_gentx(tx, "v1.json", account_index)

    assert exc_info.value.reason == "unexpected message kind"


def test_signer_not_in_genesis_accounts(account_index):
    tx = StdTx.model_validate(gentx_data("nodeB@10.0.0.2:26656", "bob", "addr3"))

    with pytest.raises(GenTxValidationError) as exc_info:
        validate_gentx(tx, "v2.json", account_index)

    error = exc_info.value
    assert error.reason == "signer not in genesis accounts"
    assert error.address == "addr3"
    assert error.file_name == "v2.json"
    assert error.known_addresses == ["addr1", "addr2"]
    assert "addr3" in str(error)
    assert "v2.json" in str(error)


def test_memo_checked_before_message_count(account_index):
    data = gentx_data("", "alice", "addr1")
    data["messages"] = []
    tx = StdTx.model_validate(data)

    with pytest.raises(GenTxValidationError, match="missing node address"):
        validate_gentx(tx, "v1.json", account_index)
