"""
Genesis state assembly from the validators' genesis transactions.

Every founding validator operator contributes one gentx file. Collecting them
yields the genesis app state shared by the whole network and the bootstrap
peer list of the local node.
"""
import copy
import logging
from pathlib import Path
from typing import Any, Dict, List, NamedTuple, Optional, Tuple, Union

from zbledger.core.config import NodeConfig
from zbledger.core.genutil.accounts import (
    AuthAccountsIterator,
    GenesisAccountsIterator,
    build_account_index,
)
from zbledger.core.genutil.errors import (
    EmptyGenesisError,
    GenesisDecodeError,
    GenesisPersistError,
)
from zbledger.core.genutil.files import (
    render_config_file,
    serialize_genesis_doc,
    write_config_file,
    write_genesis_file,
)
from zbledger.core.genutil.peers import build_persistent_peers
from zbledger.core.genutil.reader import read_gentxs
from zbledger.core.genutil.validator import validate_gentx
from zbledger.core.models.genesis import GENUTIL_MODULE, GenesisDoc, InitConfig
from zbledger.core.models.transaction import StdTx

logger = logging.getLogger(__name__)


class GenesisAssembly(NamedTuple):
    """Outcome of a successful genesis assembly run."""
    genesis_doc: GenesisDoc
    persistent_peers: str
    gentxs: List[StdTx]


def collect_std_txs(
    moniker: str,
    gentxs_dir: Union[str, Path],
    genesis_doc: GenesisDoc,
    accounts_iterator: Optional[GenesisAccountsIterator] = None,
) -> Tuple[List[StdTx], str]:
    """Read and validate all gentxs and compute the persistent peer list.

    Args:
        moniker: Moniker of the local node, excluded from the peer list
        gentxs_dir: Directory holding the gentx files
        genesis_doc: Draft genesis document declaring the accounts
        accounts_iterator: Source of the genesis accounts

    Returns:
        Tuple[List[StdTx], str]: Validated gentxs in file order and the peer list
    """
    account_index = build_account_index(genesis_doc.app_state, accounts_iterator)

    validated = []
    for gentx_file, tx in read_gentxs(gentxs_dir):
        entry = validate_gentx(tx, gentx_file.name, account_index)
        if entry.display_name == moniker:
            logger.info(f"Excluding own gentx {entry.file_name} from persistent peers")
        validated.append(entry)

    persistent_peers = build_persistent_peers(
        [(entry.node_address, entry.display_name) for entry in validated], moniker
    )
    return [entry.tx for entry in validated], persistent_peers


def genesis_state_from_gen_doc(genesis_doc: GenesisDoc) -> Dict[str, Any]:
    """Return a private copy of the genesis document's app state."""
    return copy.deepcopy(genesis_doc.app_state)


def set_gentxs_in_app_genesis_state(
    app_state: Dict[str, Any], gentxs: List[StdTx]
) -> Dict[str, Any]:
    """Return a new app state whose genutil slot holds exactly ``gentxs``.

    All other module slots are left as they are.

    Raises:
        GenesisDecodeError: If the existing genutil slot is not an object
    """
    slot = app_state.get(GENUTIL_MODULE)
    if slot is None:
        slot = {}
    elif not isinstance(slot, dict):
        raise GenesisDecodeError(f"'{GENUTIL_MODULE}' module state must be an object")

    merged = dict(app_state)
    merged[GENUTIL_MODULE] = {**slot, "gentxs": [tx.to_dict() for tx in gentxs]}
    return merged


def gen_app_state_from_config(
    node_config: NodeConfig,
    init_config: InitConfig,
    genesis_doc: GenesisDoc,
    accounts_iterator: Optional[GenesisAccountsIterator] = None,
) -> GenesisAssembly:
    """Assemble the genesis state and persist the node config and genesis file.

    The draft genesis must be for the chain named in ``init_config``.
    Nothing is written unless every gentx validated. The node config is
    written first, then the genesis file.

    Args:
        node_config: Configuration of the local node
        init_config: Parameters of this initialization run
        genesis_doc: Draft genesis document
        accounts_iterator: Source of the genesis accounts, defaults to the
            node's configured accounts module

    Returns:
        GenesisAssembly: Final genesis document, peer list and gentxs

    Raises:
        GenutilError: On any failure; the run must be considered incomplete
    """
    if accounts_iterator is None:
        accounts_iterator = AuthAccountsIterator(node_config.accounts_module)

    if init_config.chain_id != genesis_doc.chain_id:
        raise GenesisDecodeError(
            f"genesis document is for chain {genesis_doc.chain_id}, "
            f"expected {init_config.chain_id}"
        )

    logger.info(
        f"Collecting genesis transactions for chain {init_config.chain_id} "
        f"from {init_config.gentxs_dir} (node {init_config.node_id or '<unknown>'})"
    )
    gentxs, persistent_peers = collect_std_txs(
        node_config.moniker, init_config.gentxs_dir, genesis_doc, accounts_iterator
    )

    if not gentxs:
        raise EmptyGenesisError("there must be at least one genesis tx")

    app_state = set_gentxs_in_app_genesis_state(genesis_state_from_gen_doc(genesis_doc), gentxs)
    final_doc = genesis_doc.model_copy(update={"app_state": app_state}, deep=True)

    # render both artifacts before touching the disk
    config_content = render_config_file(
        node_config.config_file, node_config.moniker, persistent_peers
    )
    genesis_content = serialize_genesis_doc(final_doc)

    write_config_file(node_config.config_file, config_content)
    genesis_path = node_config.genesis_path()
    try:
        write_genesis_file(genesis_path, genesis_content)
    except GenesisPersistError as e:
        raise GenesisPersistError(
            f"node config {node_config.config_file} was updated but the genesis "
            f"file could not be written: {e}",
            path=str(genesis_path),
        ) from e

    logger.info(
        f"Assembled genesis with {len(gentxs)} gentxs, persistent peers: {persistent_peers or '<none>'}"
    )
    return GenesisAssembly(
        genesis_doc=final_doc, persistent_peers=persistent_peers, gentxs=gentxs
    )
