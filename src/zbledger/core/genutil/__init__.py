"""
Genesis bootstrap assembly for the zb-ledger network.
"""
from zbledger.core.genutil.accounts import AuthAccountsIterator, GenesisAccountsIterator, \
    build_account_index
from zbledger.core.genutil.collect import GenesisAssembly, collect_std_txs, \
    gen_app_state_from_config, genesis_state_from_gen_doc, set_gentxs_in_app_genesis_state
from zbledger.core.genutil.errors import GenutilError, GenesisIOError, GenesisDecodeError, \
    GenTxValidationError, EmptyGenesisError, GenesisPersistError
from zbledger.core.genutil.files import load_genesis_doc
from zbledger.core.genutil.peers import build_persistent_peers
from zbledger.core.genutil.reader import GenTxFile, decode_gentx, read_gentx_files, read_gentxs
from zbledger.core.genutil.validator import ValidatedGenTx, validate_gentx

__all__ = [
    "AuthAccountsIterator",
    "GenesisAccountsIterator",
    "build_account_index",
    "GenesisAssembly",
    "collect_std_txs",
    "gen_app_state_from_config",
    "genesis_state_from_gen_doc",
    "set_gentxs_in_app_genesis_state",
    "GenutilError",
    "GenesisIOError",
    "GenesisDecodeError",
    "GenTxValidationError",
    "EmptyGenesisError",
    "GenesisPersistError",
    "load_genesis_doc",
    "build_persistent_peers",
    "GenTxFile",
    "decode_gentx",
    "read_gentx_files",
    "read_gentxs",
    "ValidatedGenTx",
    "validate_gentx",
]
