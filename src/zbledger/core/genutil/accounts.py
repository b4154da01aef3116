"""
Index of the accounts pre-declared in the draft genesis app state.

Validator gentxs must be signed by one of these accounts.
"""
import logging
from typing import Any, Dict, Iterator, Optional, Protocol

from pydantic import ValidationError

from zbledger.core.genutil.errors import GenesisDecodeError
from zbledger.core.models.genesis import GenesisAccount

logger = logging.getLogger(__name__)


class GenesisAccountsIterator(Protocol):
    """Source of the accounts embedded in a genesis app state."""

    def iterate_genesis_accounts(self, app_state: Dict[str, Any]) -> Iterator[GenesisAccount]:
        ...


class AuthAccountsIterator:
    """Iterates the accounts stored under ``app_state[module]["accounts"]``."""

    def __init__(self, module_name: str = "auth"):
        self.module_name = module_name

    def iterate_genesis_accounts(self, app_state: Dict[str, Any]) -> Iterator[GenesisAccount]:
        module_state = app_state.get(self.module_name)
        if not isinstance(module_state, dict):
            raise GenesisDecodeError(
                f"app state has no decodable '{self.module_name}' module state"
            )

        accounts = module_state.get("accounts", [])
        if not isinstance(accounts, list):
            raise GenesisDecodeError(
                f"'{self.module_name}.accounts' must be a list, got {type(accounts).__name__}"
            )

        for position, raw in enumerate(accounts):
            try:
                yield GenesisAccount.model_validate(raw)
            except ValidationError as e:
                raise GenesisDecodeError(
                    f"invalid account #{position} in '{self.module_name}' module state: {e}"
                ) from e


def build_account_index(
    app_state: Dict[str, Any],
    accounts_iterator: Optional[GenesisAccountsIterator] = None,
) -> Dict[str, GenesisAccount]:
    """Build a lookup of the genesis accounts keyed by address.

    Duplicate addresses are not rejected here; the last one wins.

    Args:
        app_state: The draft genesis app state
        accounts_iterator: Source of the accounts, defaults to the auth module

    Returns:
        Dict[str, GenesisAccount]: Accounts keyed by address
    """
    if accounts_iterator is None:
        accounts_iterator = AuthAccountsIterator()

    index: Dict[str, GenesisAccount] = {}
    for account in accounts_iterator.iterate_genesis_accounts(app_state):
        index[account.address] = account

    logger.debug(f"Indexed {len(index)} genesis accounts")
    return index
