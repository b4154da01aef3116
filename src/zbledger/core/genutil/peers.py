"""
Persistent peer list computed from the validated genesis transactions.
"""
from typing import Iterable, Tuple


def build_persistent_peers(entries: Iterable[Tuple[str, str]], moniker: str) -> str:
    """Build the comma separated bootstrap peer list.

    The entry whose display name equals the local moniker is left out, and
    the remaining node addresses are sorted so that every node derives the
    same list from the same gentx set.

    Args:
        entries: (node address, validator display name) pairs
        moniker: Moniker of the local node

    Returns:
        str: Sorted node addresses joined by "," (empty if none remain)
    """
    addresses = [address for address, name in entries if name != moniker]
    return ",".join(sorted(addresses))
