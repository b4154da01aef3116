"""
Pytest configuration for zbledger tests.

This file helps pytest find the package when it is not installed and provides
helpers for building gentx directories and draft genesis documents.
"""

import json
import os
import sys

import pytest

# Add the src directory to the Python path to help with imports
src_root = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if src_root not in sys.path:
    sys.path.insert(0, src_root)

from zbledger.core.models.genesis import GenesisDoc  # noqa: E402


def gentx_data(memo, display_name, signer, kind="create_validator", extra_messages=0):
    """Build the JSON content of a genesis transaction."""
    message = {
        "kind": kind,
        "signer": signer,
        "display_name": display_name,
        "pubkey": f"pub-{display_name}",
        "commission": {"rate": "0.10"},
    }
    return {
        "messages": [message] + [dict(message) for _ in range(extra_messages)],
        "memo": memo,
        "fee": {"amount": [], "gas": "200000"},
        "signatures": [{"signature": f"sig-{signer}"}],
    }


def write_gentx(directory, name, data):
    """Write a gentx file and return its path."""
    path = directory / name
    path.write_text(json.dumps(data))
    return path


def draft_genesis_dict(addresses=("addr1", "addr2")):
    return {
        "genesis_time": "2020-06-01T00:00:00Z",
        "chain_id": "zb-test",
        "consensus_params": {"block": {"max_bytes": "22020096"}},
        "app_hash": "",
        "app_state": {
            "auth": {
                "params": {"max_memo_characters": "256"},
                "accounts": [
                    {"address": address, "coins": [], "sequence": "0"}
                    for address in addresses
                ],
            },
            "validator": {"validators": []},
            "genutil": {"gentxs": None},
        },
    }


@pytest.fixture
def draft_genesis():
    """Draft genesis document declaring addr1 and addr2."""
    return GenesisDoc.from_dict(draft_genesis_dict())


@pytest.fixture
def gentx_dir(tmp_path):
    """Gentx directory with the alice and bob gentxs."""
    directory = tmp_path / "gentx"
    directory.mkdir()
    write_gentx(directory, "v1.json", gentx_data("nodeA@10.0.0.1:26656", "alice", "addr1"))
    write_gentx(directory, "v2.json", gentx_data("nodeB@10.0.0.2:26656", "bob", "addr2"))
    return directory
