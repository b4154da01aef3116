"""
Loading the draft genesis document and persisting the assembly artifacts.

Outputs are written to a temporary file next to the target and moved into
place, so a failed write never leaves a truncated artifact behind.
"""
import json
import logging
import os
import stat
import tempfile
from collections.abc import MutableMapping
from pathlib import Path
from typing import Union

import tomlkit
from pydantic import ValidationError
from tomlkit.exceptions import TOMLKitError

from zbledger.core.genutil.errors import (
    GenesisDecodeError,
    GenesisIOError,
    GenesisPersistError,
)
from zbledger.core.models.genesis import GenesisDoc

logger = logging.getLogger(__name__)

# mode of newly created output files
DEFAULT_FILE_MODE = 0o644


def load_genesis_doc(path: Union[str, Path]) -> GenesisDoc:
    """Load the draft genesis document.

    Raises:
        GenesisIOError: If the file cannot be read
        GenesisDecodeError: If the file is not a genesis document
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise GenesisIOError(f"cannot read genesis file {path}: {e}", path=str(path)) from e

    try:
        return GenesisDoc.from_dict(json.loads(raw))
    except (json.JSONDecodeError, ValidationError) as e:
        raise GenesisDecodeError(
            f"invalid genesis document {path}: {e}", file_name=path.name
        ) from e


def serialize_genesis_doc(genesis_doc: GenesisDoc) -> bytes:
    """Serialize the genesis document as indented ASCII JSON with sorted keys.

    Identical documents always produce identical bytes, so independently
    assembled genesis files hash the same.
    """
    content = json.dumps(genesis_doc.to_dict(), indent=2, sort_keys=True, ensure_ascii=True)
    return encode_artifact(content + "\n", "genesis document")


def encode_artifact(content: str, name: str) -> bytes:
    """Encode an output artifact as UTF-8.

    Raises:
        GenesisDecodeError: If the content holds characters UTF-8 cannot encode
    """
    try:
        return content.encode("utf-8")
    except UnicodeEncodeError as e:
        raise GenesisDecodeError(f"{name} cannot be encoded as UTF-8: {e}") from e


def render_config_file(config_path: Union[str, Path], moniker: str, persistent_peers: str) -> bytes:
    """Return the node config with ``p2p.persistent_peers`` set.

    An existing config keeps all its other settings, comments and ordering.
    A missing config is created with the moniker and a ``[p2p]`` table.

    Raises:
        GenesisIOError: If the existing config cannot be read
        GenesisDecodeError: If the existing config is not valid TOML or the
            result cannot be encoded
    """
    config_path = Path(config_path)
    if config_path.exists():
        try:
            doc = tomlkit.parse(config_path.read_text(encoding="utf-8"))
        except OSError as e:
            raise GenesisIOError(
                f"cannot read node config {config_path}: {e}", path=str(config_path)
            ) from e
        except TOMLKitError as e:
            raise GenesisDecodeError(
                f"invalid node config {config_path}: {e}", file_name=config_path.name
            ) from e
    else:
        logger.info(f"Node config {config_path} not found, creating it")
        doc = tomlkit.document()
        doc["moniker"] = moniker

    p2p = doc.get("p2p")
    if p2p is None:
        p2p = tomlkit.table()
        p2p["persistent_peers"] = persistent_peers
        doc["p2p"] = p2p
    elif isinstance(p2p, MutableMapping):
        p2p["persistent_peers"] = persistent_peers
    else:
        raise GenesisDecodeError(
            f"'p2p' in {config_path} is not a table", file_name=config_path.name
        )

    return encode_artifact(tomlkit.dumps(doc), f"node config {config_path}")


def _target_mode(path: Path) -> int:
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        return DEFAULT_FILE_MODE


def write_file_atomic(path: Union[str, Path], content: bytes) -> None:
    """Replace ``path`` with ``content`` in a single rename.

    The new file keeps the mode of the file it replaces, or gets
    ``DEFAULT_FILE_MODE`` when there was none.

    Raises:
        GenesisPersistError: If the file cannot be written
    """
    path = Path(path)
    tmp_name = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "wb", dir=path.parent, prefix=f".{path.name}.", delete=False
        ) as tmp:
            tmp_name = tmp.name
            tmp.write(content)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.chmod(tmp_name, _target_mode(path))
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise GenesisPersistError(f"cannot write {path}: {e}", path=str(path)) from e


def write_config_file(config_path: Union[str, Path], content: bytes) -> None:
    """Persist the rendered node config."""
    write_file_atomic(config_path, content)
    logger.info(f"Wrote node config to {config_path}")


def write_genesis_file(path: Union[str, Path], content: bytes) -> None:
    """Persist the serialized genesis document."""
    write_file_atomic(path, content)
    logger.info(f"Wrote genesis file to {path}")
