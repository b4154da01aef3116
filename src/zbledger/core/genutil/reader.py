"""
Reading genesis transaction files from the gentx directory.
"""
import json
import logging
import os
from pathlib import Path
from typing import Iterator, NamedTuple, Tuple, Union

from pydantic import ValidationError

from zbledger.core.genutil.errors import GenesisDecodeError, GenesisIOError
from zbledger.core.models.transaction import StdTx

logger = logging.getLogger(__name__)

GENTX_SUFFIX = ".json"


class GenTxFile(NamedTuple):
    """Raw content of one gentx file."""
    name: str
    path: Path
    payload: bytes


def read_gentx_files(gentxs_dir: Union[str, Path]) -> Iterator[GenTxFile]:
    """Yield every regular ``*.json`` file of the gentx directory.

    Subdirectories are skipped even when their name ends in ``.json``, as are
    files with any other suffix. Files are yielded in file-name order.

    Args:
        gentxs_dir: Directory holding the gentx files

    Yields:
        GenTxFile: Name, path and raw payload of each gentx file

    Raises:
        GenesisIOError: If the directory cannot be listed or a file cannot be read
    """
    gentxs_dir = Path(gentxs_dir)
    try:
        with os.scandir(gentxs_dir) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except OSError as e:
        raise GenesisIOError(
            f"cannot list gentx directory {gentxs_dir}: {e}", path=str(gentxs_dir)
        ) from e

    for entry in entries:
        # a file named exactly ".json" counts as a gentx too
        if not entry.name.endswith(GENTX_SUFFIX):
            continue

        try:
            if not entry.is_file():
                logger.debug(f"Skipping non-file entry {entry.name}")
                continue
            payload = Path(entry.path).read_bytes()
        except OSError as e:
            raise GenesisIOError(
                f"cannot read gentx file {entry.name}: {e}", path=entry.path
            ) from e

        yield GenTxFile(name=entry.name, path=Path(entry.path), payload=payload)


def decode_gentx(gentx_file: GenTxFile) -> StdTx:
    """Decode the payload of a gentx file.

    Raises:
        GenesisDecodeError: If the payload is not a valid genesis transaction
    """
    try:
        data = json.loads(gentx_file.payload)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise GenesisDecodeError(
            f"{gentx_file.name} is not valid JSON: {e}", file_name=gentx_file.name
        ) from e

    try:
        return StdTx.model_validate(data)
    except ValidationError as e:
        raise GenesisDecodeError(
            f"{gentx_file.name} is not a genesis transaction: {e}",
            file_name=gentx_file.name,
        ) from e


def read_gentxs(gentxs_dir: Union[str, Path]) -> Iterator[Tuple[GenTxFile, StdTx]]:
    """Yield each gentx file of the directory together with its decoded transaction."""
    for gentx_file in read_gentx_files(gentxs_dir):
        logger.debug(f"Decoding gentx {gentx_file.name}")
        yield gentx_file, decode_gentx(gentx_file)
