"""
Command-line interface for zb-ledger genesis assembly.
"""
import logging
import sys
from pathlib import Path
from typing import Optional

import typer

from zbledger.core.config import NodeConfig, load_config_from_env
from zbledger.core.genutil import (
    AuthAccountsIterator,
    GenutilError,
    collect_std_txs,
    gen_app_state_from_config,
    load_genesis_doc,
)
from zbledger.core.models.genesis import InitConfig

logger = logging.getLogger("zbledger.cli")

app = typer.Typer(help="zb-ledger genesis tooling")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")):
    """Set up logging for every command."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


def _node_config(home: Optional[Path], moniker: Optional[str],
                 genesis: Optional[Path], gentx_dir: Optional[Path]) -> NodeConfig:
    try:
        node_config = load_config_from_env(
            root_dir=home, moniker=moniker, genesis_file=genesis, gentxs_dir=gentx_dir
        )
    except ValueError as e:
        typer.secho(f"❌ Invalid configuration: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    logger.debug(f"Node root {node_config.root_dir}, moniker {node_config.moniker}")
    return node_config


@app.command("collect-gentxs")
def collect_gentxs(
    home: Optional[Path] = typer.Option(None, help="Node root directory"),
    moniker: Optional[str] = typer.Option(None, help="Moniker of the local node"),
    gentx_dir: Optional[Path] = typer.Option(None, help="Directory of genesis transactions"),
    genesis: Optional[Path] = typer.Option(None, help="Genesis file to read and overwrite"),
    chain_id: Optional[str] = typer.Option(
        None, help="Expected chain ID, defaults to the one in the genesis file"
    ),
    node_id: str = typer.Option("", help="ID of the local node"),
):
    """Collect genesis transactions and write the genesis file and node config."""
    node_config = _node_config(home, moniker, genesis, gentx_dir)

    try:
        genesis_doc = load_genesis_doc(node_config.genesis_path())
        init_config = InitConfig(
            chain_id=chain_id or genesis_doc.chain_id,
            gentxs_dir=str(node_config.gentxs_path()),
            node_id=node_id,
        )
        assembly = gen_app_state_from_config(node_config, init_config, genesis_doc)
    except GenutilError as e:
        typer.secho(f"❌ Genesis assembly failed: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo(f"✅ Collected {len(assembly.gentxs)} genesis transactions")
    typer.echo(f"📄 Genesis file: {node_config.genesis_path()}")
    typer.echo(f"🔗 Persistent peers: {assembly.persistent_peers}")


@app.command("validate-gentxs")
def validate_gentxs(
    home: Optional[Path] = typer.Option(None, help="Node root directory"),
    moniker: Optional[str] = typer.Option(None, help="Moniker of the local node"),
    gentx_dir: Optional[Path] = typer.Option(None, help="Directory of genesis transactions"),
    genesis: Optional[Path] = typer.Option(None, help="Draft genesis file"),
):
    """Validate genesis transactions against the genesis accounts without writing anything."""
    node_config = _node_config(home, moniker, genesis, gentx_dir)

    try:
        genesis_doc = load_genesis_doc(node_config.genesis_path())
        gentxs, persistent_peers = collect_std_txs(
            node_config.moniker,
            node_config.gentxs_path(),
            genesis_doc,
            AuthAccountsIterator(node_config.accounts_module),
        )
    except GenutilError as e:
        typer.secho(f"❌ Invalid genesis transactions: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if not gentxs:
        typer.echo("⚠️  No genesis transactions found")
        raise typer.Exit(code=1)

    typer.echo(f"✅ {len(gentxs)} genesis transactions are valid")
    typer.echo(f"🔗 Persistent peers: {persistent_peers}")


if __name__ == "__main__":
    app()
