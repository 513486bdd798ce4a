import json
from pathlib import Path

from rich.table import Table
from typer import Argument, Option

from appconfig.cli.commands._common import config_file_help
from appconfig.cli.services.output import abort_on_error, sprint
from appconfig.configuration.app import (
    ApplicationCfg,
    NodeCfg,
    StorageProxyCfg,
    WasmCodeCfg,
)
from appconfig.configuration.files import read_app_config

_json_help = "Output a summary of the config as JSON"


def show(
    config_file: Path = Argument(..., exists=True, dir_okay=False, help=config_file_help),
    print_json: bool = Option(False, "--json", help=_json_help),
):
    """Print the nodes of an application config"""
    with abort_on_error("Error reading application config"):
        config = read_app_config(config_file)

    if print_json:
        print(json.dumps(_summary(config)))
        return

    t = Table(title=config_file.name)
    for h in ("name", "kind", "detail"):
        t.add_column(h)
    for node in config.node_configs:
        name = f"{node.name} *" if node.name == config.initial_node else node.name
        t.add_row(name, node.node_kind.value, _detail(node))
    sprint(t)
    port = config.grpc_port if config.grpc_port is not None else "not set"
    sprint(f"[info]Entry node: [code]{config.initial_node}[/code]  gRPC port: {port}")


def _detail(node: NodeCfg) -> str:
    if isinstance(node.kind, WasmCodeCfg):
        return f"{len(node.kind.module_bytes)} bytes"
    if isinstance(node.kind, StorageProxyCfg):
        return node.kind.address
    return ""


def _summary(config: ApplicationCfg) -> dict:
    return {
        "initial_node": config.initial_node,
        "grpc_port": config.grpc_port,
        "nodes": [
            {"name": n.name, "kind": n.node_kind.value, "detail": _detail(n)}
            for n in config.node_configs
        ],
    }
