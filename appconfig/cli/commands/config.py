import json

from rich.table import Table
from typer import Option

from appconfig.cli.config import (
    get_cli_config_path,
    read_cli_config,
    update_cli_config,
)
from appconfig.cli.services.output import abort_on_error, sprint

_storage_help = "Set the storage address used by default when building configs"
_port_help = "Set the gRPC port used by default when building configs"
_json_help = "Output the config as JSON"


def config(
    storage: str = Option(None, "-s", "--storage", help=_storage_help),
    port: int = Option(None, "-p", "--port", min=0, max=65535, help=_port_help),
    print_json: bool = Option(False, "--json", help=_json_help),
):
    """Get or set the default values used by other commands"""
    with abort_on_error("Error updating config"):
        if storage is not None or port is not None:
            update = {}
            if storage is not None:
                update["default_storage_address"] = storage
            if port is not None:
                update["default_grpc_port"] = port
            cfg = update_cli_config(**update)
        else:
            cfg = read_cli_config()
    config_path = get_cli_config_path().as_posix()

    rows = {
        "default_storage_address": cfg.default_storage_address,
        "default_grpc_port": cfg.default_grpc_port,
    }
    if print_json:
        rows["config file"] = config_path
        print(json.dumps(rows))
    else:
        sprint(f"[info]Your appconfig config is located at [code]{config_path}")
        t = Table(show_header=False)
        for k, v in rows.items():
            t.add_row(k, "" if v is None else str(v))
        sprint(t)
