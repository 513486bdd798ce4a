from pathlib import Path

from typer import Argument, Option

from appconfig.cli.commands._common import emit_config, json_help, output_help
from appconfig.cli.config import read_cli_config
from appconfig.cli.services.output import abort_on_error
from appconfig.configuration.builder import AppConfigBuilder
from appconfig.configuration.validation import validate_config

_wasm_help = "Path to the wasm module run by the entry node"
_logging_help = "Add a log sink node"
_storage_help = "Add a storage proxy node with this address"
_port_help = "The port of the gRPC entry point"


def build(
    wasm_path: Path = Argument(..., exists=True, dir_okay=False, help=_wasm_help),
    logging: bool = Option(False, "-l", "--logging", help=_logging_help),
    storage: str = Option(None, "-s", "--storage", help=_storage_help),
    port: int = Option(None, "-p", "--port", min=0, max=65535, help=_port_help),
    output: Path = Option(None, "-o", "--output", dir_okay=False, help=output_help),
    print_json: bool = Option(False, "--json", help=json_help),
):
    """Build an application config around a wasm module

    The storage address and port default to the values set with
    [bold cyan]appconfig config[/].
    """
    with abort_on_error("Error building application config"):
        cfg = read_cli_config()
        if storage is None:
            storage = cfg.default_storage_address
        if port is None:
            port = cfg.default_grpc_port
        builder = AppConfigBuilder(wasm_path.read_bytes())
        if logging:
            builder.add_logging()
        if storage is not None:
            builder.add_storage(storage)
        config = validate_config(builder.set_grpc_port(port).build())
        emit_config(config, output, print_json)
