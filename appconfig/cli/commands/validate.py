from pathlib import Path

from typer import Argument

from appconfig.cli.commands._common import config_file_help
from appconfig.cli.services.output import abort_on_error, sprint
from appconfig.configuration.files import read_app_config
from appconfig.configuration.validation import validate_config


def validate(
    config_file: Path = Argument(..., exists=True, dir_okay=False, help=config_file_help),
):
    """Check that an application config can be launched"""
    with abort_on_error("Application config is invalid"):
        config = validate_config(read_app_config(config_file))
    sprint(
        f"[success]Valid application config ({len(config.node_configs)} nodes, "
        f"entry node [code]{config.initial_node}[/code]): {config_file.as_posix()}"
    )
