from pathlib import Path

from typer import Argument, Option

from appconfig.cli.commands._common import emit_config, json_help, output_help
from appconfig.cli.services.output import abort_on_error
from appconfig.configuration.files import config_from_deployment
from appconfig.configuration.validation import validate_config

_manifest_help = "The deployment manifest (.yml) describing the application"


def deploy(
    manifest: Path = Argument(..., exists=True, dir_okay=False, help=_manifest_help),
    output: Path = Option(None, "-o", "--output", dir_okay=False, help=output_help),
    print_json: bool = Option(False, "--json", help=json_help),
):
    """Build an application config from a deployment manifest"""
    with abort_on_error("Error reading deployment manifest"):
        config = validate_config(config_from_deployment(manifest))
        emit_config(config, output, print_json)
