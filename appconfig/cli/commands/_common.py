from pathlib import Path
from typing import Optional

from appconfig.cli.services.output import sprint
from appconfig.configuration.app import ApplicationCfg
from appconfig.configuration.files import dump_app_config, write_app_config

config_file_help = "The application config file (.yml, .yaml or .json)"
output_help = "Write the config to this file instead of printing it"
json_help = "Output the config as JSON"


def emit_config(config: ApplicationCfg, output: Optional[Path], print_json: bool):
    if output is None:
        print(dump_app_config(config, "json" if print_json else "yaml"))
        return
    path = write_app_config(config, output)
    sprint(f"[success]Wrote application config to [code]{path.as_posix()}")
