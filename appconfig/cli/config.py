import os
from pathlib import Path
from typing import Optional

import platformdirs
import pydantic

CLI_CONFIG_ENV_VAR = "APPCONFIG_CONFIG"
CLI_CONFIG_NAME = "config.json"


class CliConfig(pydantic.BaseModel):
    default_storage_address: Optional[str] = None
    default_grpc_port: Optional[int] = pydantic.Field(None, ge=0, le=65535)

    model_config = pydantic.ConfigDict(extra="ignore", populate_by_name=True)


def get_cli_config_path() -> Path:
    path = os.environ.get(CLI_CONFIG_ENV_VAR)
    if path:
        return Path(path)
    config_dir = platformdirs.user_config_dir(
        "appconfig", appauthor=False, roaming=True
    )
    return Path(config_dir) / CLI_CONFIG_NAME


def read_cli_config() -> CliConfig:
    path = get_cli_config_path()
    if path.exists():
        return CliConfig.model_validate_json(path.read_text())
    return CliConfig()


def write_cli_config(config: CliConfig):
    path = get_cli_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(config.model_dump_json(indent=2))


_UNCHANGED = object()


def update_cli_config(
    default_storage_address: Optional[str] = _UNCHANGED,
    default_grpc_port: Optional[int] = _UNCHANGED,
) -> CliConfig:
    cfg = read_cli_config()
    update = {}
    if default_storage_address is not _UNCHANGED:
        update["default_storage_address"] = default_storage_address
    if default_grpc_port is not _UNCHANGED:
        update["default_grpc_port"] = default_grpc_port
    copy = CliConfig.model_validate({**cfg.model_dump(), **update})
    write_cli_config(copy)
    return copy
