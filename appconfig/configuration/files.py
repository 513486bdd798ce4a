from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from loguru import logger
from pydantic import Field

from appconfig.configuration.app import ApplicationCfg
from appconfig.configuration.base import (
    FrozenPydanticBase,
    ImproperlyConfigured,
    dump_json,
    dump_yaml,
    load_yaml,
)
from appconfig.configuration.builder import AppConfigBuilder

JSON_SUFFIXES = (".json",)
YAML_SUFFIXES = (".yml", ".yaml")


class DeploymentCfg(FrozenPydanticBase):
    """A deployment manifest, the user-facing description of an application

    `wasm_path` is resolved relative to the directory containing the manifest.
    """

    wasm_path: str
    logging: bool = False
    storage_address: Optional[str] = None
    grpc_port: Optional[int] = Field(None, ge=0, le=65535)


def _format_for_path(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix in JSON_SUFFIXES:
        return "json"
    if suffix in YAML_SUFFIXES:
        return "yaml"
    raise ImproperlyConfigured(
        f"Unsupported config file extension `{path.suffix}` (expected .json, .yml or .yaml)"
    )


def dump_app_config(config: ApplicationCfg, fmt: str = "yaml") -> str:
    if fmt == "json":
        return dump_json(config, indent=2)
    if fmt == "yaml":
        return dump_yaml(config.model_dump(mode="json", exclude_none=True))
    raise ValueError(f"Unknown format `{fmt}`")


def load_app_config(text: str, fmt: str = "yaml") -> ApplicationCfg:
    """Parse a configuration. Structural invariants are not checked here.

    YAML goes through JSON validation so base64 payloads are decoded the same way
    in both formats.
    """
    if fmt == "yaml":
        text = json.dumps(load_yaml(text) or {})
    elif fmt != "json":
        raise ValueError(f"Unknown format `{fmt}`")
    return ApplicationCfg.model_validate_json(text)


def read_app_config(path: Path | str) -> ApplicationCfg:
    path = Path(path)
    fmt = _format_for_path(path)
    logger.debug(f"Reading {fmt} application config from {path}")
    return load_app_config(path.read_text(), fmt)


def write_app_config(config: ApplicationCfg, path: Path | str) -> Path:
    path = Path(path)
    text = dump_app_config(config, _format_for_path(path))
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    logger.debug(f"Wrote application config to {path}")
    return path


def read_deployment(path: Path | str) -> DeploymentCfg:
    path = Path(path)
    try:
        text = path.read_text()
    except OSError as e:
        raise ImproperlyConfigured(f"Could not read deployment manifest {path}: {e}")
    return DeploymentCfg.model_validate(load_yaml(text) or {})


def config_from_deployment(path: Path | str) -> ApplicationCfg:
    """Build an application config from a deployment manifest

    Nodes are added in a fixed order: app, then log, then storage.
    """
    path = Path(path)
    deployment = read_deployment(path)
    wasm_path = path.parent / deployment.wasm_path
    try:
        module_bytes = wasm_path.read_bytes()
    except OSError as e:
        raise ImproperlyConfigured(f"Could not read wasm module {wasm_path}: {e}")
    logger.debug(f"Loaded {len(module_bytes)} bytes of wasm from {wasm_path}")

    builder = AppConfigBuilder(module_bytes)
    if deployment.logging:
        builder.add_logging()
    if deployment.storage_address is not None:
        builder.add_storage(deployment.storage_address)
    return builder.set_grpc_port(deployment.grpc_port).build()
