from __future__ import annotations

from typing import Optional, Set

from loguru import logger

from appconfig.configuration.app import ApplicationCfg
from appconfig.configuration.base import ImproperlyConfigured


class InvalidConfiguration(ImproperlyConfigured):
    pass


def _find_error(config: ApplicationCfg) -> Optional[str]:
    """Return a description of the first problem found, or None if there is none.

    Nodes are checked in insertion order, so the duplicate reported is always the
    first repeated name.
    """
    config_names: Set[str] = set()
    wasm_names: Set[str] = set()
    for node_config in config.node_configs:
        if node_config.name in config_names:
            return f"duplicate node config name `{node_config.name}`"
        config_names.add(node_config.name)
        if node_config.is_wasm:
            wasm_names.add(node_config.name)

    if config.initial_node not in wasm_names:
        if config.initial_node in config_names:
            return f"initial node `{config.initial_node}` is not a wasm node"
        return f"no node config named `{config.initial_node}` for the initial node"
    return None


def is_valid(config: ApplicationCfg) -> bool:
    """Check names are unique and the initial node is a wasm node.

    Never raises. The reason for a failure is only logged.
    """
    error = _find_error(config)
    if error is not None:
        logger.error(error)
        return False
    return True


def validate_config(config: ApplicationCfg) -> ApplicationCfg:
    """Like `is_valid`, but raise InvalidConfiguration on failure"""
    error = _find_error(config)
    if error is not None:
        raise InvalidConfiguration(error)
    return config
