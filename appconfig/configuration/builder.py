from __future__ import annotations

from typing import Optional

from appconfig.configuration.app import (
    ApplicationCfg,
    LogSinkCfg,
    NodeCfg,
    NodeName,
    StorageProxyCfg,
    WasmCodeCfg,
)


def default_config(module_bytes: bytes) -> ApplicationCfg:
    """Build a configuration with a single wasm node that is also the entry node"""
    config = ApplicationCfg(initial_node=NodeName.APP.value)
    config.node_configs.append(
        NodeCfg(name=NodeName.APP.value, kind=WasmCodeCfg(module_bytes=module_bytes))
    )
    return config


def add_logging(config: ApplicationCfg):
    """Append a log sink node. Calling this twice yields a duplicate name."""
    config.node_configs.append(NodeCfg(name=NodeName.LOG.value, kind=LogSinkCfg()))


def add_storage(config: ApplicationCfg, storage_address: str):
    config.node_configs.append(
        NodeCfg(
            name=NodeName.STORAGE.value,
            kind=StorageProxyCfg(address=storage_address),
        )
    )


def set_grpc_port(config: ApplicationCfg, port: Optional[int]):
    config.grpc_port = port


class AppConfigBuilder:
    """Assemble an ApplicationCfg by chaining calls

    The builder never checks names or the entry node, so it will happily build
    configurations that `is_valid` rejects:

        cfg = AppConfigBuilder(wasm).add_logging().set_grpc_port(8080).build()
    """

    def __init__(self, module_bytes: bytes = None, config: ApplicationCfg = None):
        if module_bytes is not None and config is not None:
            raise ValueError("Pass either module_bytes or an existing config, not both")
        if config is None:
            config = (
                ApplicationCfg()
                if module_bytes is None
                else default_config(module_bytes)
            )
        self._config = config

    def add_logging(self) -> AppConfigBuilder:
        add_logging(self._config)
        return self

    def add_storage(self, storage_address: str) -> AppConfigBuilder:
        add_storage(self._config, storage_address)
        return self

    def set_grpc_port(self, port: Optional[int]) -> AppConfigBuilder:
        set_grpc_port(self._config, port)
        return self

    def add_node(self, node: NodeCfg) -> AppConfigBuilder:
        self._config.node_configs.append(node)
        return self

    def set_initial_node(self, name: str) -> AppConfigBuilder:
        self._config.initial_node = name
        return self

    def build(self) -> ApplicationCfg:
        return self._config
