from typing import List

import pytest
from loguru import logger

from appconfig.configuration.app import (
    ApplicationCfg,
    LogSinkCfg,
    NodeCfg,
    StorageProxyCfg,
    WasmCodeCfg,
)


def wasm_node(name: str, module_bytes: bytes = b"\0asm") -> NodeCfg:
    return NodeCfg(name=name, kind=WasmCodeCfg(module_bytes=module_bytes))


def log_node(name: str) -> NodeCfg:
    return NodeCfg(name=name, kind=LogSinkCfg())


def storage_node(name: str, address: str = "localhost:7867") -> NodeCfg:
    return NodeCfg(name=name, kind=StorageProxyCfg(address=address))


def app_config(initial_node: str, *nodes: NodeCfg) -> ApplicationCfg:
    return ApplicationCfg(initial_node=initial_node, node_configs=list(nodes))


@pytest.fixture
def error_logs() -> List[str]:
    messages = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="ERROR")
    yield messages
    logger.remove(handler_id)
