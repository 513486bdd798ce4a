from __future__ import annotations

from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import Field

from appconfig.configuration.base import FrozenPydanticBase, PydanticBase


class NodeName(str, Enum):
    """Conventional names of the nodes created by the builder"""

    APP = "app"
    LOG = "log"
    STORAGE = "storage"


class NodeKind(str, Enum):
    WASM = "wasm"
    LOG = "log"
    STORAGE = "storage"


class WasmCodeCfg(FrozenPydanticBase):
    """An executable WebAssembly module

    The module is opaque to this package. In YAML and JSON it is written as a
    base64 string; only JSON input is decoded, so bytes given in Python are kept
    as they are.
    """

    type: Literal["wasm"] = "wasm"
    module_bytes: bytes = b""


class LogSinkCfg(FrozenPydanticBase):
    type: Literal["log"] = "log"


class StorageProxyCfg(FrozenPydanticBase):
    type: Literal["storage"] = "storage"
    address: str


NodeKindCfg = Annotated[
    Union[WasmCodeCfg, LogSinkCfg, StorageProxyCfg], Field(discriminator="type")
]


class NodeCfg(FrozenPydanticBase):
    name: str
    kind: NodeKindCfg

    @property
    def node_kind(self) -> NodeKind:
        return NodeKind(self.kind.type)

    @property
    def is_wasm(self) -> bool:
        return isinstance(self.kind, WasmCodeCfg)


class ApplicationCfg(PydanticBase):
    """The topology of an application: its nodes, entry node and gRPC port

    Nodes are only ever appended. Nothing here checks that names are unique or
    that `initial_node` resolves; see `appconfig.configuration.validation`.
    """

    node_configs: List[NodeCfg] = []
    initial_node: str = ""
    grpc_port: Optional[int] = None
