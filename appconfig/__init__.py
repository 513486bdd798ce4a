__version__ = "0.1.0"

from .configuration.app import (
    ApplicationCfg,
    LogSinkCfg,
    NodeCfg,
    NodeKind,
    NodeName,
    StorageProxyCfg,
    WasmCodeCfg,
)
from .configuration.builder import (
    AppConfigBuilder,
    add_logging,
    add_storage,
    default_config,
    set_grpc_port,
)
from .configuration.validation import InvalidConfiguration, is_valid, validate_config


__all__ = [
    "ApplicationCfg",
    "LogSinkCfg",
    "NodeCfg",
    "NodeKind",
    "NodeName",
    "StorageProxyCfg",
    "WasmCodeCfg",
    "AppConfigBuilder",
    "add_logging",
    "add_storage",
    "default_config",
    "set_grpc_port",
    "InvalidConfiguration",
    "is_valid",
    "validate_config",
]
