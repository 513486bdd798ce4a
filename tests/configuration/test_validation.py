import pytest

from appconfig.configuration.base import ImproperlyConfigured
from appconfig.configuration.builder import (
    add_logging,
    add_storage,
    default_config,
    set_grpc_port,
)
from appconfig.configuration.validation import (
    InvalidConfiguration,
    is_valid,
    validate_config,
)
from tests.configuration.utils import (
    app_config,
    error_logs,
    log_node,
    storage_node,
    wasm_node,
)


@pytest.mark.parametrize("module_bytes", [b"", b"x", b"\0asm\1\0\0\0", bytes(range(256))])
def test_default_config_is_valid(module_bytes: bytes):
    assert is_valid(default_config(module_bytes))


def test_default_config_with_logging_and_storage_is_valid():
    config = default_config(b"x")
    add_logging(config)
    add_storage(config, "localhost:7867")
    assert len(config.node_configs) == 3
    assert is_valid(config)
    assert validate_config(config) is config


def test_duplicate_logging_is_invalid(error_logs):
    config = default_config(b"x")
    add_logging(config)
    add_logging(config)
    assert not is_valid(config)
    assert error_logs == ["duplicate node config name `log`"]


def test_duplicate_storage_is_invalid():
    config = default_config(b"x")
    add_storage(config, "a")
    add_storage(config, "b")
    assert not is_valid(config)


def test_duplicate_of_different_kinds_is_invalid():
    config = app_config("app", wasm_node("app"), log_node("app"))
    assert not is_valid(config)


def test_first_duplicate_is_reported(error_logs):
    config = app_config(
        "app",
        wasm_node("app"),
        log_node("b"),
        storage_node("a"),
        log_node("a"),
        log_node("b"),
    )
    assert not is_valid(config)
    assert error_logs == ["duplicate node config name `a`"]


def test_names_are_case_sensitive():
    config = app_config("app", wasm_node("app"), log_node("App"), log_node("APP"))
    assert is_valid(config)


@pytest.mark.parametrize("node", [log_node("app"), storage_node("app")])
def test_initial_node_must_be_wasm(node, error_logs):
    config = app_config("app", node)
    assert not is_valid(config)
    assert error_logs == ["initial node `app` is not a wasm node"]


def test_initial_node_missing(error_logs):
    config = app_config("main", wasm_node("app"), log_node("log"))
    assert not is_valid(config)
    assert error_logs == ["no node config named `main` for the initial node"]


@pytest.mark.parametrize("initial_node", ["", "app", "log"])
def test_empty_config_is_invalid(initial_node: str):
    assert not is_valid(app_config(initial_node))


def test_extra_wasm_nodes_allowed():
    config = app_config("second", wasm_node("first"), wasm_node("second"))
    assert is_valid(config)


@pytest.mark.parametrize("port", [None, 0, 80, 8080, 65535, -1, 70000])
def test_port_does_not_affect_validity(port):
    valid = default_config(b"x")
    set_grpc_port(valid, port)
    assert is_valid(valid)

    invalid = default_config(b"x")
    add_logging(invalid)
    add_logging(invalid)
    set_grpc_port(invalid, port)
    assert not is_valid(invalid)


def test_is_valid_does_not_mutate():
    config = default_config(b"x")
    add_logging(config)
    before = config.model_copy(deep=True)
    is_valid(config)
    assert config == before


def test_validate_config_raises():
    config = default_config(b"x")
    add_logging(config)
    add_logging(config)
    with pytest.raises(InvalidConfiguration, match="duplicate node config name `log`"):
        validate_config(config)
    with pytest.raises(ImproperlyConfigured):
        validate_config(app_config("app"))
