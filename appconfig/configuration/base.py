from __future__ import annotations

import json
from io import StringIO
from pathlib import Path

import pydantic
import yaml


class PydanticBase(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(
        extra="forbid",
        use_enum_values=True,
        populate_by_name=True,
        ser_json_bytes="base64",
        val_json_bytes="base64",
    )


class FrozenPydanticBase(PydanticBase):
    model_config = pydantic.ConfigDict(frozen=True)


class ImproperlyConfigured(Exception):
    pass


def load_yaml(yml: str | Path) -> dict:
    if isinstance(yml, Path):
        yml = str(yml)
    if "\n" not in yml and (yml.endswith(".yml") or yml.endswith(".yaml")):
        with open(yml) as f:
            yml = f.read()
    return yaml.load(yml, Loader=yaml.SafeLoader)


def dump_yaml(d: dict) -> str:
    io = StringIO()
    yaml.dump(d, io, Dumper=yaml.SafeDumper, sort_keys=False)
    return io.getvalue()


def dump_json(obj: PydanticBase, indent: int | None = None) -> str:
    return json.dumps(obj.model_dump(mode="json", exclude_none=True), indent=indent)
