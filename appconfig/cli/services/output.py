import contextlib
import typing

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

from appconfig.configuration.base import ImproperlyConfigured
from appconfig.configuration.validation import InvalidConfiguration

# set by the hidden --stacktrace option
RAISE_ERRORS = False

console = Console(
    theme=Theme(
        {
            "info": "italic cyan",
            "success": "green",
            "error": "red",
            "code": "bold cyan",
        }
    )
)

_topology_hint = (
    "[info]Node names must be unique and the initial node must be a wasm node"
)


def sprint(message):
    """Print styled content"""
    console.print(message)


def abort(message: str, hint: str = None) -> typing.NoReturn:
    sprint(f"[error]{message}")
    if hint:
        sprint(hint)
    raise typer.Exit(1)


def _field_errors(e: ValidationError) -> str:
    lines = []
    for err in e.errors():
        loc = ".".join(str(p) for p in err["loc"]) or e.title
        lines.append(f"  {loc}: {err['msg']}")
    return "\n".join(lines)


@contextlib.contextmanager
def abort_on_error(message: str):
    """Turn errors raised inside the block into an error message and exit code 1"""
    if RAISE_ERRORS:
        yield
        return
    try:
        yield
    except (typer.Exit, typer.Abort):
        raise
    except InvalidConfiguration as e:
        abort(f"{message}: {escape(str(e))}", hint=_topology_hint)
    except ImproperlyConfigured as e:
        abort(f"{message}: {escape(str(e))}")
    except ValidationError as e:
        abort(f"{message}:\n{escape(_field_errors(e))}")
    except Exception as e:
        abort(f"{message}: {type(e).__name__}: {escape(str(e))}")
