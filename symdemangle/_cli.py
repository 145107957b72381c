# side-effect module to be used within __main__.py

import logging
from functools import cache
from itertools import chain

from rich.console import Console
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text
from rich.traceback import install

from .s03_rust.model import HASH_DIGITS, HASH_LENGTH

console = Console()

install(
    console=console,
)

logging.basicConfig(
    level=logging.WARNING,
    format="%(message)s",
    datefmt="[%X]",
    handlers=[
        RichHandler(
            rich_tracebacks=True,
            markup=False,
        )
    ],
)
logging.getLogger("symdemangle").setLevel(logging.DEBUG)
logging.getLogger("__main__").setLevel(logging.DEBUG)


@cache
def name_format(name: str) -> Text:
    parts = name.split("::")

    # special case - if last part is h+HEX - this is rust hash left in place, dim it
    part_format_rust_hash = _name_format_rust_hash(parts[-1]) if len(parts) > 1 else None
    if part_format_rust_hash is not None:
        del parts[-1]

    # last item should be function name - highlight it
    part_format_function_name = Text(
        parts[-1],
        style=Style(
            bold=True,
        ),
    )
    del parts[-1]

    # others - treat them normally
    parts_format_path = [Text(part) for part in parts]

    # combine
    format_ = Text("::").join(
        chain(
            parts_format_path,
            [part_format_function_name],
            ([part_format_rust_hash] if part_format_rust_hash is not None else []),
        )
    )

    return format_


def _name_format_rust_hash(part: str) -> Text | None:
    # h + lowercase hex
    if len(part) != 1 + HASH_LENGTH:
        return None

    if part[0] != "h":
        return None

    if not set(part[1:]) <= HASH_DIGITS:
        return None

    return Text(
        part,
        style=Style(
            dim=True,
        ),
    )
