from importlib import metadata
from logging import getLogger
from pathlib import Path
from typing import Annotated

from elftools.elf.elffile import ELFFile
from rich.table import Column, Table
from rich.text import Text
from typer import Argument, BadParameter, Exit, Option, Typer

from ._cli import console, name_format
from .config import Config
from .elf import function_names
from .parse import demangle as demangle_
from .parse import parse_config_path
from .s01_z_encoding.encode import encode
from .s01_z_encoding.model import ZSpec, ZSpecReservedPrefix
from .s01_z_encoding.parse import parse as z_parse
from .s02_general.cxxfilt import demangle as cxxfilt_demangle

_logger = getLogger(__name__)

app = Typer()


@app.command()
def demangle(
    symbols: list[str],
    general: Annotated[bool, Option("--general/--no-general", help="Undo itanium (and rust) mangling.")] = True,
    z: Annotated[bool, Option("--z/--no-z", help="Undo Z-encoding.")] = True,
    config_path: Annotated[Path | None, Option("--config")] = None,
) -> None:
    config = parse_config_path(config_path)

    table = Table(
        Column("Symbol", overflow="fold"),
        Column("Demangled", overflow="fold"),
        title="Symbols",
    )

    for symbol in symbols:
        table.add_row(
            Text(symbol),
            name_format(_demangle(symbol, general=general, z=z, config=config)),
        )

    console.print(table)


@app.command()
def symbols(
    elf_path: Path,
    config_path: Annotated[Path | None, Argument()] = None,
) -> None:
    config = parse_config_path(config_path)

    with console.status("Parsing..."), elf_path.open("rb") as elf_file:
        elffile = ELFFile(elf_file)  # type: ignore
        names = list(function_names(elffile))

    table = Table(
        Column("Symbol", overflow="fold"),
        Column("Demangled", overflow="fold"),
        title=f"Functions ({len(names)})",
    )

    for name in names:
        table.add_row(
            Text(name),
            name_format(_demangle(name, general=True, z=True, config=config)),
        )

    console.print(table)


@app.command()
def z_decode(symbol: str) -> None:
    try:
        z_spec = z_parse(symbol)
    except ZSpecReservedPrefix as e:
        _logger.error("%s", e)
        raise Exit(code=2) from e

    if z_spec is None:
        _logger.error("`%s` is not a Z-encoded symbol.", symbol)
        raise Exit(code=1)

    table = Table(
        Column("Field"),
        Column("Value", overflow="fold"),
        title=symbol,
    )
    table.add_row("soname", Text(z_spec.soname))
    table.add_row("fnname", name_format(z_spec.fnname))
    table.add_row("kind", "wrap" if z_spec.is_wrap else "redirect")
    table.add_row("eclass tag", f"{z_spec.eclass_tag:04d}")
    table.add_row("eclass priority", f"{z_spec.eclass_priority}")

    console.print(table)


@app.command()
def z_encode(
    soname: str,
    fnname: str,
    wrap: Annotated[bool, Option("--wrap/--redirect")] = False,
    tag: Annotated[int, Option(min=0, max=9999)] = 0,
    priority: Annotated[int, Option(min=0, max=9)] = 0,
    plain_fnname: Annotated[bool, Option(help="Copy fnname without Z-escaping.")] = False,
) -> None:
    if tag == 0 and priority != 0:
        raise BadParameter("Priority requires non-zero eclass tag.", param_hint="--priority")

    z_spec = ZSpec(
        soname=soname,
        fnname=fnname,
        is_wrap=wrap,
        eclass_tag=tag,
        eclass_priority=priority,
    )

    print(encode(z_spec, fnname_encoded=not plain_fnname))


@app.command()
def version() -> None:
    version_ = metadata.version("symdemangle")

    print(version_)


def _demangle(name: str, *, general: bool, z: bool, config: Config) -> str:
    try:
        return demangle_(
            name,
            general=general,
            z=z,
            config=config,
            general_demangler=cxxfilt_demangle,
        )
    except ZSpecReservedPrefix as e:
        # producer-side naming bug, there is no sensible name to show
        _logger.error("%s", e)
        raise Exit(code=2) from e


if __name__ == "__main__":
    app()
