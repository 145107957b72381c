from collections.abc import Iterator, Mapping
from typing import Any, cast

from elftools.elf.elffile import ELFFile
from elftools.elf.sections import Symbol, SymbolTableSection
from more_itertools import unique_everseen


def function_names(elffile: ELFFile) -> Iterator[str]:
    # raw (mangled) names of all functions in the symbols table, in table order, without repeats
    section = cast(
        SymbolTableSection | None,
        elffile.get_section_by_name(".symtab"),  # type: ignore
    )
    if section is None:
        raise ValueError(
            "Unable to find symbols table section (.symtab). "
            "Most likely this is caused by your toolchain / build script stripping the elf."
        )

    return unique_everseen(_function_names(section))


def _function_names(section: SymbolTableSection) -> Iterator[str]:
    for symbol in cast(Iterator[Symbol], section.iter_symbols()):  # type: ignore
        name = cast(str, symbol.name)

        entry = cast(Mapping[str, Any], symbol.entry)
        info = cast(Mapping[str, Any], entry["st_info"])

        # skip non-functions
        if info["type"] != "STT_FUNC":
            continue

        # skip unnamed entries
        if not name:
            continue

        yield name
