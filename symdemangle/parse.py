# names are mangled in up to three stages, applied in order:
#   0. rust front end (legacy rust mangling)
#   1. itanium c++ mangling
#   2. Z-encoding, for names being part of interception specs
# demangling undoes them in reverse order

from pathlib import Path

from .config import Config
from .s01_z_encoding.parse import parse as s01_z_encoding_parse
from .s02_general.model import GeneralDemangler
from .s02_general.model import is_mangled as s02_general_is_mangled
from .s03_rust.classify import looks_mangled as s03_rust_looks_mangled
from .s03_rust.parse import demangle as s03_rust_demangle


def parse_config_path(config_path: Path | None) -> Config:
    if config_path is None:
        return Config.default()

    with config_path.open("r") as config_file:
        config = Config.model_validate_json(config_file.read())

    return config


def demangle(
    name: str,
    *,
    general: bool,
    z: bool,
    config: Config,
    general_demangler: GeneralDemangler,
) -> str:
    # returns name unchanged for every stage that is skipped or fails
    # raises ZSpecReservedPrefix (from Z stage) for producer-side naming bugs

    # undo Z-encoding, soname is not interesting for humans
    if z:
        z_spec = s01_z_encoding_parse(name)
        if z_spec is not None:
            name = z_spec.fnname

    if not (general and config.demangle and s02_general_is_mangled(name)):
        return name

    # undo itanium mangling
    demangled = general_demangler(name, config.general)
    if demangled is None:
        return name

    # undo rust mangling
    # only done on general demangler output, rust symbols are always itanium-mangled afterwards
    if s03_rust_looks_mangled(demangled):
        demangled = s03_rust_demangle(demangled)

    return demangled
