import cxxfilt

from .config import Config
from .model import strip_params


def demangle(name: str, config: Config) -> str | None:
    # GeneralDemangler backed by c++ runtime __cxa_demangle
    try:
        demangled = cxxfilt.demangle(name, external_only=config.external_only)
    except cxxfilt.InvalidName:
        return None

    # cxxfilt returns input unchanged for names it does not consider mangled
    if demangled == name:
        return None

    if not config.params:
        demangled = strip_params(demangled)

    return demangled
