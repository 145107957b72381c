from typing import Protocol

from .config import Config

# prefix of names mangled with itanium c++ abi
PREFIX = "_Z"


class GeneralDemangler(Protocol):
    # external decoder for the general (itanium) mangling
    # returns None if name could not be demangled, otherwise a freshly created string
    def __call__(self, name: str, config: Config) -> str | None: ...


def is_mangled(name: str) -> bool:
    return name.startswith(PREFIX)


def strip_params(demangled: str) -> str:
    # remove trailing, outermost parameter list (with qualifiers following it, like `const`)
    depth = 0
    for index in range(len(demangled) - 1, -1, -1):
        match demangled[index]:
            case ")":
                depth += 1
            case "(":
                depth -= 1
                if depth == 0:
                    return demangled[:index]
            case ":" | "<" | ">" if depth == 0:
                # name continues past the last parameter list (local entity, template), nothing to strip
                return demangled

    return demangled
