from logging import getLogger

from .model import ESCAPE, ESCAPE_TABLE, HASH_SUFFIX_LENGTH, is_alphanumeric

_logger = getLogger(__name__)

# emitted in place of the rest of a name that could not be demangled
PLACEHOLDER = "?"


def demangle(name: str) -> str:
    # name must satisfy looks_mangled(), trailing hash is dropped
    assert len(name) > HASH_SUFFIX_LENGTH

    end = len(name) - HASH_SUFFIX_LENGTH

    demangled = list[str]()
    index = 0
    while index < end:
        character = name[index]

        if character == ESCAPE:
            match ESCAPE_TABLE.decode_at(name, index):
                case None:
                    _logger.debug("Unknown escape at offset %d in `%s`", index, name)
                    demangled.append(PLACEHOLDER)
                    break
                case (character_unescaped, length):
                    demangled.append(character_unescaped)
                    index += length

        elif character == "_":
            # mangler prefixes path components starting with escape sequence with "_"
            if (index == 0 or name[index - 1] == ":") and name.startswith(ESCAPE, index + 1):
                index += 1
            else:
                demangled.append(character)
                index += 1

        elif character == ".":
            if name.startswith(".", index + 1):
                demangled.append("::")
                index += 2
            else:
                demangled.append("-")
                index += 1

        elif is_alphanumeric(character) or character == ":":
            demangled.append(character)
            index += 1

        else:
            _logger.debug("Unexpected character `%s` at offset %d in `%s`", character, index, name)
            demangled.append(PLACEHOLDER)
            break

    demangled_ = "".join(demangled)

    # every production is non-expanding and the hash is dropped
    assert len(demangled_) <= len(name)

    return demangled_
