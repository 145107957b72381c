from .model import (
    ESCAPE,
    ESCAPE_TABLE,
    HASH_DIGITS,
    HASH_DIGITS_DISTINCT_MAX,
    HASH_DIGITS_DISTINCT_MIN,
    HASH_PREFIX,
    HASH_SUFFIX_LENGTH,
    is_alphanumeric,
)


def looks_mangled(name: str) -> bool:
    # name is the output of itanium demangler
    # must be long enough for "::h" + hash + something else
    if len(name) <= HASH_SUFFIX_LENGTH:
        return False

    end = len(name) - HASH_SUFFIX_LENGTH

    if not _is_prefixed_hash(name[end:]):
        return False

    return _is_path(name, end)


def _is_prefixed_hash(suffix: str) -> bool:
    if not suffix.startswith(HASH_PREFIX):
        return False

    hash_ = suffix[len(HASH_PREFIX) :]
    if not set(hash_) <= HASH_DIGITS:
        return False

    return HASH_DIGITS_DISTINCT_MIN <= len(set(hash_)) <= HASH_DIGITS_DISTINCT_MAX


def _is_path(name: str, end: int) -> bool:
    # only a-zA-Z0-9 and _.:$ are allowed, $ only as known escape token
    index = 0
    while index < end:
        character = name[index]

        if character == ESCAPE:
            match ESCAPE_TABLE.decode_at(name, index):
                case None:
                    return False
                case (_, length):
                    index += length
            continue

        if character == "." and name.startswith("...", index):
            return False

        if not (is_alphanumeric(character) or character in "_.:"):
            return False

        index += 1

    return True
