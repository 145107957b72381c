import re
from logging import getLogger

from .model import (
    DELIMITER,
    ESCAPE,
    ESCAPE_TABLE,
    PREFIX,
    SONAME_RESERVED_PREFIX,
    ZSpec,
    ZSpecMalformed,
    ZSpecReservedPrefix,
)

_logger = getLogger(__name__)

_HEADER_REGEX = re.compile(
    rf"{re.escape(PREFIX)}"
    r"(?P<kind>[rw])"
    r"(?P<eclass_tag>[0-9]{4})"
    r"(?P<eclass_priority>[0-9])"
    r"Z"
    r"(?P<fnname_encoding>[ZU])"
    rf"{re.escape(DELIMITER)}",
    re.ASCII,
)


def parse(symbol: str) -> ZSpec | None:
    # decode Z-encoded interception spec, return None if symbol is not a (valid) one
    # raises ZSpecReservedPrefix if the soname uses the reserved prefix
    header = _HEADER_REGEX.match(symbol)
    if header is None:
        return None

    eclass_tag = int(header["eclass_tag"])
    eclass_priority = int(header["eclass_priority"])

    # tag 0000 means "no eclass", priority must be 0 too
    if eclass_tag == 0 and eclass_priority != 0:
        return None

    index = header.end()

    if symbol.startswith(SONAME_RESERVED_PREFIX, index):
        raise ZSpecReservedPrefix(symbol)

    try:
        soname, index = _unescape(symbol, index, delimited=True)

        if header["fnname_encoding"] == "Z":
            fnname, _ = _unescape(symbol, index, delimited=False)
        else:
            fnname = symbol[index:]
    except ZSpecMalformed as e:
        _logger.warning("error Z-demangling: `%s` (%s)", symbol, e)
        return None

    # every escape decodes to a single character
    assert len(soname) + len(fnname) <= len(symbol)

    return ZSpec(
        soname=soname,
        fnname=fnname,
        is_wrap=header["kind"] == "w",
        eclass_tag=eclass_tag,
        eclass_priority=eclass_priority,
    )


def _unescape(symbol: str, index: int, *, delimited: bool) -> tuple[str, int]:
    # decode segment starting at index, return decoded segment and index after it
    # delimited segments end after unescaped delimiter, others at the end of symbol
    decoded = list[str]()

    while index < len(symbol):
        character = symbol[index]

        if delimited and character == DELIMITER:
            return "".join(decoded), index + 1

        if character != ESCAPE:
            decoded.append(character)
            index += 1
            continue

        match ESCAPE_TABLE.decode_at(symbol, index):
            case None:
                raise ZSpecMalformed(f"unknown escape `{symbol[index : index + 2]}` at offset {index}")
            case (character_unescaped, length):
                decoded.append(character_unescaped)
                index += length

    if delimited:
        raise ZSpecMalformed("unterminated soname")

    return "".join(decoded), index
