from dataclasses import dataclass

from ..common import EscapeTable

# _vg<r|w><tag:4><priority:1>Z<Z|U>_<soname>_<fnname>
PREFIX = "_vg"
SONAME_RESERVED_PREFIX = "VG_Z_"
ESCAPE = "Z"
DELIMITER = "_"

ESCAPE_TABLE = EscapeTable(
    {
        "Za": "*",
        "Zc": ":",
        "Zd": ".",
        "Zh": "-",
        "Zp": "+",
        "Zs": " ",
        "Zu": "_",
        "ZA": "@",
        "ZD": "$",
        "ZL": "(",
        "ZP": "%",
        "ZR": ")",
        "ZS": "/",
        "ZZ": "Z",
    }
)

ECLASS_TAG_MAX = 9999
ECLASS_PRIORITY_MAX = 9


class ZSpecReservedPrefix(Exception):
    # soname starting with VG_Z_ means a soname macro was not expanded by the producer
    # this is a naming convention violation, not malformed input
    def __init__(self, symbol: str) -> None:
        super().__init__(
            f"symbol with a `{SONAME_RESERVED_PREFIX}` prefix: `{symbol}`. "
            "Soname placeholders must be expanded before Z-encoding."
        )
        self.symbol = symbol


class ZSpecMalformed(Exception):
    def __init__(self, reason: str) -> None:
        super().__init__(reason)


@dataclass(frozen=True, kw_only=True)
class ZSpec:
    soname: str
    fnname: str

    is_wrap: bool  # True - wrap, False - redirect

    eclass_tag: int
    eclass_priority: int

    def __post_init__(self) -> None:
        # tag is 4 decimal digits
        assert 0 <= self.eclass_tag <= ECLASS_TAG_MAX

        # priority is 1 decimal digit
        assert 0 <= self.eclass_priority <= ECLASS_PRIORITY_MAX

        # no eclass means no priority
        assert self.eclass_tag != 0 or self.eclass_priority == 0
