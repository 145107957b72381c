# legacy rust symbol mangling, applied before itanium mangling
#
# after itanium demangling names look like:
#   _$LT$std..sys..fd..FileDesc$u20$as$u20$core..ops..Drop$GT$::drop::hc68340e1baa4987a
# which stands for:
#   <std::sys::fd::FileDesc as core::ops::Drop>::drop
#
# - last path component is "h" + 64 bit hash in lowercase hex
# - components not starting with XID_Start character are prefixed with "_"
# - ".." means "::", "." means "-"
# - other characters are escaped with $...$ tokens

from ..common import EscapeTable

HASH_PREFIX = "::h"
HASH_LENGTH = 16
HASH_SUFFIX_LENGTH = len(HASH_PREFIX) + HASH_LENGTH

# genuine hashes use between 5 and 15 of 16 possible digits (99.9998% of them)
# this rejects components like "haaaaaaaaaaaaaaaa" that only look like a hash
# losing a path component of a non-rust name is worse than not demangling a rare rust one
HASH_DIGITS_DISTINCT_MIN = 5
HASH_DIGITS_DISTINCT_MAX = 15

HASH_DIGITS = frozenset("0123456789abcdef")

ESCAPE = "$"

ESCAPE_TABLE = EscapeTable(
    {
        "$C$": ",",
        "$SP$": "@",
        "$BP$": "*",
        "$RF$": "&",
        "$LT$": "<",
        "$GT$": ">",
        "$LP$": "(",
        "$RP$": ")",
        "$u20$": " ",
        "$u22$": '"',
        "$u27$": "'",
        "$u2b$": "+",
        "$u3b$": ";",
        "$u5b$": "[",
        "$u5d$": "]",
        "$u7b$": "{",
        "$u7d$": "}",
        "$u7e$": "~",
    }
)


def is_alphanumeric(character: str) -> bool:
    # str.isalnum() alone accepts non-ascii letters and digits
    return character.isascii() and character.isalnum()
