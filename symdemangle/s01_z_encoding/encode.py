from .model import DELIMITER, ESCAPE_TABLE, PREFIX, ZSpec


def encode(spec: ZSpec, *, fnname_encoded: bool = True) -> str:
    # inverse of parse()
    # plain (not encoded) fnname is copied as-is, it extends to the end of symbol so needs no delimiter
    soname = _escape(spec.soname)
    fnname = _escape(spec.fnname) if fnname_encoded else spec.fnname

    return (
        f"{PREFIX}"
        f"{'w' if spec.is_wrap else 'r'}"
        f"{spec.eclass_tag:04d}"
        f"{spec.eclass_priority:01d}"
        "Z"
        f"{'Z' if fnname_encoded else 'U'}"
        f"{DELIMITER}{soname}{DELIMITER}{fnname}"
    )


def _escape(text: str) -> str:
    # underscore is always escaped, so encoded soname can't collide with the reserved prefix
    return "".join(ESCAPE_TABLE.encode(character) or character for character in text)
