from typing import Self

from pydantic import BaseModel


class Config(BaseModel):
    # options passed to the general (itanium) demangler

    # True - demangle function/object names only (_Z...), False - also bare type encodings
    external_only: bool = True

    # True - keep parameter list, False - name only
    params: bool = True

    @classmethod
    def default(cls) -> Self:
        return cls()
