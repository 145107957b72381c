from typing import Literal, Self

from pydantic import BaseModel, Field

from .s02_general.config import Config as General


class Config(BaseModel):
    # main configuration file, supplied by user

    # used to distinguish config versions if more then one is available
    symdemangle_version: Literal[1]

    # False - never show demangled general/rust names, regardless of what caller requests
    demangle: bool = True

    # see General for details
    general: General = Field(default_factory=General.default)

    @classmethod
    def default(cls) -> Self:
        return cls(
            symdemangle_version=1,
        )
