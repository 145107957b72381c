from collections.abc import Mapping
from dataclasses import dataclass
from functools import cached_property

from more_itertools import all_unique


@dataclass(frozen=True)
class EscapeTable:
    # bidirectional token <-> character table
    # every token decodes to exactly one character, so decoding never expands the input
    tokens: Mapping[str, str]  # {token: character}

    def __post_init__(self) -> None:
        # must not be empty
        assert self.tokens

        # tokens must not be empty, each decodes to a single character
        assert all(len(token) >= 1 and len(character) == 1 for token, character in self.tokens.items())

        # must be reversible
        assert all_unique(self.tokens.values())

    @cached_property
    def characters(self) -> Mapping[str, str]:  # {character: token}
        return {character: token for token, character in self.tokens.items()}

    @cached_property
    def _tokens_by_length(self) -> tuple[tuple[int, Mapping[str, str]], ...]:
        lengths = sorted({len(token) for token in self.tokens}, reverse=True)
        return tuple(
            (length, {token: character for token, character in self.tokens.items() if len(token) == length})
            for length in lengths
        )

    def decode_at(self, text: str, index: int) -> tuple[str, int] | None:
        # (character, token length) if a token starts at text[index]
        for length, tokens in self._tokens_by_length:
            character = tokens.get(text[index : index + length])
            if character is not None:
                return character, length

        return None

    def encode(self, character: str) -> str | None:
        return self.characters.get(character)
