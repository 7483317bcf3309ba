## argsift — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import re
from enum import Enum
from dataclasses import dataclass, field

from .errors import SiftMissingValue, SiftIntegerError


_INTEGER_RE = re.compile(r'[0-9]+')
BOOLEAN_WORDS = ('true', 'false')


def looks_like_option(token: str) -> bool:
    return token.startswith('-')


class OptionKind(Enum):
    STRING = 'string'
    INTEGER = 'integer'
    BOOLEAN = 'boolean'

    @classmethod
    def from_word(cls, word: str) -> "OptionKind":
        return cls(word)

    def coerce(self, option: str, alias: str, value: str | None) -> str:
        """Validate the token following `alias` and return it as the option's value.

        Only valid for kinds that require a value; booleans decide via look-ahead instead.
        """
        assert self is not OptionKind.BOOLEAN, "Boolean options never require a value."
        if value is None or looks_like_option(value):
            raise SiftMissingValue(f"Missing value for {self.value} option `{option}` (given as `{alias}`).",
                                   sift_option=option, sift_alias=alias, sift_token=value)
        if self is OptionKind.INTEGER and not _INTEGER_RE.fullmatch(value):
            raise SiftIntegerError(f"Value `{value}` for option `{option}` (given as `{alias}`) is not an integer.",
                                   sift_option=option, sift_alias=alias, sift_token=value)
        return value

    def look_ahead(self, option: str, alias: str, following: str | None) -> tuple[str, int]:
        """Return the resolved value and how many tokens were consumed, counting the option itself."""
        if self is OptionKind.BOOLEAN:
            if following in BOOLEAN_WORDS:
                return following, 2
            return 'true', 1
        return self.coerce(option, alias, following), 2


@dataclass(frozen=True)
class OptionSpec:
    canonical: str
    kind: OptionKind
    aliases: frozenset[str] = field(default_factory=frozenset)

    def matches(self, token: str) -> bool:
        return token == self.canonical or token in self.aliases

    def __str__(self):
        return ' '.join([self.kind.value, *sorted(self.aliases)])


@dataclass
class Classification:
    options: dict[str, str]
    leftover: list[str]

    def __getitem__(self, name: str) -> str:
        return self.options[name]

    def get(self, name: str, default=None):
        return self.options.get(name, default)


@dataclass(frozen=True)
class CommonFlags:
    help: bool = False
    version: bool = False
    verbose: bool = False
