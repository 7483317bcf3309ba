## argsift — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Mapping

import lark

from .types import OptionKind, OptionSpec
from .errors import SiftSetupError, SiftSpecError


# Declarations look like `integer -c --COUNT`: one kind word, then any number of aliases.
GRAMMAR = r"""start: KIND alias*
alias: ALIAS

KIND: /(string|integer|boolean)(?!\S)/
ALIAS: /\S+/

%import common.WS
%ignore WS
"""

_PARSER = lark.Lark(GRAMMAR, start='start', parser="lalr", lexer="contextual")


def parse_declaration(canonical: str, text: str) -> OptionSpec:
    """Parse a declaration like `"string -p"` into the spec for option `canonical`."""
    if not isinstance(text, str):
        raise SiftSpecError(f"Declaration for option `{canonical}` must be a string, got {type(text).__name__}.",
                            sift_option=canonical)
    try:
        tree = _PARSER.parse(text)
    except lark.exceptions.UnexpectedInput as exc:
        def attr(k): return getattr(exc, k, None)
        token_val = getattr(token, 'value', '') if (token := attr('token')) is not None else ''
        detail = f"unknown kind `{token_val}`" if token_val else "expected one of string, integer, boolean"
        if (column := attr('column')) is not None and column > 0:
            detail += f" at column {column}"
        raise SiftSpecError(f"Invalid declaration `{text}` for option `{canonical}`: {detail}.",
                            sift_option=canonical, column=attr('column'), token=token_val) from None

    kind_token, *alias_nodes = tree.children
    aliases = frozenset(node.children[0].value for node in alias_nodes)
    return OptionSpec(canonical=canonical, kind=OptionKind.from_word(kind_token.value), aliases=aliases)


def parse_table(specs: Mapping[str, OptionSpec | str] | None) -> dict[str, OptionSpec]:
    """Normalize a caller's option table, keyed by canonical name, into `OptionSpec` values."""
    if not specs:
        raise SiftSetupError("Option table is missing or empty; declare at least one option before parsing.")

    table: dict[str, OptionSpec] = {}
    for canonical, decl in specs.items():
        if isinstance(decl, OptionSpec):
            if decl.canonical != canonical:
                raise SiftSpecError(f"Option spec for `{decl.canonical}` registered under `{canonical}`.",
                                    sift_option=canonical)
            table[canonical] = decl
        else:
            table[canonical] = parse_declaration(canonical, decl)
    return table
