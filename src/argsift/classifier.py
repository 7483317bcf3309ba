## argsift — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# argsift — Sort command-line tokens into typed options, common flags and leftovers.
#

from typing import Mapping, Sequence

from .types import OptionKind, OptionSpec, Classification, CommonFlags
from .errors import SiftLeftoverError
from .parser import parse_table
from .diagnostics import NullSink


COMMON_OPTIONS = {
    '--help': 'boolean -h',
    '--version': 'boolean -V',
    '--verbose': 'boolean -v',
}


def _step(token: str, following: str | None, table: dict[str, OptionSpec], sink) -> tuple[dict[str, str], int]:
    """Match one token against every spec, returning the assignments made and the cursor advance."""
    assigned: dict[str, str] = {}
    advance = 1
    # No early exit: when aliases overlap, the last matching spec decides the value,
    # while a value consumed by any of them is never read again.
    for spec in table.values():
        if not spec.matches(token):
            continue
        value, consumed = spec.kind.look_ahead(spec.canonical, token, following)
        sink.debug(f"`{token}` matched {spec.kind.value} option `{spec.canonical}` = {value!r} (consumes {consumed})")
        advance = max(advance, consumed)
        assigned[spec.canonical] = value
    return assigned, advance


def classify(tokens: Sequence[str], specs: Mapping[str, OptionSpec | str] | None, *,
             leftover: list[str] | None = None, sink=None) -> Classification:
    """Resolve the options declared in `specs` from `tokens`, collecting unmatched tokens in order.

    Booleans take an explicit `true`/`false` from the next token when present, otherwise they
    are `"true"` and the next token is left alone.  String and integer options consume the next
    token as their value.  Booleans never seen default to `"false"`, while string and integer
    options never seen are absent from the result.
    """
    sink = sink or NullSink()
    table = parse_table(specs)
    leftover = [] if leftover is None else leftover
    sink.debug(f"classifying {len(tokens)} token(s) against {len(table)} option(s): {', '.join(table)}")

    resolved: dict[str, str] = {}
    tokens = list(tokens)
    cursor = 0
    while cursor < len(tokens):
        token = tokens[cursor]
        following = tokens[cursor+1] if cursor + 1 < len(tokens) else None
        assigned, advance = _step(token, following, table, sink)
        if assigned:
            resolved.update(assigned)
        else:
            sink.debug(f"`{token}` is not a known option, kept as leftover #{len(leftover)}")
            leftover.append(token)
        cursor += advance

    options: dict[str, str] = {}
    for name, spec in table.items():
        if name in resolved:
            options[name] = resolved[name]
        elif spec.kind is OptionKind.BOOLEAN:
            sink.debug(f"boolean option `{name}` not given, defaulting to 'false'")
            options[name] = 'false'
    return Classification(options=options, leftover=leftover)


def fail_on_leftovers(leftover: Sequence[str], start: int = 0) -> None:
    """Raise when any leftover argument remains at or beyond index `start`."""
    extra = list(leftover[start:])
    if extra:
        raise SiftLeftoverError(f"Unexpected argument(s): {', '.join(extra)}", leftover=extra)


def split_common(tokens: Sequence[str], *, sink=None) -> tuple[CommonFlags, list[str]]:
    result = classify(tokens, COMMON_OPTIONS, sink=sink)
    flags = CommonFlags(**{name.lstrip('-'): result[name] == 'true' for name in COMMON_OPTIONS})
    return flags, result.leftover
