## argsift — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import re
import json
import shlex

from .types import Classification
from .errors import SiftSpecError


_SHELL_NAME_RE = re.compile(r'[A-Za-z_][A-Za-z0-9_]*')
LEFTOVER_NAME = 'ARGS'


def write_without_ansi(write_fn):
    """Wrapper function that strips ANSI codes before calling the original writer."""
    ansi_re = re.compile(r'\033\[[0-9;]*m')
    return lambda text: write_fn(ansi_re.sub('', text))


def variable_name(option: str) -> str:
    # `--dry-run` -> `DRY_RUN`, so the output can be eval'd by a shell.
    name = option.lstrip('-').replace('-', '_').upper()
    if not _SHELL_NAME_RE.fullmatch(name):
        raise SiftSpecError(f"Option `{option}` does not map to a valid shell variable name (got `{name}`).",
                            sift_option=option, token=name)
    return name


def format_assignments(result: Classification) -> str:
    """Render `NAME=value` lines plus an `ARGS=(...)` array, safe to pass to a shell's `eval`."""
    seen: dict[str, str] = {}
    lines = []
    for option, value in result.options.items():
        name = variable_name(option)
        if name == LEFTOVER_NAME:
            raise SiftSpecError(f"Option `{option}` would overwrite the `{LEFTOVER_NAME}` leftover array.",
                                sift_option=option, token=name)
        if name in seen:
            raise SiftSpecError(f"Options `{seen[name]}` and `{option}` both map to shell variable `{name}`.",
                                sift_option=option, token=name)
        seen[name] = option
        lines.append(f"{name}={shlex.quote(value)}")
    lines.append(f'{LEFTOVER_NAME}=(' + ' '.join(shlex.quote(arg) for arg in result.leftover) + ')')
    return '\n'.join(lines)


def format_json(result: Classification) -> str:
    return json.dumps({'options': result.options, 'leftover': result.leftover})


def format_common(help: bool, version: bool, verbose: bool, remainder: list[str]) -> str:
    flags = {'HELP': help, 'VERSION': version, 'VERBOSE': verbose}
    lines = [f"{k}={str(v).lower()}" for k, v in flags.items()]
    lines.append(f'{LEFTOVER_NAME}=(' + ' '.join(shlex.quote(arg) for arg in remainder) + ')')
    return '\n'.join(lines)
