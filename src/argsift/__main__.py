## argsift — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import sys
from dataclasses import dataclass

import click

from .types import Classification
from .errors import SiftError, SiftSetupError, SiftSpecError, SiftLeftoverError
from .classifier import classify, fail_on_leftovers, split_common
from .diagnostics import NullSink, sink_from_env
from .formatting import write_without_ansi, format_assignments, format_json, format_common


@dataclass(frozen=True)
class SiftConfig:
    verbose: bool
    log_file: str | None
    plain: bool


class SiftRunner:
    def __init__(self, config: SiftConfig):
        self.config = config
        self.write_err = write_without_ansi(sys.stderr.write) if config.plain else sys.stderr.write
        self.sink = NullSink()
        try:
            self.sink = sink_from_env(verbose=config.verbose, log_file=config.log_file, plain=config.plain)
        except SiftError as exc:
            self._fatal_error(exc)

    def _fatal_error(self, exc: SiftError) -> None:
        if isinstance(exc, SiftSpecError): banner = "SPEC ERROR."
        elif isinstance(exc, SiftSetupError): banner = "SETUP ERROR."
        elif isinstance(exc, SiftLeftoverError): banner = "UNEXPECTED ARGUMENTS."
        else: banner = "USAGE ERROR."
        self.write_err(f'\033[30;43m {banner} \033[0m {exc} (Exception: \033[33m{type(exc).__name__}\033[0m)\n')
        self.sink.debug(f"exiting with status {exc.exit_code}")
        self.finalize()
        sys.exit(exc.exit_code)

    def classify(self, tokens: list[str], spec_options: tuple[str, ...], strict: int | None) -> Classification:
        try:
            result = classify(tokens, _parse_spec_options(spec_options), sink=self.sink)
            if strict is not None:
                fail_on_leftovers(result.leftover, start=strict)
        except SiftError as exc:
            self._fatal_error(exc)
        return result

    def render(self, result: Classification, as_json: bool) -> str:
        try:
            return format_json(result) if as_json else format_assignments(result)
        except SiftError as exc:
            self._fatal_error(exc)

    def common(self, tokens: list[str]):
        try:
            return split_common(tokens, sink=self.sink)
        except SiftError as exc:
            self._fatal_error(exc)

    def finalize(self) -> int:
        self.sink.close()
        return 0


def _parse_spec_options(values: tuple[str, ...]) -> dict[str, str]:
    specs: dict[str, str] = {}
    for value in values:
        name, sep, decl = value.partition('=')
        if not sep or not name:
            raise SiftSpecError(f"Expected `NAME=DECLARATION` for --spec, got `{value}`.", token=value)
        specs[name] = decl
    return specs


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Log every classification step as a diagnostic.')
@click.option('--log-file', type=click.Path(dir_okay=False), default=None, help='Send diagnostics to this file instead of stderr.')
@click.option('--plain', '-p', is_flag=True, help='Strip ANSI color codes from messages.')
@click.pass_context
def cli(ctx: click.Context, verbose: bool, log_file: str | None, plain: bool) -> None:
    ctx.ensure_object(dict)
    ctx.obj['config'] = SiftConfig(verbose=verbose, log_file=log_file, plain=plain)


@cli.command('classify', context_settings={'ignore_unknown_options': True})
@click.option('--spec', '-s', 'specs', multiple=True, metavar='NAME=DECL', help='Declare an option, e.g. `--count=integer -c`.')
@click.option('--json', 'as_json', is_flag=True, help='Print the result as JSON instead of shell assignments.')
@click.option('--strict', type=click.IntRange(min=0), default=None, metavar='N', help='Fail if leftovers exist at or beyond index N.')
@click.argument('tokens', nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def classify_command(ctx: click.Context, specs: tuple[str, ...], as_json: bool, strict: int | None, tokens: tuple[str, ...]) -> None:
    runner = SiftRunner(ctx.obj['config'])
    result = runner.classify(list(tokens), specs, strict)
    click.echo(runner.render(result, as_json))
    ctx.exit(runner.finalize())


@cli.command('common', context_settings={'ignore_unknown_options': True})
@click.argument('tokens', nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def common_command(ctx: click.Context, tokens: tuple[str, ...]) -> None:
    runner = SiftRunner(ctx.obj['config'])
    flags, remainder = runner.common(list(tokens))
    click.echo(format_common(flags.help, flags.version, flags.verbose, remainder))
    ctx.exit(runner.finalize())


def main(argv: list[str] | None = None) -> None:
    cli.main(args=argv, prog_name='argsift')


if __name__ == "__main__":
    main()
