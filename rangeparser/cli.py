import json
import pathlib
from dataclasses import asdict
from enum import Enum
from typing import Any, Callable, Optional, Type, TypeVar, Union

import click

from . import __version__
from .constants import ErrorCodes, OutputFormats
from .log import LogLevels, configure_logging
from .options import ParseOptions
from .parser import parse_range
from .ranges import RangeSet


_AnyCallable = Callable[..., Any]
FC = TypeVar('FC', bound=Union[_AnyCallable, click.Command])


class EnumType(click.Choice):
    def __init__(self, enum: Enum, case_sensitive=False) -> None:
        self.__enum = enum
        super().__init__(choices=[item.value for item in enum], case_sensitive=case_sensitive)

    def convert(self, value: Any, param: Optional[click.Parameter], ctx: Optional[click.Context]) -> Enum:
        if value is None or isinstance(value, Enum):
            return value

        converted_str = super().convert(value, param, ctx)
        return self.__enum(converted_str)


def _pretty_print_default(value: Optional[bool]) -> Optional[str]:
    if isinstance(value, bool):
        return 'enabled' if value else 'disabled'
    if isinstance(value, Enum):
        return value.value
    return value


def option(*param_decls: str, cls: Optional[Type[click.Option]] = None, **attrs: Any) -> Callable[[FC], FC]:
    attrs['show_envvar'] = True
    if 'default' in attrs:
        attrs['show_default'] = _pretty_print_default(attrs['default'])
    return click.option(*param_decls, cls=cls, **attrs)


def _render(ranges: RangeSet, fmt: OutputFormats) -> str:
    if fmt == OutputFormats.text:
        return '\n'.join(f'{item.start}-{item.end}' for item in ranges)
    return json.dumps({'unit': ranges.unit, 'ranges': [asdict(item) for item in ranges]})


@click.command(
    context_settings={'show_default': True},
    help='SIZE  Resource length.  [required]\n\nHEADER  Range header value.  [required]',
)
@click.argument('size', type=click.IntRange(0), required=True)
@click.argument('header', required=True)
@option(
    '--combine/--no-combine',
    default=ParseOptions.combine,
    help='Merge overlapping and adjacent ranges',
)
@option('--format', 'fmt', type=EnumType(OutputFormats), default=OutputFormats.json, help='Output format')
@option('--log/--no-log', 'log_enabled', default=True, help='Enable logging')
@option('--log-level', type=EnumType(LogLevels), default=LogLevels.info, help='Log level')
@option(
    '--log-config',
    type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True, path_type=pathlib.Path),
    help='Logging configuration file (json)',
)
@click.version_option(version=__version__, message='%(prog)s %(version)s')
def cli(
    size: int,
    header: str,
    combine: bool,
    fmt: OutputFormats,
    log_enabled: bool,
    log_level: LogLevels,
    log_config: Optional[pathlib.Path],
) -> None:
    log_dictconfig = None
    if log_config:
        with log_config.open() as log_config_file:
            try:
                log_dictconfig = json.loads(log_config_file.read())
            except Exception:
                click.echo('Unable to parse provided logging config.', err=True)
                raise click.exceptions.Exit(1)

    configure_logging(log_level, config=log_dictconfig, enabled=log_enabled)

    rv = parse_range(size, header, ParseOptions(combine=combine))
    if isinstance(rv, ErrorCodes):
        click.echo(f'{rv.name} ({rv.value})', err=True)
        raise click.exceptions.Exit(1)

    click.echo(_render(rv, fmt))


def entrypoint():
    cli(auto_envvar_prefix='RANGEPARSER')
