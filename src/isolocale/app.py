import json
from dataclasses import fields, replace
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger
from platformdirs import user_config_path, user_log_path

from . import __version__
from .config import LOG_LEVELS, Config, default_iso_codes_dir
from .errors import LocaleResolveError
from .i18n import _
from .resolver import configure
from .utils import init_logger

app = typer.Typer(help=_('Resolve language_COUNTRY identifiers to display names'), add_completion=True)

# typer renders Enum members as a choice list
LogLevelChoice = Enum('LogLevelChoice', {level: level for level in LOG_LEVELS}, type=str)


def version_callback(value: bool):
    if value:
        typer.echo(f'isolocale version: {__version__}')
        raise typer.Exit()


def load_config_file(path: Path) -> dict:
    """Read the JSON config file, keeping only keys that are Config fields"""
    if not path.exists():
        return {}

    try:
        with open(path, 'r', encoding='utf-8') as f:
            json_dict = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning(f'Ignoring malformed config file {path}: {e}')
        return {}
    except OSError as e:
        logger.warning(f'Ignoring unreadable config file {path}: {e}')
        return {}

    if not isinstance(json_dict, dict):
        logger.warning(f'Ignoring config file {path}: expected a JSON object')
        return {}

    valid_fields = {f.name for f in fields(Config)}
    return {k: v for k, v in json_dict.items() if k in valid_fields}


def explicit_options(ctx: typer.Context, cli_args: dict) -> dict:
    """Config fields whose value was given on the command line rather than defaulted"""
    overrides = {}
    for k in (f.name for f in fields(Config)):
        if k not in cli_args:
            continue
        # Compare by name: typer may hand back its own copy of click's ParameterSource
        source = ctx.get_parameter_source(k)
        if source is None or source.name == 'DEFAULT':
            continue
        value = cli_args[k]
        overrides[k] = value.value if isinstance(value, Enum) else value
    return overrides


@app.command()
def main(
    ctx: typer.Context,
    locales: Annotated[
        list[str], typer.Argument(help=_('Locale identifiers such as en_US or de_DE'))
    ],
    config: Annotated[
        Path, typer.Option(help=_('Path to the configuration file'))
    ] = user_config_path(appname='isolocale', appauthor=False) / 'config.json',
    iso_codes_dir: Annotated[
        Path | None, typer.Option(help=_('Directory holding iso_639.xml and iso_3166.xml'))
    ] = default_iso_codes_dir(),
    locale_dir: Annotated[
        Path | None, typer.Option(help=_('Directory holding the iso-codes translations'))
    ] = None,
    strict: Annotated[
        bool, typer.Option('--strict/--no-strict', help=_('Fail on unknown language or country codes'))
    ] = False,
    logger_name: Annotated[str | None, typer.Option(help=_('Logger name'))] = 'isolocale',
    log_dir: Annotated[str | None, typer.Option(help=_('Log directory location'))] = str(
        user_log_path(appname='isolocale', appauthor=False)
    ),
    log_file: Annotated[str | None, typer.Option(help=_('Log file name'))] = 'isolocale.log',
    log_level_file: Annotated[
        LogLevelChoice | None, typer.Option(help=_('File log level'))
    ] = LogLevelChoice.WARNING,
    log_level_console: Annotated[
        LogLevelChoice | None, typer.Option(help=_('Console log level'))
    ] = LogLevelChoice.INFO,
    version: Annotated[
        bool | None,
        typer.Option(
            '--version',
            '-v',
            help=_('Show the version and exit.'),
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
):
    """
    Print the localized display name of each locale identifier, one per line.
    The priority is CLI > config_file > default
    """

    # 1. Instantiate base configuration from the JSON file
    cfg = Config(**load_config_file(config))

    # 2. Only options given explicitly on the command line override the file
    cfg = replace(cfg, **explicit_options(ctx, locals()))

    # 3. Resolve
    init_logger(cfg)
    resolver = configure(cfg)

    failed = 0
    for locale_id in locales:
        try:
            typer.echo(f'{locale_id}\t{resolver.resolve(locale_id)}')
        except LocaleResolveError as e:
            failed += 1
            typer.echo(f'{locale_id}: {e}', err=True)

    if failed:
        logger.debug(f'{failed} of {len(locales)} identifiers could not be resolved')
        raise typer.Exit(code=1)
