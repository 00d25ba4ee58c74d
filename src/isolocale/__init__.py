import os
import sys
import tomllib
from pathlib import Path

from loguru import logger


def get_version():
    env_version = os.getenv('APP_VERSION')
    if env_version:
        return env_version

    if getattr(sys, 'frozen', False):
        base_path = Path(sys._MEIPASS)
    else:
        base_path = Path(__file__).resolve().parent.parent.parent

    toml_path = base_path / 'pyproject.toml'

    if toml_path.exists():
        try:
            with open(toml_path, 'rb') as f:
                return tomllib.load(f).get('project', {}).get('version', '0.1.0')
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning(f'Failed to read {toml_path}: {e}')

    try:
        from importlib.metadata import version

        return version('isolocale')
    except Exception as e:
        logger.warning(f'Failed to get version: {e}')
        return 'unknown'


__version__ = get_version()

from .catalog import CatalogCache, CodeTables, parse_catalog  # noqa: E402
from .errors import (  # noqa: E402
    CatalogError,
    CatalogOpenError,
    CatalogParseError,
    InputShapeError,
    LocaleResolveError,
    NullInputError,
    TranslationError,
    UnknownCountryCode,
    UnknownLanguageCode,
)
from .resolver import (  # noqa: E402
    LocaleResolver,
    configure,
    get_default_resolver,
    resolve_locale_display_name,
)

__all__ = [
    '__version__',
    'CatalogCache',
    'CatalogError',
    'CatalogOpenError',
    'CatalogParseError',
    'CodeTables',
    'InputShapeError',
    'LocaleResolveError',
    'LocaleResolver',
    'NullInputError',
    'TranslationError',
    'UnknownCountryCode',
    'UnknownLanguageCode',
    'configure',
    'get_default_resolver',
    'parse_catalog',
    'resolve_locale_display_name',
]
