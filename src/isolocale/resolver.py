"""
Locale resolver

Turns ``language_COUNTRY`` identifiers into display strings such as
``Deutsch (Deutschland)``, translated into the identifier's own language.
"""

import gettext
import threading
from collections.abc import Callable

from loguru import logger

from . import config
from .catalog import CatalogCache
from .environment import RESOLVE_LOCK, language_override
from .errors import (
    InputShapeError,
    LocaleResolveError,
    NullInputError,
    TranslationError,
    UnknownCountryCode,
    UnknownLanguageCode,
)

LANGUAGE_DOMAIN = 'iso_639_3'
COUNTRY_DOMAIN = 'iso_3166'

Translator = Callable[[str, str | None], str | None]


def split_locale_id(locale_id: str | None) -> tuple[str, str]:
    """Split ``language_COUNTRY`` into its two parts, rejecting any other shape"""
    if not locale_id:
        raise NullInputError()

    parts = locale_id.split('_')
    if len(parts) != 2 or not all(parts):
        raise InputShapeError(locale_id)
    return parts[0], parts[1]


class LocaleResolver:
    def __init__(
        self,
        cache: CatalogCache,
        *,
        translate: Translator = gettext.dgettext,
        strict: bool = False,
    ):
        self.cache = cache
        self.translate = translate
        self.strict = strict

    def resolve(self, locale_id: str | None) -> str:
        """
        Resolve ``locale_id`` to ``'<language> (<country>)'``.

        Unknown codes pass through to the translator as None unless the
        resolver is strict.

        :raises LocaleResolveError: one of its subclasses, describing why
        """
        language_code, country_code = split_locale_id(locale_id)

        with RESOLVE_LOCK:
            tables = self.cache.load()

            language_name = tables.languages.get(language_code)
            country_name = tables.countries.get(country_code)
            if self.strict:
                if language_name is None:
                    raise UnknownLanguageCode(language_code)
                if country_name is None:
                    raise UnknownCountryCode(country_code)

            with language_override(language_code):
                language = self._translate(LANGUAGE_DOMAIN, language_name)
                country = self._translate(COUNTRY_DOMAIN, country_name)

        return f'{language} ({country})'

    def display_name(self, locale_id: str | None) -> str | None:
        """Like resolve, but any failure is reported as None"""
        try:
            return self.resolve(locale_id)
        except LocaleResolveError as e:
            logger.debug(f'Cannot resolve {locale_id!r}: {e}')
            return None

    def _translate(self, domain: str, text: str | None) -> str | None:
        try:
            return self.translate(domain, text)
        except Exception as e:
            raise TranslationError(domain, text) from e


def bind_locale_dir(locale_dir) -> None:
    """Point both iso-codes message domains at ``locale_dir``"""
    for domain in (LANGUAGE_DOMAIN, COUNTRY_DOMAIN):
        gettext.bindtextdomain(domain, str(locale_dir))
    logger.debug(f'Bound {LANGUAGE_DOMAIN}/{COUNTRY_DOMAIN} to {locale_dir}')


_default_resolver: LocaleResolver | None = None
_default_lock = threading.Lock()


def configure(cfg: config.Config) -> LocaleResolver:
    """Replace the process-wide resolver with one built from ``cfg``"""
    global _default_resolver

    if cfg.locale_dir is not None:
        bind_locale_dir(cfg.locale_dir)

    resolver = LocaleResolver(CatalogCache(cfg.iso_codes_dir), strict=cfg.strict)
    with _default_lock:
        _default_resolver = resolver
    return resolver


def get_default_resolver() -> LocaleResolver:
    global _default_resolver

    with _default_lock:
        if _default_resolver is None:
            _default_resolver = LocaleResolver(CatalogCache(config.default_iso_codes_dir()))
        return _default_resolver


def resolve_locale_display_name(locale_id: str | None) -> str | None:
    """
    Format a UI string from a ``language_COUNTRY`` identifier, like en_US.

    Returns None for malformed identifiers or when the catalogs are unavailable.
    """
    return get_default_resolver().display_name(locale_id)
