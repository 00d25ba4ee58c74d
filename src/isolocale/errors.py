"""
Exceptions raised while resolving locale display names.
"""


class LocaleResolveError(Exception):
    """Base class for every resolution failure"""


class CatalogError(LocaleResolveError):
    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f'{path}: {reason}')


class CatalogOpenError(CatalogError):
    """Catalog file is missing or unreadable"""


class CatalogParseError(CatalogError):
    """Catalog file is not well-formed XML"""


class NullInputError(LocaleResolveError):
    def __init__(self):
        super().__init__('Locale identifier is empty')


class InputShapeError(LocaleResolveError):
    def __init__(self, locale_id: str):
        self.locale_id = locale_id
        super().__init__(f'Expected language_COUNTRY, got {locale_id!r}')


class UnknownCodeError(LocaleResolveError):
    kind = 'code'

    def __init__(self, code: str):
        self.code = code
        super().__init__(f'Unknown {self.kind}: {code!r}')


class UnknownLanguageCode(UnknownCodeError):
    kind = 'language code'


class UnknownCountryCode(UnknownCodeError):
    kind = 'country code'


class TranslationError(LocaleResolveError):
    def __init__(self, domain: str, text: str | None):
        self.domain = domain
        self.text = text
        super().__init__(f'Failed to translate {text!r} in domain {domain}')
