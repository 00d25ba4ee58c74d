import gettext
import locale
import os
from pathlib import Path

DOMAIN = 'isolocale'


def _get_translator():
    # 1. Determine language code: LANGUAGE wins over LANG, like gettext itself
    default_lang = locale.getlocale()[0] or 'en_US'
    env_lang = os.environ.get('LANGUAGE') or os.environ.get('LANG') or default_lang
    lang = env_lang.split(':')[0].split('.')[0]

    # 2. Messages of the CLI itself ship next to the package:
    # isolocale/locales/<lang>/LC_MESSAGES/isolocale.mo
    locale_dir = Path(__file__).parent.resolve() / 'locales'

    # 3. Missing catalogs fall back to the untranslated strings
    translation = gettext.translation(
        domain=DOMAIN, localedir=str(locale_dir), languages=[lang], fallback=True
    )
    return translation.gettext


# Singleton export
_ = _get_translator()
