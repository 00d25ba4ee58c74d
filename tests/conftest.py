import gettext

import pytest
from loguru import logger

ISO_639_XML = """<?xml version="1.0" encoding="UTF-8"?>
<iso_639_entries>
  <iso_639_entry iso_639_2B_code="eng" iso_639_2T_code="eng" iso_639_1_code="en" name="English" />
  <iso_639_entry iso_639_2B_code="ger" iso_639_2T_code="deu" iso_639_1_code="de" name="German" />
  <iso_639_entry iso_639_2B_code="fre" iso_639_2T_code="fra" iso_639_1_code="fr" name="French" />
  <iso_639_entry iso_639_2B_code="ace" iso_639_2T_code="ace" name="Achinese" />
</iso_639_entries>
"""

ISO_3166_XML = """<?xml version="1.0" encoding="UTF-8"?>
<iso_3166_entries>
  <iso_3166_entry alpha_2_code="US" alpha_3_code="USA" numeric_code="840" name="United States" />
  <iso_3166_entry alpha_2_code="DE" alpha_3_code="DEU" numeric_code="276" name="Germany" />
  <iso_3166_entry alpha_2_code="CA" alpha_3_code="CAN" numeric_code="124" name="Canada" />
</iso_3166_entries>
"""


@pytest.fixture
def propagate_logs(caplog):
    # Route loguru records into the standard logging capture
    handler_id = logger.add(caplog.handler, format='{message}')
    yield caplog
    logger.remove(handler_id)


@pytest.fixture(autouse=True)
def isolated_textdomains(monkeypatch):
    # bindtextdomain writes to this module-level dict; give each test its own copy
    monkeypatch.setattr(gettext, '_localedirs', dict(gettext._localedirs))


@pytest.fixture
def iso_codes_dir(tmp_path):
    """A directory laid out like share/xml/iso-codes with small catalogs"""
    (tmp_path / 'iso_639.xml').write_text(ISO_639_XML, encoding='utf-8')
    (tmp_path / 'iso_3166.xml').write_text(ISO_3166_XML, encoding='utf-8')
    return tmp_path


@pytest.fixture
def identity_translate():
    calls = []

    def translate(domain, text):
        calls.append((domain, text))
        return text

    translate.calls = calls
    return translate
