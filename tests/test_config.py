from pathlib import Path

from isolocale.config import Config, default_iso_codes_dir


class TestConfig:
    def test_string_paths_are_coerced(self, tmp_path):
        cfg = Config(iso_codes_dir=str(tmp_path), log_dir=str(tmp_path / 'logs'), locale_dir=str(tmp_path))
        assert cfg.iso_codes_dir == tmp_path
        assert cfg.log_dir == tmp_path / 'logs'
        assert cfg.locale_dir == tmp_path

    def test_home_is_expanded(self):
        cfg = Config(log_dir='~/isolocale-logs')
        assert cfg.log_dir == Path.home() / 'isolocale-logs'

    def test_locale_dir_defaults_to_gettext(self):
        assert Config().locale_dir is None

    def test_iso_codes_prefix(self, monkeypatch, tmp_path):
        monkeypatch.setenv('ISO_CODES_PREFIX', str(tmp_path))
        assert default_iso_codes_dir() == tmp_path / 'share' / 'xml' / 'iso-codes'

    def test_iso_codes_prefix_default(self, monkeypatch):
        monkeypatch.delenv('ISO_CODES_PREFIX', raising=False)
        assert default_iso_codes_dir() == Path('/usr/share/xml/iso-codes')

    def test_iso_codes_dir_follows_prefix_at_construction(self, monkeypatch, tmp_path):
        monkeypatch.setenv('ISO_CODES_PREFIX', str(tmp_path))
        assert Config().iso_codes_dir == tmp_path / 'share' / 'xml' / 'iso-codes'
        monkeypatch.setenv('ISO_CODES_PREFIX', str(tmp_path / 'other'))
        assert Config().iso_codes_dir == tmp_path / 'other' / 'share' / 'xml' / 'iso-codes'
