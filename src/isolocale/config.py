"""
Global project configuration file.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, get_args

from platformdirs import user_log_path

LogLevel = Literal['TRACE', 'DEBUG', 'INFO', 'SUCCESS', 'WARNING', 'ERROR', 'CRITICAL']
LOG_LEVELS: tuple[str, ...] = get_args(LogLevel)

ISO_CODES_SUBDIR = Path('share') / 'xml' / 'iso-codes'


def default_iso_codes_dir() -> Path:
    return Path(os.environ.get('ISO_CODES_PREFIX', '/usr')) / ISO_CODES_SUBDIR


def _as_path(value: str | Path) -> Path:
    if isinstance(value, str) and value.startswith('~'):
        return Path(value).expanduser()
    return Path(value)


@dataclass
class Config:
    # --- Catalogs ---
    iso_codes_dir: Path = field(default_factory=default_iso_codes_dir)  # Holds iso_639.xml and iso_3166.xml
    locale_dir: Path | None = None  # Where iso_639_3/iso_3166 .mo files live; None: gettext default
    strict: bool = False  # Unknown codes are errors instead of passing through

    # --- Logger ---
    logger_name: str = 'isolocale'
    log_dir: Path = user_log_path(appname='isolocale', appauthor=False)  # Log directory
    log_file: str = 'isolocale.log'  # Log file name
    log_level_file: LogLevel = 'WARNING'  # File output log level
    log_level_console: LogLevel = 'INFO'  # Console (stderr) log level

    def __post_init__(self):
        self.iso_codes_dir = _as_path(self.iso_codes_dir)
        self.log_dir = _as_path(self.log_dir)
        if self.locale_dir is not None:
            self.locale_dir = _as_path(self.locale_dir)
