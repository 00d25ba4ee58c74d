import os
import threading
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

from loguru import logger

from ..errors import CatalogError
from .parser import ISO_639, ISO_3166, CatalogSpec, CodeTable, parse_catalog

CatalogParser = Callable[[str | os.PathLike, str, str, str], CodeTable]


@dataclass(frozen=True, slots=True)
class CodeTables:
    """Built state of the cache: both tables, read-only"""

    languages: Mapping[str, str]
    countries: Mapping[str, str]


class CatalogCache:
    """Lazily built, process-lifetime language and country tables

    The tables are published as a single immutable reference, so readers
    never need the lock. A failed build publishes nothing and the next call
    starts over.
    """

    def __init__(
        self,
        iso_codes_dir: str | os.PathLike,
        *,
        parser: CatalogParser = parse_catalog,
        language_spec: CatalogSpec = ISO_639,
        country_spec: CatalogSpec = ISO_3166,
    ):
        self.iso_codes_dir = Path(iso_codes_dir)
        self.language_spec = language_spec
        self.country_spec = country_spec
        self._parser = parser
        self._lock = threading.Lock()
        self._tables: CodeTables | None = None

    @property
    def tables(self) -> CodeTables | None:
        return self._tables

    @property
    def is_loaded(self) -> bool:
        return self._tables is not None

    def ensure_loaded(self) -> bool:
        """Build the tables if needed; False when a catalog could not be parsed"""
        if self._tables is not None:
            return True
        try:
            self.load()
        except CatalogError as e:
            logger.warning(f'Failed to load iso-codes catalogs: {e}')
            return False
        return True

    def load(self) -> CodeTables:
        """Same as ensure_loaded, but raise the CatalogError instead of returning False"""
        tables = self._tables
        if tables is not None:
            return tables

        with self._lock:
            # Another thread may have finished the build while we waited
            if self._tables is None:
                self._tables = self._build()
            return self._tables

    def reset(self):
        with self._lock:
            self._tables = None

    def _parse(self, spec: CatalogSpec) -> CodeTable:
        return self._parser(
            self.iso_codes_dir / spec.file_name,
            spec.entry_element,
            spec.code_attribute,
            spec.name_attribute,
        )

    def _build(self) -> CodeTables:
        logger.debug(f'Loading iso-codes catalogs from {self.iso_codes_dir}')
        # Both parses must succeed before anything is published
        languages = self._parse(self.language_spec)
        countries = self._parse(self.country_spec)

        logger.info(f'Loaded {len(languages)} languages and {len(countries)} countries')
        return CodeTables(
            languages=MappingProxyType(languages),
            countries=MappingProxyType(countries),
        )
