from .cache import CatalogCache, CatalogParser, CodeTables
from .parser import ISO_639, ISO_3166, CatalogSpec, CodeTable, parse_catalog

__all__ = [
    'ISO_639',
    'ISO_3166',
    'CatalogCache',
    'CatalogParser',
    'CatalogSpec',
    'CodeTable',
    'CodeTables',
    'parse_catalog',
]
