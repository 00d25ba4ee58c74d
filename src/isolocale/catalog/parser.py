import os
from dataclasses import dataclass
from typing import TypeAlias
from xml.etree import ElementTree

from loguru import logger

from ..errors import CatalogOpenError, CatalogParseError

CodeTable: TypeAlias = dict[str, str]


@dataclass(frozen=True, slots=True)
class CatalogSpec:
    """Where a catalog lives and which element/attributes carry its entries"""

    file_name: str
    entry_element: str
    code_attribute: str
    name_attribute: str


ISO_639 = CatalogSpec('iso_639.xml', 'iso_639_entry', 'iso_639_1_code', 'name')
ISO_3166 = CatalogSpec('iso_3166.xml', 'iso_3166_entry', 'alpha_2_code', 'name')


def parse_catalog(
    file_path: str | os.PathLike,
    entry_element: str,
    code_attribute: str,
    name_attribute: str,
) -> CodeTable:
    """
    Stream an iso-codes XML catalog and collect its code -> name pairs.

    Only elements named ``entry_element`` carrying both attributes contribute
    an entry; anything else is skipped. An empty but well-formed catalog gives
    an empty table.

    :raises CatalogOpenError: the file cannot be opened or read
    :raises CatalogParseError: the document is not well-formed
    """
    table: CodeTable = {}
    skipped = 0

    try:
        f = open(file_path, 'rb')
    except OSError as e:
        raise CatalogOpenError(file_path, e.strerror or str(e)) from e

    with f:
        try:
            for event, elem in ElementTree.iterparse(f, events=('start', 'end')):
                if elem.tag != entry_element:
                    continue
                if event == 'end':
                    # Entries are leaves; drop them once read to keep memory flat
                    elem.clear()
                    continue

                code = elem.get(code_attribute)
                name = elem.get(name_attribute)
                if code is None or name is None:
                    skipped += 1
                    continue
                table[code] = name
        except ElementTree.ParseError as e:
            raise CatalogParseError(file_path, str(e)) from e
        except OSError as e:
            raise CatalogOpenError(file_path, e.strerror or str(e)) from e

    logger.opt(lazy=True).debug(
        '{log}',
        log=lambda: (
            f'Parsed {len(table)} <{entry_element}> entries from {file_path} '
            f'(skipped {skipped} without {code_attribute}/{name_attribute})'
        ),
    )
    return table
