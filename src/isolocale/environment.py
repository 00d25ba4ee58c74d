"""
Scoped override of the process translation language.

gettext picks its catalog from the LANGUAGE variable at lookup time, so the
only way to translate into an arbitrary language is to change process-wide
state for the duration of the lookup. Everything that does so must go
through ``language_override``, which serializes callers on RESOLVE_LOCK and
restores the previous state on every exit path.
"""

import locale
import os
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from loguru import logger

LANGUAGE_VAR = 'LANGUAGE'

# Re-entrant so a nested override on the same thread unwinds in LIFO order
RESOLVE_LOCK = threading.RLock()


@dataclass(frozen=True, slots=True)
class EnvironmentSnapshot:
    language: str | None  # None: variable was not set
    locale: str


def snapshot_environment() -> EnvironmentSnapshot:
    return EnvironmentSnapshot(
        language=os.environ.get(LANGUAGE_VAR),
        locale=locale.setlocale(locale.LC_ALL),
    )


def _restore(snapshot: EnvironmentSnapshot):
    if snapshot.language is None:
        os.environ.pop(LANGUAGE_VAR, None)
    else:
        os.environ[LANGUAGE_VAR] = snapshot.language

    try:
        locale.setlocale(locale.LC_ALL, snapshot.locale)
    except locale.Error as e:
        logger.error(f'Failed to restore locale {snapshot.locale!r}: {e}')


@contextmanager
def language_override(language: str) -> Iterator[EnvironmentSnapshot]:
    """
    Make ``language`` the active translation language inside the block.

    Yields the snapshot that will be restored on exit.
    """
    with RESOLVE_LOCK:
        snapshot = snapshot_environment()
        try:
            os.environ[LANGUAGE_VAR] = language
            try:
                # Re-synthesize the locale from the (modified) environment
                locale.setlocale(locale.LC_ALL, '')
            except locale.Error as e:
                logger.warning(f'Environment locale is not available, keeping current one: {e}')

            logger.opt(lazy=True).trace(
                '{log}',
                log=lambda: f'{LANGUAGE_VAR} overridden: {snapshot.language!r} -> {language!r}',
            )
            yield snapshot
        finally:
            _restore(snapshot)
            logger.opt(lazy=True).trace(
                '{log}', log=lambda: f'{LANGUAGE_VAR} restored to {snapshot.language!r}'
            )
