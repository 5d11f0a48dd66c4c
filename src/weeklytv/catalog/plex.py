from __future__ import annotations

"""Catalog reader for a Plex Media Server library database.

The library file is opened read-only in SQLite's ``immutable`` mode so a
running media server is never locked or written to. Only items with a known
duration are returned; trailers and other extras are skipped.
"""

import logging
import sqlite3
from pathlib import Path
from urllib.parse import quote

from weeklytv.api.models import CatalogItem


logger = logging.getLogger(__name__)

EXTRA_METADATA_TYPE = 12

LIBRARY_QUERY = """
select vid.title, vid.duration, series.title
from metadata_items as vid
left join metadata_items as season on season.id = vid.parent_id
left join metadata_items as series on series.id = season.parent_id
where vid.duration is not null and vid.metadata_type != ?
order by vid.id
"""


class CatalogReadError(RuntimeError):
    """Raised when the library database cannot be opened or queried."""


def library_uri(path: str | Path) -> str:
    return f"file:{quote(Path(path).as_posix())}?mode=ro&immutable=1"


def read_catalog(path: str | Path, *, debug: bool = False) -> list[CatalogItem]:
    """Return every schedulable item in the library at ``path``."""

    uri = library_uri(path)
    logger.info("Opening library database %s", uri)

    try:
        connection = sqlite3.connect(uri, uri=True)
    except sqlite3.Error as exc:
        raise CatalogReadError(f"Could not open library database {path}: {exc}") from exc

    try:
        rows = connection.execute(LIBRARY_QUERY, (EXTRA_METADATA_TYPE,)).fetchall()
    except sqlite3.Error as exc:
        raise CatalogReadError(f"Could not query library database {path}: {exc}") from exc
    finally:
        connection.close()

    items: list[CatalogItem] = []
    for title, duration_ms, series_title in rows:
        if not title:
            logger.warning("Skipping library item without a title")
            continue
        if duration_ms < 0:
            logger.warning("Skipping '%s' with negative duration %s", title, duration_ms)
            continue
        item = CatalogItem(
            title=title,
            duration_seconds=int(duration_ms) // 1000,
            group_title=series_title or None,
        )
        if debug:
            logger.debug("Library item: %s (%ss)", item.title, item.duration_seconds)
        items.append(item)

    logger.info("Read %s catalog items from %s", len(items), path)
    return items
