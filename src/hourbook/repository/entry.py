# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Any, Optional, cast

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from hourbook import configuration, time
from hourbook.model.entry import Entry
from hourbook.service.entry import EntryValidationError, normalize_entry
from hourbook.service.period import weekday_name
from hourbook.time import DateLike, date_to_str, to_date

logger = logging.getLogger(__name__)


class EntryRepository:
    """
    Daily entries, one YAML document per date under each user's directory.

    Documents are loaded lazily per user and written back on flush().
    """

    def __init__(self) -> None:
        self._entries: dict[str, dict[str, Entry]] = {}
        self.is_dirty = False
        self._dirty: dict[str, set[str]] = {}

    def __user_entries(self, user_id: str) -> dict[str, Entry]:
        if user_id not in self._entries:
            self.__load_data(user_id)
        return self._entries[user_id]

    def __load_data(self, user_id: str) -> None:
        entries: dict[str, Entry] = {}
        entries_dir = configuration.user_entries_dir(user_id)
        if entries_dir.is_dir():
            for file_path in sorted(entries_dir.iterdir()):
                if file_path.suffix != ".yaml":
                    continue
                raw_entry = load(file_path.read_text(), Loader=Loader)
                if raw_entry is None:
                    continue
                try:
                    entry = normalize_entry(raw_entry)
                except EntryValidationError as e:
                    logger.warning("Skipping unreadable entry %s: %s", file_path, e)
                    continue
                entries[entry["date"]] = entry
        logger.debug("Loaded %d entries for user %s", len(entries), user_id)
        self._entries[user_id] = entries

    def __save_data(self) -> None:
        for user_id, dirty_dates in self._dirty.items():
            entries_dir = configuration.user_entries_dir(user_id)
            entries_dir.mkdir(parents=True, exist_ok=True)
            for date in dirty_dates:
                entry = self._entries[user_id][date]
                serializable_entry = self.__convert_entry_for_serialization(
                    deepcopy(entry)
                )
                file_path = entries_dir / f"{date}.yaml"
                file_path.write_text(dump(serializable_entry, Dumper=Dumper))
                logger.debug("Wrote entry %s for user %s", date, user_id)
        self._dirty.clear()

    def flush(self) -> bool:
        if self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def __convert_entry_for_serialization(self, entry: Entry) -> dict[str, Any]:
        serializable_entry = cast(dict[str, Any], entry)
        serializable_entry["created"] = time.datetime_to_iso_str_optional(
            serializable_entry["created"]
        )
        serializable_entry["updated"] = time.datetime_to_iso_str_optional(
            serializable_entry["updated"]
        )
        return serializable_entry

    def load_entries(
        self,
        user_id: str,
        start: DateLike,
        end: DateLike,
    ) -> list[Entry]:
        """Stored entries dated within [start, end], oldest first."""
        start_key = date_to_str(to_date(start))
        end_key = date_to_str(to_date(end))
        entries = self.__user_entries(user_id)
        return deepcopy(
            [entries[date] for date in sorted(entries) if start_key <= date <= end_key]
        )

    def load_all_entries(self, user_id: str) -> list[Entry]:
        entries = self.__user_entries(user_id)
        return deepcopy([entries[date] for date in sorted(entries)])

    def get_entry(self, user_id: str, date: DateLike) -> Optional[Entry]:
        entry = self.__user_entries(user_id).get(date_to_str(to_date(date)))
        return deepcopy(entry) if entry is not None else None

    def save_entry(
        self,
        user_id: str,
        date: DateLike,
        fields: dict[str, Any],
        default_rate: Optional[float] = None,
    ) -> Entry:
        """
        Merge fields into the entry for date, creating it if needed.

        weekday is always rewritten from the date. An entry keeps the rate
        snapshot it was first written with; default_rate only fills a rate
        that was never recorded, and an explicit hourly_rate field replaces it.
        """
        day = to_date(date)
        key = date_to_str(day)
        entries = self.__user_entries(user_id)
        now = time.now_utc()

        existing = entries.get(key)
        raw: dict[str, Any] = dict(existing) if existing is not None else {}
        if existing is None:
            raw["created"] = now
            if default_rate is not None:
                raw["hourly_rate"] = default_rate
        raw.update(fields)
        raw["date"] = key
        raw["weekday"] = weekday_name(day)
        raw["updated"] = now

        entry = normalize_entry(raw)
        entries[key] = entry

        self.is_dirty = True
        self._dirty.setdefault(user_id, set()).add(key)
        return deepcopy(entry)

    def clear_cache(self) -> None:
        self._entries.clear()
        self._dirty.clear()
        self.is_dirty = False


ENTRY_REPO = EntryRepository()
