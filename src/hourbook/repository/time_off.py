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
from hourbook.model.time_off import TimeOff
from hourbook.service.entry import coerce_number
from hourbook.service.period import week_id
from hourbook.template.time_off import get_time_off_template
from hourbook.time import DateLike, date_to_str, to_date

logger = logging.getLogger(__name__)


class TimeOffRepository:
    """Supplemental PTO and holiday hours, one YAML document per week."""

    def __init__(self) -> None:
        self._time_off: dict[str, dict[str, TimeOff]] = {}
        self.is_dirty = False
        self._dirty: dict[str, set[str]] = {}

    def __user_time_off(self, user_id: str) -> dict[str, TimeOff]:
        if user_id not in self._time_off:
            self.__load_data(user_id)
        return self._time_off[user_id]

    def __load_data(self, user_id: str) -> None:
        time_off: dict[str, TimeOff] = {}
        time_off_dir = configuration.user_time_off_dir(user_id)
        if time_off_dir.is_dir():
            for file_path in sorted(time_off_dir.iterdir()):
                if file_path.suffix != ".yaml":
                    continue
                raw_time_off = load(file_path.read_text(), Loader=Loader)
                if raw_time_off is None:
                    continue
                if not isinstance(raw_time_off, dict) or "week_id" not in raw_time_off:
                    logger.warning("Skipping time off %s: no week_id", file_path)
                    continue
                try:
                    week = self.__convert_time_off_for_deserialization(raw_time_off)
                except ValueError as e:
                    logger.warning("Skipping unreadable time off %s: %s", file_path, e)
                    continue
                time_off[week["week_id"]] = week
        self._time_off[user_id] = time_off

    def __convert_time_off_for_serialization(self, time_off: TimeOff) -> dict[str, Any]:
        serializable_time_off = cast(dict[str, Any], time_off)
        serializable_time_off["updated"] = time.datetime_to_iso_str_optional(
            serializable_time_off["updated"]
        )
        return serializable_time_off

    def __convert_time_off_for_deserialization(
        self, time_off: dict[str, Any]
    ) -> TimeOff:
        updated = time_off.get("updated")
        return {
            "week_id": week_id(str(time_off["week_id"])),
            "pto_hours": coerce_number(time_off.get("pto_hours")),
            "holiday_hours": coerce_number(time_off.get("holiday_hours")),
            "updated": time.datetime_from_str(updated)
            if isinstance(updated, str)
            else None,
        }

    def clear_cache(self) -> None:
        self._time_off.clear()
        self._dirty.clear()
        self.is_dirty = False

    def flush(self) -> bool:
        if not self.is_dirty:
            return False
        for user_id, dirty_weeks in self._dirty.items():
            time_off_dir = configuration.user_time_off_dir(user_id)
            time_off_dir.mkdir(parents=True, exist_ok=True)
            for week in dirty_weeks:
                serializable_time_off = self.__convert_time_off_for_serialization(
                    deepcopy(self._time_off[user_id][week])
                )
                (time_off_dir / f"{week}.yaml").write_text(
                    dump(serializable_time_off, Dumper=Dumper)
                )
                logger.debug("Wrote time off %s for user %s", week, user_id)
        self._dirty.clear()
        self.is_dirty = False
        return True

    def load_weekly_time_off(self, user_id: str, date: DateLike) -> TimeOff:
        """Time off for the week containing date; zeros when none recorded."""
        week = week_id(date)
        existing = self.__user_time_off(user_id).get(week)
        if existing is None:
            return get_time_off_template(week)
        return deepcopy(existing)

    def load_time_off(
        self,
        user_id: str,
        start: DateLike,
        end: DateLike,
    ) -> dict[str, TimeOff]:
        """Recorded time off for every week whose Monday is in [start, end]."""
        weeks = self.__user_time_off(user_id)
        first = date_to_str(to_date(start))
        last = date_to_str(to_date(end))
        return deepcopy(
            {week: weeks[week] for week in sorted(weeks) if first <= week <= last}
        )

    def save_time_off(
        self,
        user_id: str,
        date: DateLike,
        pto_hours: Optional[float] = None,
        holiday_hours: Optional[float] = None,
    ) -> TimeOff:
        week = week_id(date)
        weeks = self.__user_time_off(user_id)
        time_off = weeks.get(week, get_time_off_template(week))
        if pto_hours is not None:
            time_off["pto_hours"] = coerce_number(pto_hours)
        if holiday_hours is not None:
            time_off["holiday_hours"] = coerce_number(holiday_hours)
        time_off["updated"] = time.now_utc()
        weeks[week] = time_off

        self.is_dirty = True
        self._dirty.setdefault(user_id, set()).add(week)
        return deepcopy(time_off)


TIME_OFF_REPO = TimeOffRepository()
