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
from hourbook.model.rollup import Rollup
from hourbook.service.entry import normalize_entry
from hourbook.service.period import validate_period_type

logger = logging.getLogger(__name__)


class RollupRepository:
    """
    Advisory cache of computed rollups, one YAML document per period.

    Nothing reads these back as a source of truth; rollups are always
    recomputable from entries.
    """

    def __init__(self) -> None:
        self._pending: dict[tuple[str, str], Rollup] = {}
        self.is_dirty = False

    @staticmethod
    def __rollup_key(period_type: str, period_id: str) -> str:
        return f"{validate_period_type(period_type)}-{period_id}"

    def __convert_rollup_for_serialization(self, rollup: Rollup) -> dict[str, Any]:
        serializable_rollup = cast(dict[str, Any], rollup)
        serializable_rollup["last_updated"] = time.datetime_to_iso_str(
            serializable_rollup["last_updated"]
        )
        for entry in serializable_rollup["entries"]:
            entry["created"] = time.datetime_to_iso_str_optional(entry["created"])
            entry["updated"] = time.datetime_to_iso_str_optional(entry["updated"])
        return serializable_rollup

    def __convert_rollup_for_deserialization(self, rollup: dict[str, Any]) -> Rollup:
        deserializable_rollup = rollup
        deserializable_rollup["last_updated"] = time.datetime_from_str(
            deserializable_rollup["last_updated"]
        )
        deserializable_rollup["entries"] = [
            normalize_entry(entry) for entry in deserializable_rollup.get("entries", [])
        ]
        return cast(Rollup, deserializable_rollup)

    def save_rollup(
        self,
        user_id: str,
        period_type: str,
        period_id: str,
        rollup: Rollup,
    ) -> None:
        key = self.__rollup_key(period_type, period_id)
        self._pending[(user_id, key)] = deepcopy(rollup)
        self.is_dirty = True

    def get_rollup(
        self,
        user_id: str,
        period_type: str,
        period_id: str,
    ) -> Optional[Rollup]:
        key = self.__rollup_key(period_type, period_id)
        pending = self._pending.get((user_id, key))
        if pending is not None:
            return deepcopy(pending)

        file_path = configuration.user_rollups_dir(user_id) / f"{key}.yaml"
        if not file_path.is_file():
            return None
        raw_rollup = load(file_path.read_text(), Loader=Loader)
        if raw_rollup is None:
            return None
        return self.__convert_rollup_for_deserialization(raw_rollup)

    def flush(self) -> bool:
        if not self.is_dirty:
            return False
        for (user_id, key), rollup in self._pending.items():
            rollups_dir = configuration.user_rollups_dir(user_id)
            rollups_dir.mkdir(parents=True, exist_ok=True)
            serializable_rollup = self.__convert_rollup_for_serialization(
                deepcopy(rollup)
            )
            (rollups_dir / f"{key}.yaml").write_text(
                dump(serializable_rollup, Dumper=Dumper)
            )
            logger.debug("Cached rollup %s for user %s", key, user_id)
        self._pending.clear()
        self.is_dirty = False
        return True

    def clear_cache(self) -> None:
        self._pending.clear()
        self.is_dirty = False


ROLLUP_REPO = RollupRepository()
