from pathlib import Path
from typing import Any, Callable, Iterator, Optional

import pytest

from hourbook import configuration
from hourbook.model.entry import Entry
from hourbook.repository.configuration import CONFIGURATION_REPO
from hourbook.repository.entry import ENTRY_REPO
from hourbook.repository.rollup import ROLLUP_REPO
from hourbook.repository.time_off import TIME_OFF_REPO
from hourbook.service.entry import normalize_entry
from hourbook.view import state as view_state

EntryFactory = Callable[..., Entry]


def make_entry(
    date: str,
    hours: Any = 8.0,
    hourly_rate: Any = 20.0,
    coworker: Optional[str] = None,
    notes: Optional[str] = None,
) -> Entry:
    return normalize_entry(
        {
            "date": date,
            "hours": hours,
            "hourly_rate": hourly_rate,
            "coworker": coworker,
            "notes": notes,
        }
    )


@pytest.fixture
def entry() -> EntryFactory:
    """Factory for normalized entries, e.g. entry("2024-01-08", hours=9)."""
    return make_entry


def _clear_repositories() -> None:
    for repo in (CONFIGURATION_REPO, ENTRY_REPO, TIME_OFF_REPO, ROLLUP_REPO):
        repo.clear_cache()


@pytest.fixture
def data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point every repository at an empty temporary data directory."""
    config_path = tmp_path / "config"
    data_path = tmp_path / "data"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", data_path)
    monkeypatch.setattr(configuration, "DATA_USERS_DIR", data_path / "users")

    _clear_repositories()
    view_state.reset_view_options()

    yield data_path

    _clear_repositories()
