from __future__ import annotations

from pathlib import Path  # noqa: TC003

import pytest  # noqa: TC002

from nailit.config import storage


def test_storage_config_prefers_explicit_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    custom = tmp_path / "custom-data"
    monkeypatch.setenv("NAILIT_DATA_DIR", str(custom))

    config = storage.get_storage_config()

    assert config.data_dir == custom


def test_get_database_uri_uses_env_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URI", "  postgresql+psycopg://db/nailit  ")

    assert storage.get_database_uri() == "postgresql+psycopg://db/nailit"


def test_get_database_uri_creates_data_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("DATABASE_URI", raising=False)
    monkeypatch.setenv("NAILIT_DATA_DIR", str(tmp_path / "data-dir"))

    uri = storage.get_database_uri()

    expected_path = (tmp_path / "data-dir" / storage.DEFAULT_DB_FILENAME).resolve()
    assert uri == f"sqlite+pysqlite:///{expected_path}"
    assert expected_path.parent.exists()


def test_blank_database_uri_falls_back_to_storage(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("DATABASE_URI", "   ")

    data_dir = tmp_path / "nested"

    uri = storage.get_database_uri(storage=storage.StorageConfig(data_dir=data_dir))

    expected_path = (data_dir / storage.DEFAULT_DB_FILENAME).resolve()
    assert uri == f"sqlite+pysqlite:///{expected_path}"
    assert (tmp_path / "nested").is_dir()
