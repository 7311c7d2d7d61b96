"""Fixtures for CLI integration tests backed by a temporary SQLite database."""

import json
import sys
from collections.abc import Generator
from pathlib import Path

import pytest
from loguru import logger
from sqlalchemy import create_engine

from address_registry.models.base import Base


@pytest.fixture(autouse=True)
def _reset_logger() -> Generator[None]:
    """Drop sinks bound to the runner's captured streams."""
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def database_url(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    """Point the CLI at a fresh SQLite file with all tables created."""
    url = f"sqlite:///{tmp_path / 'registry.db'}"
    engine = create_engine(url)
    Base.metadata.create_all(engine)
    engine.dispose()
    monkeypatch.setenv("DATABASE_URL", url)
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.delenv("LOG_DIR", raising=False)
    monkeypatch.delenv("IMPORT_BATCH_SIZE", raising=False)
    return url


@pytest.fixture
def region_file(tmp_path: Path) -> Path:
    """Region tree JSON file with nine importable regions."""
    tree = {
        "name": "中国",
        "children": [
            {"name": "北京", "children": [{"name": "北京市", "children": [{"name": "东城区"}]}]},
            {
                "name": "安徽",
                "children": [
                    {"name": "安庆", "children": [{"name": "宿松县"}, {"name": "其他区"}]},
                    {"name": "其它", "children": [{"name": "某县"}]},
                ],
            },
            {"name": "海南", "children": [{"name": "儋州"}]},
        ],
    }
    path = tmp_path / "regions.json"
    path.write_text(json.dumps(tree, ensure_ascii=False), encoding="utf-8")
    return path
