"""Shared test fixtures for settings, SQLite-backed sessions, stores, and sample data."""

from collections.abc import Callable, Generator

import pytest
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from address_registry.core.config import Settings
from address_registry.lib.addresses.types import AddressRecord
from address_registry.lib.regions.types import RegionNode
from address_registry.lib.stores.memory import InMemoryAddressStore, InMemoryRegionStore
from address_registry.models.base import Base


@pytest.fixture
def settings() -> Settings:
    """Test application settings."""
    return Settings(
        database_url="sqlite:///:memory:",
        import_batch_size=1000,
        log_level="DEBUG",
        _env_file=None,  # type: ignore[call-arg]
    )


@pytest.fixture
def engine() -> Generator[Engine]:
    """Create an in-memory SQLite engine with all tables."""
    engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(engine)

    yield engine

    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker[Session]:
    """Session factory bound to the test engine."""
    return sessionmaker(engine, expire_on_commit=False)


@pytest.fixture
def region_store() -> InMemoryRegionStore:
    """Empty in-memory region store."""
    return InMemoryRegionStore()


@pytest.fixture
def address_store() -> InMemoryAddressStore:
    """Empty in-memory address store."""
    return InMemoryAddressStore()


@pytest.fixture
def region_tree() -> RegionNode:
    """Unpersisted source tree covering every classification rule.

    Importable regions: 中国, 北京, 北京市, 东城区, 朝阳区, 安徽, 安庆,
    宿松县, 海南, 儋州 (10 in total).
    """
    return RegionNode(
        name="中国",
        children=[
            RegionNode(
                name="北京",
                children=[
                    RegionNode(
                        name="北京市",
                        children=[RegionNode(name="东城区"), RegionNode(name="朝阳区")],
                    ),
                ],
            ),
            RegionNode(
                name="安徽",
                children=[
                    RegionNode(
                        name="安庆",
                        children=[RegionNode(name="宿松县"), RegionNode(name="其他区")],
                    ),
                    RegionNode(name="其它郊县", children=[RegionNode(name="某县")]),
                ],
            ),
            RegionNode(
                name="海南",
                children=[RegionNode(name="儋州")],
            ),
        ],
    )


def _make_address(raw_text: str, **overrides: object) -> AddressRecord:
    fields: dict[str, object] = {
        "text": raw_text,
        "village": "",
        "road": "园林路",
        "road_num": "3号",
        "building_num": "",
    }
    fields.update(overrides)
    return AddressRecord(raw_text=raw_text, **fields)  # type: ignore[arg-type]


@pytest.fixture
def make_address() -> Callable[..., AddressRecord]:
    """Factory for address records with short default fields."""
    return _make_address
