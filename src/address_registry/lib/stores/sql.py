"""SQLAlchemy-backed store implementations.

Each call opens its own short-lived session from the factory, so one store
instance can be shared by every thread of the process.
"""

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from address_registry.lib.addresses.types import AddressRecord
from address_registry.lib.regions.types import RegionNode, RegionType
from address_registry.lib.stores.base import AddressStore, RegionStore, StoreError
from address_registry.models.address import Address
from address_registry.models.region import Region


def _region_from_row(row: Region) -> RegionNode:
    return RegionNode(
        id=row.id,
        name=row.name,
        parent_id=row.parent_id,
        type=RegionType(row.type),
    )


def _address_from_row(row: Address) -> AddressRecord:
    return AddressRecord(
        id=row.id,
        raw_text=row.raw_text,
        text=row.text,
        village=row.village,
        road=row.road,
        road_num=row.road_num,
        building_num=row.building_num,
        hash=row.hash,
        province_id=row.province_id,
        city_id=row.city_id,
        county_id=row.county_id,
    )


class SqlRegionStore(RegionStore):
    """Region store over the ``regions`` table."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def create(self, region: RegionNode) -> int:
        if region.type is None:
            msg = f"Region {region.name!r} has no type"
            raise ValueError(msg)
        row = Region(name=region.name, parent_id=region.parent_id, type=region.type.value)
        try:
            with self._session_factory() as session:
                session.add(row)
                session.commit()
        except SQLAlchemyError as exc:
            raise StoreError("create", f"region {region.name!r}: {exc}") from exc
        region.id = row.id
        return row.id

    def find_root(self) -> RegionNode | None:
        with self._session_factory() as session:
            row = session.execute(
                select(Region).where(Region.parent_id == 0).order_by(Region.id).limit(1)
            ).scalar_one_or_none()
            return _region_from_row(row) if row is not None else None

    def find_children_of(self, parent_id: int) -> list[RegionNode]:
        with self._session_factory() as session:
            rows = session.execute(select(Region).where(Region.parent_id == parent_id).order_by(Region.id)).scalars()
            return [_region_from_row(row) for row in rows]


class SqlAddressStore(AddressStore):
    """Address store over the ``addresses`` table."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def create_batch(self, records: list[AddressRecord]) -> int:
        rows = [
            Address(
                raw_text=r.raw_text,
                text=r.text,
                village=r.village,
                road=r.road,
                road_num=r.road_num,
                building_num=r.building_num,
                hash=r.hash,
                province_id=r.province_id,
                city_id=r.city_id,
                county_id=r.county_id,
            )
            for r in records
        ]
        try:
            with self._session_factory() as session:
                session.add_all(rows)
                session.commit()
        except SQLAlchemyError as exc:
            raise StoreError("create_batch", f"{len(records)} addresses: {exc}") from exc

        for record, row in zip(records, rows, strict=True):
            record.id = row.id
        return len(rows)

    def find_all(self) -> list[AddressRecord]:
        with self._session_factory() as session:
            rows = session.execute(select(Address).order_by(Address.id)).scalars()
            return [_address_from_row(row) for row in rows]

    def get(self, address_id: int) -> AddressRecord | None:
        with self._session_factory() as session:
            row = session.get(Address, address_id)
            return _address_from_row(row) if row is not None else None

    def find_by_region(self, province_id: int, city_id: int, county_id: int) -> list[AddressRecord]:
        query = select(Address)
        if province_id:
            query = query.where(Address.province_id == province_id)
        if city_id:
            query = query.where(Address.city_id == city_id)
        if county_id:
            query = query.where(Address.county_id == county_id)
        with self._session_factory() as session:
            rows = session.execute(query.order_by(Address.id)).scalars()
            return [_address_from_row(row) for row in rows]
