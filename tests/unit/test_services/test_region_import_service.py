"""Tests for the region tree importer."""

from unittest.mock import MagicMock

from address_registry.lib.regions.types import RegionNode, RegionType
from address_registry.lib.stores.memory import InMemoryRegionStore
from address_registry.services.region_import_service import RegionImporter


def _by_name(store: InMemoryRegionStore) -> dict[str, RegionNode]:
    nodes: dict[str, RegionNode] = {}
    pending = [store.find_root()]
    while pending:
        node = pending.pop()
        if node is None:
            continue
        nodes[node.name] = node
        pending.extend(store.find_children_of(node.id))  # type: ignore[arg-type]
    return nodes


class TestImportRegions:
    """Tests for RegionImporter.import_regions."""

    def test_returns_persisted_count(self, region_store: InMemoryRegionStore, region_tree: RegionNode) -> None:
        count = RegionImporter(region_store).import_regions(region_tree)

        assert count == 10
        assert len(region_store) == 10

    def test_root_is_country(self, region_store: InMemoryRegionStore, region_tree: RegionNode) -> None:
        RegionImporter(region_store).import_regions(region_tree)

        assert region_tree.id is not None
        assert region_tree.parent_id == 0
        assert region_tree.type == RegionType.COUNTRY

    def test_classifies_every_level(self, region_store: InMemoryRegionStore, region_tree: RegionNode) -> None:
        RegionImporter(region_store).import_regions(region_tree)

        types = {name: node.type for name, node in _by_name(region_store).items()}
        assert types == {
            "中国": RegionType.COUNTRY,
            "北京": RegionType.PROVINCE_LEVEL_CITY1,
            "北京市": RegionType.PROVINCE_LEVEL_CITY2,
            "东城区": RegionType.COUNTY,
            "朝阳区": RegionType.COUNTY,
            "安徽": RegionType.PROVINCE,
            "安庆": RegionType.CITY,
            "宿松县": RegionType.COUNTY,
            "海南": RegionType.PROVINCE,
            "儋州": RegionType.CITY_LEVEL_COUNTY,
        }

    def test_links_parents(self, region_store: InMemoryRegionStore, region_tree: RegionNode) -> None:
        RegionImporter(region_store).import_regions(region_tree)

        nodes = _by_name(region_store)
        assert nodes["北京"].parent_id == nodes["中国"].id
        assert nodes["北京市"].parent_id == nodes["北京"].id
        assert nodes["东城区"].parent_id == nodes["北京市"].id
        assert nodes["宿松县"].parent_id == nodes["安庆"].id

    def test_skips_unspecified_nodes_and_their_children(self, region_tree: RegionNode) -> None:
        store = MagicMock(wraps=InMemoryRegionStore())

        RegionImporter(store).import_regions(region_tree)

        created = [call.args[0].name for call in store.create.call_args_list]
        assert "其它郊县" not in created
        assert "其他区" not in created
        assert "某县" not in created
        anhui_other = region_tree.children[1].children[1]
        assert anhui_other.id is None
        assert anhui_other.type is None

    def test_persists_in_tree_order(self, region_tree: RegionNode) -> None:
        store = MagicMock(wraps=InMemoryRegionStore())

        RegionImporter(store).import_regions(region_tree)

        created = [call.args[0].name for call in store.create.call_args_list]
        assert created == ["中国", "北京", "北京市", "东城区", "朝阳区", "安徽", "安庆", "宿松县", "海南", "儋州"]

    def test_root_without_children(self, region_store: InMemoryRegionStore) -> None:
        assert RegionImporter(region_store).import_regions(RegionNode(name="中国")) == 1


class TestRootValidation:
    """An unexpected root is rejected without raising."""

    def test_wrong_root_name_returns_zero(self, region_store: InMemoryRegionStore) -> None:
        tree = RegionNode(name="美国", children=[RegionNode(name="加州")])

        assert RegionImporter(region_store).import_regions(tree) == 0
        assert len(region_store) == 0

    def test_none_returns_zero(self, region_store: InMemoryRegionStore) -> None:
        assert RegionImporter(region_store).import_regions(None) == 0

    def test_custom_root_name(self, region_store: InMemoryRegionStore) -> None:
        importer = RegionImporter(region_store, root_name="中华人民共和国")

        assert importer.import_regions(RegionNode(name="中华人民共和国")) == 1
        assert importer.import_regions(RegionNode(name="中国")) == 0


class TestRepeatedImport:
    """A second import is a no-op."""

    def test_second_import_returns_zero(self, region_store: InMemoryRegionStore, region_tree: RegionNode) -> None:
        importer = RegionImporter(region_store)
        importer.import_regions(region_tree)

        assert importer.import_regions(region_tree) == 0
        assert len(region_store) == 10

    def test_second_import_keeps_assigned_ids(
        self, region_store: InMemoryRegionStore, region_tree: RegionNode
    ) -> None:
        importer = RegionImporter(region_store)
        importer.import_regions(region_tree)
        ids_before = [node.id for node in region_tree.iter_tree()]

        importer.import_regions(region_tree)

        assert [node.id for node in region_tree.iter_tree()] == ids_before
        assert region_store.find_root().id == region_tree.id  # type: ignore[union-attr]

    def test_new_importer_over_populated_store_is_noop(
        self, region_store: InMemoryRegionStore, region_tree: RegionNode
    ) -> None:
        RegionImporter(region_store).import_regions(region_tree)

        assert RegionImporter(region_store).import_regions(RegionNode(name="中国")) == 0
