import pytest

from mcdoclex.errors import ErrorType, InvalidResourceIdError
from mcdoclex.resource import RegistryDependency, ResourceId


def test_resource_id_parsing():
    rid = ResourceId.parse("minecraft:diamond_sword")
    assert rid.namespace == "minecraft"
    assert rid.path == "diamond_sword"

    rid2 = ResourceId.parse("diamond_sword")
    assert rid2.namespace == ""
    assert rid2.path == "diamond_sword"

    rid3 = ResourceId.parse("diamond_sword", "custom")
    assert rid3.namespace == "custom"
    assert rid3.path == "diamond_sword"


def test_explicit_namespace_wins_over_default():
    rid = ResourceId.parse("minecraft:stone", "custom")
    assert rid == ResourceId("minecraft", "stone")


def test_str_round_trip():
    text = "minecraft:diamond_sword"
    assert str(ResourceId.parse(text)) == text


def test_str_without_namespace():
    assert str(ResourceId.parse("stick")) == ":stick"


def test_empty_parts_are_kept():
    assert ResourceId.parse(":stick") == ResourceId("", "stick")
    assert ResourceId.parse("minecraft:") == ResourceId("minecraft", "")


def test_too_many_colons_is_error():
    with pytest.raises(InvalidResourceIdError) as info:
        ResourceId.parse("a:b:c")
    assert info.value.resource_id == "a:b:c"
    assert str(info.value) == "Invalid resource identifier: 'a:b:c'"
    assert info.value.error_type() is ErrorType.INVALID_RESOURCE_ID


def test_resource_ids_hash_by_value():
    ids = {ResourceId.parse("minecraft:stone"), ResourceId("minecraft", "stone")}
    assert len(ids) == 1


def test_registry_dependency_equality():
    dep = RegistryDependency("item", "minecraft:diamond", False)
    assert dep == RegistryDependency("item", "minecraft:diamond")
    assert dep != RegistryDependency("item", "minecraft:diamond", True)
    assert dep.identifier.startswith("minecraft:")