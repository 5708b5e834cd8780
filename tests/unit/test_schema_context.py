"""
Unit tests for schema path lookup and leafref resolution.
"""

import pytest

from yang_swagger.errors import LeafrefResolutionError
from yang_swagger.model import (
    BaseTypes,
    Module,
    NodeKind,
    QName,
    SchemaContext,
    SchemaNode,
    TypeDefinition,
    TypeKind,
)

NS = "urn:test"


def node(name, kind=NodeKind.CONTAINER, type_def=None):
    return SchemaNode(qname=QName(NS, name), kind=kind, type=type_def)


def leafref(path, name="ref"):
    return TypeDefinition(QName(NS, name), TypeKind.LEAFREF, path=path)


@pytest.fixture
def tree(test_module):
    """
    /t:system
        hostname (string)
        servers/server
            name (string)
            port (uint16)
            name-ref (leafref ../name)
    """
    system = test_module.add_child(node("system"))
    hostname = system.add_child(node("hostname", NodeKind.LEAF, BaseTypes.by_name("string")))
    servers = system.add_child(node("servers"))
    server = servers.add_child(node("server", NodeKind.LIST))
    name = server.add_child(node("name", NodeKind.LEAF, BaseTypes.by_name("string")))
    port = server.add_child(node("port", NodeKind.LEAF, BaseTypes.by_name("uint16")))
    name_ref = server.add_child(node("name-ref", NodeKind.LEAF, leafref("../name")))
    return {
        "module": test_module,
        "system": system,
        "hostname": hostname,
        "server": server,
        "name": name,
        "port": port,
        "name-ref": name_ref,
    }


@pytest.fixture
def ctx(tree):
    return SchemaContext([tree["module"]])


class TestSchemaNode:

    def test_path_uses_module_prefix(self, tree):
        assert tree["port"].path == "/t:system/servers/server/port"

    def test_module_of_nested_node(self, tree):
        assert tree["port"].module is tree["module"]

    def test_iter_descendants_in_declaration_order(self, tree):
        names = [n.qname.local_name for n in tree["system"].iter_descendants()]
        assert names == ["hostname", "servers", "server", "name", "port", "name-ref"]

    def test_module_path_is_root(self, test_module):
        assert test_module.path == "/"


class TestFindDataNode:

    def test_absolute_path(self, ctx, tree):
        found = ctx.find_data_node("/t:system/t:servers/t:server/t:port", tree["hostname"])
        assert found is tree["port"]

    def test_absolute_path_without_prefix_uses_referrer_module(self, ctx, tree):
        assert ctx.find_data_node("/system/hostname", tree["port"]) is tree["hostname"]

    def test_relative_path(self, ctx, tree):
        assert ctx.find_data_node("../port", tree["name"]) is tree["port"]

    def test_relative_path_up_several_levels(self, ctx, tree):
        assert ctx.find_data_node("../../../hostname", tree["name"]) is tree["hostname"]

    def test_predicates_are_ignored(self, ctx, tree):
        path = "/t:system/t:servers/t:server[t:name = current()/../t:hostname]/t:port"
        assert ctx.find_data_node(path, tree["hostname"]) is tree["port"]

    def test_missing_node(self, ctx, tree):
        assert ctx.find_data_node("../nope", tree["name"]) is None

    def test_unknown_prefix(self, ctx, tree):
        assert ctx.find_data_node("/x:system", tree["name"]) is None

    def test_climbing_above_the_module(self, ctx, tree):
        assert ctx.find_data_node("../../../../../x", tree["name"]) is None


class TestModules:

    def test_duplicate_module_rejected(self, test_module):
        ctx = SchemaContext([test_module])
        with pytest.raises(ValueError):
            ctx.add_module(test_module)

    def test_prefix_through_import(self, test_module):
        other = Module(qname=QName("urn:other", "other"), prefix="o", namespace="urn:other")
        test_module.imports["oth"] = "other"
        ctx = SchemaContext([test_module, other])

        assert ctx.find_module_by_prefix("oth", test_module) is other
        assert ctx.find_module_by_prefix("t", test_module) is test_module
        assert ctx.find_module_by_prefix("o") is other
        assert ctx.get_module("other") is other


class TestLeafrefResolution:

    def test_relative_leafref(self, ctx, tree):
        target = ctx.get_base_type_for_leafref(tree["name-ref"].type, tree["name-ref"])
        assert target is tree["name"].type

    def test_absolute_leafref(self, ctx, tree):
        ref = leafref("/t:system/t:hostname")
        assert ctx.get_base_type_for_leafref(ref, tree["port"]) is tree["hostname"].type

    def test_chained_leafref_resolves_from_each_target(self, ctx, tree):
        # points at name-ref, whose own relative path is anchored at name-ref
        ref = leafref("/t:system/t:servers/t:server/t:name-ref", "outer")
        assert ctx.get_base_type_for_leafref(ref, tree["hostname"]) is tree["name"].type

    def test_path_inherited_from_typedef(self, ctx, tree):
        base = leafref("../port", "port-ref")
        derived = TypeDefinition(QName(NS, "derived"), TypeKind.LEAFREF, base_type=base)
        assert ctx.get_base_type_for_leafref(derived, tree["name"]) is tree["port"].type

    def test_same_leafref_resolves_per_owner(self, ctx, tree, test_module):
        other_server = test_module.add_child(node("other", NodeKind.LIST))
        other_name = other_server.add_child(node("name", NodeKind.LEAF, BaseTypes.by_name("boolean")))
        shared = leafref("../name")
        owner = other_server.add_child(node("ref", NodeKind.LEAF, shared))

        assert ctx.get_base_type_for_leafref(shared, owner) is other_name.type
        assert ctx.get_base_type_for_leafref(shared, tree["name-ref"]) is tree["name"].type

    def test_target_is_not_a_leaf(self, ctx, tree):
        with pytest.raises(LeafrefResolutionError):
            ctx.get_base_type_for_leafref(leafref("../../server"), tree["name"])

    def test_relative_path_without_owner(self, ctx):
        with pytest.raises(LeafrefResolutionError):
            ctx.get_base_type_for_leafref(leafref("../name"), None)

    def test_missing_path(self, ctx, tree):
        bare = TypeDefinition(QName(NS, "bare"), TypeKind.LEAFREF)
        with pytest.raises(LeafrefResolutionError):
            ctx.get_base_type_for_leafref(bare, tree["name"])

    def test_circular_leafrefs(self, ctx, tree):
        server = tree["server"]
        server.add_child(node("a", NodeKind.LEAF, leafref("../b", "a")))
        b = server.add_child(node("b", NodeKind.LEAF, leafref("../a", "b")))

        with pytest.raises(LeafrefResolutionError) as exc_info:
            ctx.get_base_type_for_leafref(b.type, b)
        assert "Circular" in str(exc_info.value)

    def test_error_carries_path(self, ctx, tree):
        with pytest.raises(LeafrefResolutionError) as exc_info:
            ctx.get_base_type_for_leafref(leafref("../nothing"), tree["name"])
        assert exc_info.value.path == "../nothing"
