"""
Pytest configuration and shared fixtures for the yang-swagger test suite.
"""

import pytest
import tempfile
import shutil
from pathlib import Path

from yang_swagger.codegen import DefinitionRegistry, TypeConverter
from yang_swagger.language import build_model_str, build_schema_context, get_metamodel
from yang_swagger.model import Module, NodeKind, QName, SchemaContext, SchemaNode

TEST_NS = "urn:test"


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture(scope="session")
def examples_dir(project_root):
    """Return the examples directory."""
    return project_root / "examples"


@pytest.fixture
def temp_output_dir():
    """Create a temporary directory for generated output."""
    temp_dir = tempfile.mkdtemp(prefix="yang_swagger_test_")
    yield Path(temp_dir)
    # Cleanup after test
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture(scope="session")
def yang_metamodel():
    """Return the YANG metamodel (cached for session)."""
    return get_metamodel()


@pytest.fixture
def write_yang_file(temp_output_dir):
    """Factory fixture to write YANG content to a temporary file."""
    def _write(content: str, filename: str = "test.yang") -> Path:
        file_path = temp_output_dir / filename
        file_path.write_text(content)
        return file_path
    return _write


@pytest.fixture
def build_context():
    """Factory fixture to build a SchemaContext from YANG module strings."""
    def _build(*contents: str) -> SchemaContext:
        return build_schema_context(*[build_model_str(c) for c in contents])
    return _build


@pytest.fixture
def registry():
    return DefinitionRegistry()


@pytest.fixture
def make_converter(registry):
    """Factory fixture: converter over `ctx`, with the shared registry unless told otherwise."""
    def _make(ctx=None, with_builder=True, enum_models=True) -> TypeConverter:
        converter = TypeConverter(ctx or SchemaContext(), enum_models=enum_models)
        if with_builder:
            converter.set_data_object_builder(registry)
        return converter
    return _make


@pytest.fixture
def test_module():
    """An empty module to hang hand-built schema nodes on."""
    return Module(qname=QName(TEST_NS, "test"), prefix="t", namespace=TEST_NS)


@pytest.fixture
def add_leaf(test_module):
    """Factory fixture: attach a leaf with the given type under `parent` (default: module)."""
    def _add(name, type_def, parent=None, kind=NodeKind.LEAF):
        owner = parent if parent is not None else test_module
        return owner.add_child(SchemaNode(qname=QName(TEST_NS, name), kind=kind, type=type_def))
    return _add


# Test data fixtures for common scenarios

@pytest.fixture
def interfaces_yang():
    """A module exercising every conversion branch."""
    return """
module example-interfaces {
  yang-version 1.1;
  namespace "urn:example:interfaces";
  prefix if;

  revision 2024-01-15 {
    description "Initial revision.";
  }

  typedef interface-name {
    type string {
      length "1..64";
      pattern '[a-zA-Z][a-zA-Z0-9_-]*';
    }
    description "Name of an interface.";
  }

  typedef short-name {
    type interface-name {
      length "1..16";
    }
  }

  typedef admin-status {
    type enumeration {
      enum up { value 1; }
      enum down;
      enum testing;
    }
  }

  typedef counter {
    type uint32;
  }

  container interfaces {
    list interface {
      key "name";

      leaf name {
        type interface-name;
      }
      leaf alias {
        type short-name;
      }
      leaf enabled {
        type boolean;
        default true;
      }
      leaf mtu {
        type uint16 {
          range "68..65535";
        }
      }
      leaf in-octets {
        type counter;
      }
      leaf speed {
        type int64;
        units "bits/second";
      }
      leaf priority {
        type int8;
      }
      leaf status {
        type admin-status;
      }
      leaf flags {
        type bits {
          bit up;
          bit running { position 4; }
          bit loopback;
        }
      }
      leaf address {
        type union {
          type string;
          type uint32;
        }
      }
      leaf rate {
        type decimal64 {
          fraction-digits 2;
        }
      }
    }
  }

  container routing {
    leaf default-interface {
      type leafref {
        path "/if:interfaces/if:interface/if:name";
      }
    }
    leaf default-enabled {
      type leafref {
        path "/if:interfaces/if:interface/if:enabled";
      }
    }
  }
}
"""
