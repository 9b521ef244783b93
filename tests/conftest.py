"""
Pytest configuration and shared fixtures for the jcr-lexicon test suite.
"""

import pytest
from pathlib import Path

from jcr_lexicon.errors import PrefixNotRegistered
from jcr_lexicon.lib.namespaces import NamespaceRegistry
from jcr_lexicon.lib.tree import Node, Property
from jcr_lexicon.lib.values import (
    BooleanValue,
    DateValue,
    LongValue,
    StringValue,
)

JCR_URI = "http://www.jcp.org/jcr/1.0"


class RecordingRegistry:
    """Registry that records every prefix it is asked to resolve."""

    def __init__(self, mapping=None):
        self.mapping = dict(mapping or {})
        self.calls = []

    def get_uri(self, prefix):
        self.calls.append(prefix)
        try:
            return self.mapping[prefix]
        except KeyError:
            raise PrefixNotRegistered(prefix) from None


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def jcr_registry():
    """Registry holding only the jcr namespace."""
    return NamespaceRegistry({"jcr": JCR_URI})


@pytest.fixture
def builtin_registry():
    return NamespaceRegistry.builtin()


@pytest.fixture
def recording_registry():
    """Factory for registries that record resolve calls."""
    def _make(mapping=None):
        return RecordingRegistry({"jcr": JCR_URI} if mapping is None else mapping)
    return _make


@pytest.fixture
def sample_tree():
    """
    root
      jcr:primaryType = "nt:unstructured"
      a/
        title = "A"
        a1/
          count = 3
          tags = ["x", "y"]
      b/
        created = 2024-03-15T10:30:00.000Z
        flags = [true]
    """
    root = Node("root", properties=[
        Property("jcr:primaryType", StringValue("nt:unstructured")),
    ])
    a = root.add_node("a")
    a.add_property(Property("title", StringValue("A")))
    a1 = a.add_node("a1")
    a1.add_property(Property("count", LongValue(3)))
    a1.add_property(Property("tags", values=[StringValue("x"), StringValue("y")]))
    b = root.add_node("b")
    b.add_property(Property("created", DateValue("2024-03-15T10:30:00.000Z")))
    b.add_property(Property("flags", values=[BooleanValue(True)]))
    return root


@pytest.fixture
def write_namespace_file(tmp_path):
    """Factory fixture to write a namespace declaration file."""
    def _write(content: str, filename: str = "namespaces.cnd") -> Path:
        file_path = tmp_path / filename
        file_path.write_text(content, encoding="utf-8")
        return file_path
    return _write


# Test data fixtures for common scenarios

@pytest.fixture
def valid_cnd():
    return """
// Application namespaces
<jcr = 'http://www.jcp.org/jcr/1.0'>
<app = 'http://example.com/app/1.0'>
/* legacy content */
<legacy = "http://example.com/legacy">
"""
