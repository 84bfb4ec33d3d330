"""Pytest configuration and fixtures."""

import pytest
import tempfile
from pathlib import Path


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def pretty_json():
    """Pretty-printed JSON document for testing."""
    return """{
  "name": "test",
  "value": 42,
  "active": true
}
"""


@pytest.fixture
def nested_json():
    """Nested JSON document for testing."""
    return """
{
  "user": {
    "name": "John Doe",
    "age": 30,
    "address": {
      "street": "123 Main St",
      "city": "Anytown"
    }
  },
  "items": [
    {"id": 1, "name": "Item 1"},
    {"id": 2, "name": "Item 2"}
  ]
}
"""


@pytest.fixture
def malformed_json():
    """JSON document with an unclosed array."""
    return """{
  "name": "test",
  "value": 42,
  "unclosed": [
"""


@pytest.fixture
def large_json():
    """Generate a pretty-printed array of 1000 flat objects."""
    lines = ["["]
    for i in range(1000):
        lines.append("  {")
        lines.append(f'    "id": {i},')
        lines.append(f'    "name": "User {i}",')
        lines.append(f'    "email": "user{i}@example.com",')
        lines.append(f'    "active": {"true" if i % 2 == 0 else "false"}')
        lines.append("  }," if i < 999 else "  }")
    lines.append("]")
    return "\n".join(lines)
