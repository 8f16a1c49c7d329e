"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports (``src`` and the repo root for ``tests.zoo``).
- Scalar registry isolation so tests registering custom scalars do not leak.
- A recording console for asserting on log output.
"""

import io
import sys
from pathlib import Path

import pytest
from rich.console import Console

# Add src to path so we can import 'typed_collection' without installing it
root_path = Path(__file__).parent.parent
sys.path.insert(0, str(root_path / "src"))
sys.path.insert(0, str(root_path))

from typed_collection.core import predicates  # noqa: E402
from typed_collection.utils.console import reset_console, set_console  # noqa: E402


@pytest.fixture(autouse=True)
def isolate_scalar_registry():
  """
  Restores the scalar registry after each test.
  """
  snapshot = (
    predicates._SCALAR_REGISTRY.copy(),
    predicates._ALIASES.copy(),
    predicates._SCALAR_CLASSES.copy(),
    predicates._CLASS_TO_SCALAR.copy(),
  )
  yield
  for live, saved in zip(
    (
      predicates._SCALAR_REGISTRY,
      predicates._ALIASES,
      predicates._SCALAR_CLASSES,
      predicates._CLASS_TO_SCALAR,
    ),
    snapshot,
  ):
    live.clear()
    live.update(saved)
  # Bump the version so cached descriptors built against test scalars are dropped
  predicates._REGISTRY_VERSION += 1


@pytest.fixture
def recorded_console():
  """
  Injects a wide recording console and yields it.
  Wide enough that long error messages are not wrapped.
  """
  capture = Console(record=True, file=io.StringIO(), width=400)
  set_console(capture)
  yield capture
  reset_console()
