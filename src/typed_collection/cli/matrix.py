"""
Compatibility Matrix rendering logic.

Builds the merge compatibility table for a list of declared types: each cell
answers "may a collection of <column> be merged into a collection of <row>?".
The table is available as structured rows or rendered with Rich.
"""

from typing import Any, Dict, List

from rich.markup import escape
from rich.table import Table

from typed_collection.core.compatibility import is_compatible
from typed_collection.core.descriptor import TypeDescriptor, describe_type
from typed_collection.utils.console import console

COMPATIBLE = "✅"
INCOMPATIBLE = "❌"


class CompatibilityMatrix:
  """
  Pairwise merge compatibility between declared element types.
  """

  def __init__(self, types: List[str]):
    """
    Args:
        types (List[str]): Declarations (scalar names or dotted class paths).
    """
    self.types = types
    self._descriptors: Dict[str, TypeDescriptor] = {t: describe_type(t) for t in types}

  def get_json(self) -> List[Dict[str, Any]]:
    """
    Returns the matrix as rows.

    Returns:
        List[Dict[str, Any]]: One row per target type, with ``"target"``,
        ``"kind"`` and ``"sources"`` mapping each source type to a status icon.
    """
    rows = []
    for target in self.types:
      target_desc = self._descriptors[target]
      sources = {}
      for source in self.types:
        ok = is_compatible(target_desc, self._descriptors[source])
        sources[source] = COMPATIBLE if ok else INCOMPATIBLE
      rows.append({"target": target, "kind": target_desc.kind.value, "sources": sources})
    return rows

  def render(self) -> None:
    """Prints the matrix as a Rich table on the active console."""
    table = Table(title="Merge Compatibility (row <- column)")
    table.add_column("Target", style="cyan", no_wrap=True)
    table.add_column("Kind", style="magenta")
    for source in self.types:
      table.add_column(escape(source), justify="center")

    for row in self.get_json():
      values = [escape(row["target"]), row["kind"]]
      values.extend(row["sources"][source] for source in self.types)
      table.add_row(*values)

    console.print(table)
