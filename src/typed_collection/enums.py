"""
Enumerations for typed-collection.

This module defines the classification used to describe the declared element
type of a collection.
"""

from enum import Enum


class TypeKind(str, Enum):
  """
  Category of a declared element type.

  Drives both the per-element membership test and the merge compatibility
  rules in `typed_collection.core.compatibility`.
  """

  SCALAR = "scalar"  # Named predicate (integer, string, numeric, ...)
  CLASS = "class"  # Concrete class
  INTERFACE = "interface"  # Protocol or abstract base class
  TYPELESS = "typeless"  # typing.Any, no checks at all
  UNKNOWN = "unknown"  # Unresolvable name, nothing is a member
