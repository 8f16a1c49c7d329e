"""
Merge Compatibility.

Decides whether the contents of one collection may be merged into another by
comparing their *declared* element types. Elements themselves are not
inspected here; they are validated one by one when `merge`/`replace` insert
them.

Rules, evaluated in order for ``target.merge(source)``:

1. A typeless target accepts anything.
2. If both declarations are classes or interfaces:
   a. the target is an interface and the source implements it, or
   b. the source is an interface and the target implements it, or
   c. the source is the target class or one of its subtypes.
3. Otherwise the canonical names must be identical (scalar declarations).
"""

from typing import TYPE_CHECKING

from typed_collection.core.descriptor import TypeDescriptor, is_subtype
from typed_collection.errors import IncompatibleCollectionTypesError

if TYPE_CHECKING:
  from typed_collection.core.collection import TypedCollection


def is_compatible(target: TypeDescriptor, source: TypeDescriptor) -> bool:
  """
  Subsumption test between two declared element types.

  Args:
      target (TypeDescriptor): Declaration of the receiving collection.
      source (TypeDescriptor): Declaration of the collection being merged in.

  Returns:
      bool: True if the merge is permitted.
  """
  if target.is_typeless:
    return True

  if target.is_object_type and source.is_object_type:
    if target.is_interface and is_subtype(source.target, target.target):
      return True
    if source.is_interface and is_subtype(target.target, source.target):
      return True
    if is_subtype(source.target, target.target):
      return True

  return source.name == target.name


def ensure_compatible(target: "TypedCollection", source: "TypedCollection") -> None:
  """
  Raises if `source` may not be merged into `target`.

  Raises:
      IncompatibleCollectionTypesError: If the declared types do not subsume.
  """
  if is_compatible(target.descriptor, source.descriptor):
    return

  raise IncompatibleCollectionTypesError(
    collection_type=type(target).__name__,
    expected_type=target.descriptor.name,
    other_collection_type=type(source).__name__,
    other_type=source.descriptor.name,
  )
