"""
Core Package.

Contains the collection engine:
- Scalar predicate registry
- Type descriptors and class-hierarchy helpers
- Merge compatibility rules
- The `TypedCollection` container itself
"""

from typed_collection.core.collection import TypedCollection, UntypedCollection, collection_of
from typed_collection.core.compatibility import ensure_compatible, is_compatible
from typed_collection.core.descriptor import TypeDescriptor, describe_type
from typed_collection.core.predicates import available_scalars, register_scalar

__all__ = [
  "TypeDescriptor",
  "TypedCollection",
  "UntypedCollection",
  "available_scalars",
  "collection_of",
  "describe_type",
  "ensure_compatible",
  "is_compatible",
  "register_scalar",
]
