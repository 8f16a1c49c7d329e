"""
Typed Collection.

An insertion-ordered container keyed by integers or strings (a list/dict
hybrid) that rejects elements not matching a declared element type.

A concrete collection declares its element type in one of three ways::

    class Dogs(TypedCollection[Dog]):          # generic argument
        pass

    class Numbers(TypedCollection):
        element_type = "numeric"               # class attribute

    class Things(TypedCollection):
        def get_type(self):                    # override
            return "collections.abc.Sized"

`typing.Any` declares a typeless collection; `UntypedCollection` is the
ready-made unchecked variant.

Two collections can be merged when their declared types are compatible; see
`typed_collection.core.compatibility`.
"""

import functools
import logging
from collections.abc import Mapping
from typing import (
  Any,
  Callable,
  Dict,
  ForwardRef,
  Generic,
  Iterable,
  Iterator,
  List,
  Optional,
  Tuple,
  TypeVar,
  Union,
  get_args,
  get_origin,
)

from typed_collection.core.compatibility import ensure_compatible
from typed_collection.core.descriptor import TypeDescriptor, describe_type, value_type_name
from typed_collection.core.predicates import is_primitive
from typed_collection.errors import InvalidElementError

logger = logging.getLogger(__name__)

T = TypeVar("T")
Key = Union[int, str]


def _strictly_equal(left: Any, right: Any) -> bool:
  """
  Identity for objects; same exact type and equal value for primitives.

  ``1``, ``True`` and ``1.0`` are pairwise distinct. Containers are compared
  element by element with the same rule, so ``[1]`` and ``[True]`` differ too.
  Dict entries must also appear in the same order.
  """
  if left is right:
    return True
  if not (is_primitive(left) and is_primitive(right)) or type(left) is not type(right):
    return False

  if isinstance(left, (list, tuple)):
    return len(left) == len(right) and all(_strictly_equal(a, b) for a, b in zip(left, right))
  if isinstance(left, dict):
    return len(left) == len(right) and all(
      _strictly_equal(ka, kb) and _strictly_equal(va, vb)
      for (ka, va), (kb, vb) in zip(left.items(), right.items())
    )
  if isinstance(left, (set, frozenset)):
    return len(left) == len(right) and all(any(_strictly_equal(a, b) for b in right) for a in left)
  return left == right


class TypedCollection(Generic[T]):
  """
  Ordered, keyed container enforcing a declared element type.

  Attributes:
      element_type (Any): Declared element type. Filled in automatically from
          the generic argument when subclassing ``TypedCollection[X]``.
  """

  element_type: Any = None

  def __init_subclass__(cls, **kwargs: Any) -> None:
    super().__init_subclass__(**kwargs)
    if "element_type" in cls.__dict__:
      return

    for base in cls.__dict__.get("__orig_bases__", ()):
      origin = get_origin(base)
      if not (isinstance(origin, type) and issubclass(origin, TypedCollection)):
        continue
      args = get_args(base)
      if not args or isinstance(args[0], TypeVar):
        continue
      declared = args[0]
      # TypedCollection["numeric"] arrives as a forward reference
      if isinstance(declared, ForwardRef):
        declared = declared.__forward_arg__
      cls.element_type = declared
      return

  def __init__(self, elements: Optional[Union[Mapping, Iterable[T]]] = None):
    """
    Creates the collection, validating every seed element.

    Args:
        elements: A mapping (keys preserved), another collection (keys
            preserved) or an iterable of values (auto-indexed).

    Raises:
        TypeError: If the class declares no element type.
        InvalidElementError: If a seed element fails the type check.
    """
    if self.get_type() is None:
      raise TypeError(
        f"{type(self).__name__} must declare an element type "
        "(generic argument, 'element_type' attribute or get_type() override)."
      )

    self._elements: Dict[Key, T] = {}
    self._next_index = 0

    if elements is None:
      return

    if isinstance(elements, (TypedCollection, Mapping)):
      for key, value in elements.items():
        self.set(key, value)
    else:
      for value in elements:
        self.add(value)

  @classmethod
  def from_pairs(cls, pairs: Iterable[Tuple[Key, T]]) -> "TypedCollection[T]":
    """Builds a collection from ``(key, value)`` pairs, in order."""
    collection = cls()
    for key, value in pairs:
      collection.set(key, value)
    return collection

  # --- Type Declaration ---

  def get_type(self) -> Any:
    """
    Returns the declared element type.

    Override this in a subclass instead of setting `element_type` when the
    declaration needs computing.
    """
    return self.element_type

  @functools.cached_property
  def descriptor(self) -> TypeDescriptor:
    """Resolved declaration. Computed once; the declaration never changes."""
    return describe_type(self.get_type())

  def is_object_type(self) -> bool:
    """True if the declared type is a class or an interface."""
    return self.descriptor.is_object_type

  def type_is_interface(self) -> bool:
    """True if the declared type is a Protocol or abstract base class."""
    return self.descriptor.is_interface

  def _check_type(self, value: Any) -> None:
    if not self.descriptor.accepts(value):
      raise InvalidElementError(type(self).__name__, self.descriptor.name, value_type_name(value))

  # --- Mutation ---

  def add(self, value: T) -> "TypedCollection[T]":
    """
    Appends `value` at the next integer index.

    Returns:
        TypedCollection: self, for chaining.

    Raises:
        InvalidElementError: If `value` fails the type check.
    """
    self._check_type(value)
    self._elements[self._next_index] = value
    self._next_index += 1
    return self

  def set(self, key: Key, value: T) -> "TypedCollection[T]":
    """
    Inserts or overwrites `value` at `key`.

    An integer key at or past the next auto index moves the index beyond it.

    Raises:
        InvalidElementError: If `value` fails the type check.
        TypeError: If `key` is neither int nor str.
    """
    self._check_type(value)
    key = self._normalize_key(key)
    self._elements[key] = value
    if isinstance(key, int) and key >= self._next_index:
      self._next_index = key + 1
    return self

  def remove(self, key: Key) -> Optional[T]:
    """Deletes `key` and returns its value, or None if the key is absent."""
    if not self.contains_key(key):
      return None
    return self._elements.pop(key)

  def remove_element(self, value: T) -> bool:
    """
    Removes the first entry strictly equal to `value`.

    Returns:
        bool: True if an entry was removed.
    """
    for key, existing in self._elements.items():
      if _strictly_equal(existing, value):
        self.remove(key)
        return True
    return False

  @staticmethod
  def _normalize_key(key: Any) -> Key:
    if isinstance(key, bool):
      return int(key)
    if isinstance(key, (int, str)):
      return key
    raise TypeError(f"Collection keys must be int or str, got {type(key).__name__}")

  # --- Queries ---

  def get(self, key: Key) -> Optional[T]:
    """Returns the value at `key`, or None."""
    if not isinstance(key, (int, str)):
      return None
    return self._elements.get(key)

  def contains_key(self, key: Key) -> bool:
    return isinstance(key, (int, str)) and key in self._elements

  def contains(self, value: T) -> bool:
    """Strict membership test (identity for objects)."""
    return any(_strictly_equal(existing, value) for existing in self._elements.values())

  def count(self) -> int:
    return len(self._elements)

  def keys(self) -> List[Key]:
    return list(self._elements.keys())

  def values(self) -> List[T]:
    return list(self._elements.values())

  def items(self) -> List[Tuple[Key, T]]:
    """Snapshot of ``(key, value)`` pairs in insertion order."""
    return list(self._elements.items())

  def to_dict(self) -> Dict[Key, T]:
    return dict(self._elements)

  def to_list(self) -> List[T]:
    return self.values()

  # --- Bulk Operations ---

  def merge(self, other: "TypedCollection") -> "TypedCollection[T]":
    """
    Appends every element of `other`, discarding its keys.

    Raises:
        IncompatibleCollectionTypesError: If the declared types are incompatible.
            Neither collection is modified.
        InvalidElementError: If an individual element fails the type check.
    """
    ensure_compatible(self, other)
    values = other.values()
    for value in values:
      self.add(value)

    logger.debug(f"Merged {len(values)} element(s) from {type(other).__name__} into {type(self).__name__}.")
    return self

  def replace(self, other: "TypedCollection") -> "TypedCollection[T]":
    """
    Copies `other` into this collection, keeping its string keys.

    String keys overwrite matching keys here; integer-keyed elements are
    appended.

    Raises:
        IncompatibleCollectionTypesError: If the declared types are incompatible.
        InvalidElementError: If an individual element fails the type check.
    """
    ensure_compatible(self, other)
    pairs = other.items()
    for key, value in pairs:
      if isinstance(key, int):
        self.add(value)
      else:
        self.set(key, value)

    logger.debug(f"Replaced {len(pairs)} element(s) from {type(other).__name__} into {type(self).__name__}.")
    return self

  # --- Functional Helpers ---

  def filter(self, predicate: Callable[[T, Key], bool]) -> "TypedCollection[T]":
    """
    Returns a new collection of the same class holding the entries for which
    ``predicate(value, key)`` is true. Keys are preserved.
    """
    kept = {key: value for key, value in self._elements.items() if predicate(value, key)}
    return type(self)(kept)

  def sort(
    self,
    comparator: Optional[Callable[[T, T], int]] = None,
    *,
    key: Optional[Callable[[T], Any]] = None,
    reverse: bool = False,
  ) -> "TypedCollection[T]":
    """
    Sorts in place and re-indexes the elements to ``0..n-1``.

    Args:
        comparator: ``cmp(a, b) -> int`` total order function.
        key: Alternative key function, as for `sorted`.
        reverse: Sort descending.

    Returns:
        TypedCollection: self.
    """
    if comparator is not None and key is not None:
      raise TypeError("sort() takes either a comparator or a key function, not both")
    if comparator is not None:
      key = functools.cmp_to_key(comparator)

    ordered = sorted(self._elements.values(), key=key, reverse=reverse)
    self._elements = dict(enumerate(ordered))
    self._next_index = len(ordered)
    return self

  def map(self, transform: Callable[[T], Any]) -> List[Any]:
    """Applies `transform` to each element. The result is a plain list."""
    return [transform(value) for value in self._elements.values()]

  def first(self) -> Optional[T]:
    return next(iter(self._elements.values()), None)

  def find_first(self, predicate: Callable[[T, Key], bool]) -> Optional[T]:
    """First element for which ``predicate(value, key)`` holds, or None."""
    return self.filter(predicate).first()

  # --- Container Protocol ---

  def __len__(self) -> int:
    return len(self._elements)

  def __iter__(self) -> Iterator[T]:
    return iter(self.values())

  def __contains__(self, value: Any) -> bool:
    return self.contains(value)

  def __getitem__(self, key: Key) -> Optional[T]:
    return self.get(key)

  def __setitem__(self, key: Optional[Key], value: T) -> None:
    if key is None:
      self.add(value)
    else:
      self.set(key, value)

  def __delitem__(self, key: Key) -> None:
    self.remove(key)

  def __repr__(self) -> str:
    return f"{type(self).__name__}<{self.descriptor.name}>({len(self)} elements)"


class UntypedCollection(TypedCollection[Any]):
  """
  Collection without any element checks.

  Merging into it always succeeds; merging *from* it into a typed collection
  does not, because the declared types differ.
  """


def collection_of(declared: Any, name: Optional[str] = None) -> type:
  """
  Creates a `TypedCollection` subclass for a declaration known only at runtime.

  Args:
      declared (Any): Element type declaration (class, scalar name, dotted path, Any).
      name (str, optional): Class name. Defaults to ``Collection[<type>]``.

  Returns:
      type: The new collection class.
  """
  if name is None:
    name = f"Collection[{describe_type(declared).name}]"
  return type(name, (TypedCollection,), {"element_type": declared})
