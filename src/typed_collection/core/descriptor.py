"""
Type Descriptors.

Turns whatever a collection declares as its element type into a
`TypeDescriptor`: a small immutable record saying *what kind* of type it is
(scalar predicate, concrete class, interface, typeless, unknown) and which
Python object backs it.

Accepted declarations:

- ``typing.Any``: typeless, nothing is checked.
- A registered scalar name or alias (``"integer"``, ``"str"``, ``"numeric"``).
- A builtin class with a registered scalar (``int``, ``str``, ``dict``...).
- Any other class. Protocols and abstract base classes are interfaces.
- A dotted import path to a class (``"collections.abc.Sized"``).
"""

import builtins
import functools
import importlib
import inspect
import logging
from collections.abc import Hashable
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from typed_collection.core.predicates import (
  canonical_name,
  get_predicate,
  is_primitive,
  primitive_type_name,
  registry_version,
  scalar_class,
  scalar_name_for_class,
)
from typed_collection.enums import TypeKind

logger = logging.getLogger(__name__)

TYPELESS_NAME = "typeless"


class TypeDescriptor(BaseModel):
  """
  Resolved form of a declared element type.
  """

  model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

  kind: TypeKind = Field(description="Category of the declared type.")
  name: str = Field(description="Canonical name used in comparisons and error messages.")
  target: Optional[Any] = Field(None, description="Backing Python class, if any.")

  @property
  def is_object_type(self) -> bool:
    """True for class and interface declarations."""
    return self.kind in (TypeKind.CLASS, TypeKind.INTERFACE)

  @property
  def is_interface(self) -> bool:
    return self.kind == TypeKind.INTERFACE

  @property
  def is_typeless(self) -> bool:
    return self.kind == TypeKind.TYPELESS

  def accepts(self, value: Any) -> bool:
    """
    The type-membership predicate.

    Primitives are checked against the scalar predicate of the declared name.
    Object instances must be instances of the declared class, directly or via a
    subtype.

    Args:
        value (Any): Candidate element.

    Returns:
        bool: True if `value` may be stored under this declaration.
    """
    if self.kind == TypeKind.TYPELESS:
      return True

    if is_primitive(value):
      predicate = get_predicate(self.name) if self.kind == TypeKind.SCALAR else None
      return bool(predicate and predicate(value))

    if self.target is None:
      return False
    return is_instance(value, self.target)


def qualified_name(cls: type) -> str:
  """Returns ``module.QualName``, or the bare name for builtins."""
  module = getattr(cls, "__module__", None)
  qualname = getattr(cls, "__qualname__", repr(cls))
  if not module or module == "builtins":
    return qualname
  return f"{module}.{qualname}"


def is_interface(cls: type) -> bool:
  """
  True if `cls` acts as an interface.

  Protocols (`typing.Protocol` subclasses that are themselves protocols) and
  classes with unimplemented abstract methods qualify. A concrete `abc.ABC`
  subclass is an ordinary class.
  """
  if getattr(cls, "_is_protocol", False):
    return True
  return inspect.isabstract(cls)


def is_subtype(cls: type, target: type) -> bool:
  """
  True if `cls` is `target` or a subtype of it.

  Protocols that are not runtime-checkable (or carry data members) refuse
  `issubclass`; explicit subclassing is then detected through the MRO.
  """
  if cls is target:
    return True
  try:
    return issubclass(cls, target)
  except TypeError:
    return target in getattr(cls, "__mro__", ())


def is_instance(value: Any, target: type) -> bool:
  """`isinstance` with the same protocol fallback as `is_subtype`."""
  try:
    return isinstance(value, target)
  except TypeError:
    return is_subtype(type(value), target)


def value_type_name(value: Any) -> str:
  """
  Name of the actual type of a value, as reported in errors.

  Args:
      value (Any): Any value.

  Returns:
      str: Scalar name for primitives, qualified class name otherwise.
  """
  if is_primitive(value):
    return primitive_type_name(value)
  return qualified_name(type(value))


def resolve_type_name(dotted: str) -> Optional[type]:
  """
  Imports a class from a dotted path such as ``"collections.abc.Sized"``.

  Bare names are looked up in `builtins`.

  Args:
      dotted (str): Import path.

  Returns:
      Optional[type]: The class, or None if the path does not name a class.
  """
  parts = dotted.split(".")
  if len(parts) == 1:
    candidate = getattr(builtins, dotted, None)
    return candidate if isinstance(candidate, type) else None

  for split in range(len(parts) - 1, 0, -1):
    module_name = ".".join(parts[:split])
    try:
      obj: Any = importlib.import_module(module_name)
    except (ImportError, ValueError, TypeError):
      # Relative paths (".pkg.Cls") and empty segments are not importable
      continue

    for attr in parts[split:]:
      obj = getattr(obj, attr, None)
      if obj is None:
        break
    return obj if isinstance(obj, type) else None

  return None


def describe_type(declared: Any) -> TypeDescriptor:
  """
  Classifies a declared element type.

  Results are memoised for hashable declarations.

  Args:
      declared (Any): The value returned by a collection's `get_type()`.

  Returns:
      TypeDescriptor: The resolved descriptor.
  """
  if isinstance(declared, Hashable):
    return _describe_cached(declared, registry_version())
  return _describe(declared)


@functools.lru_cache(maxsize=512)
def _describe_cached(declared: Any, version: int) -> TypeDescriptor:
  return _describe(declared)


def _describe(declared: Any) -> TypeDescriptor:
  if declared is Any:
    return TypeDescriptor(kind=TypeKind.TYPELESS, name=TYPELESS_NAME)

  if isinstance(declared, str):
    if get_predicate(declared) is not None:
      name = canonical_name(declared)
      return TypeDescriptor(kind=TypeKind.SCALAR, name=name, target=scalar_class(name))

    resolved = resolve_type_name(declared)
    if resolved is None:
      logger.debug(f"Declared type '{declared}' does not resolve to a scalar or a class.")
      return TypeDescriptor(kind=TypeKind.UNKNOWN, name=declared)
    return _describe_class(resolved)

  if isinstance(declared, type):
    return _describe_class(declared)

  logger.debug(f"Unsupported element type declaration: {declared!r}")
  return TypeDescriptor(kind=TypeKind.UNKNOWN, name=repr(declared))


def _describe_class(cls: type) -> TypeDescriptor:
  scalar = scalar_name_for_class(cls)
  if scalar is not None:
    return TypeDescriptor(kind=TypeKind.SCALAR, name=scalar, target=cls)

  kind = TypeKind.INTERFACE if is_interface(cls) else TypeKind.CLASS
  return TypeDescriptor(kind=kind, name=qualified_name(cls), target=cls)
