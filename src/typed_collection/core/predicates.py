"""
Scalar Predicate Registry.

Maps scalar type names (``"integer"``, ``"string"``, ``"numeric"``, ...) to the
predicates used when a primitive value is checked against a collection
declared with that name.

New predicates are added with the `register_scalar` decorator, exactly like
the builtin ones at the bottom of this module::

    @register_scalar("positive", "pos")
    def _is_positive(value: Any) -> bool:
        return isinstance(value, int) and value > 0
"""

import re
from typing import Any, Callable, Dict, List, Optional

Predicate = Callable[[Any], bool]

# Exact builtin types treated as primitives. Subclasses (IntEnum, custom dicts)
# are object instances and go through the class-based check instead.
_PRIMITIVE_NAMES: Dict[type, str] = {
  int: "integer",
  float: "float",
  complex: "complex",
  str: "string",
  bytes: "bytes",
  bool: "boolean",
  type(None): "null",
  list: "list",
  tuple: "tuple",
  dict: "dict",
  set: "set",
  frozenset: "frozenset",
}

_NUMERIC_RE = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")

_SCALAR_REGISTRY: Dict[str, Predicate] = {}
_ALIASES: Dict[str, str] = {}
_SCALAR_CLASSES: Dict[str, type] = {}
_CLASS_TO_SCALAR: Dict[type, str] = {}
_REGISTRY_VERSION = 0


def register_scalar(name: str, *aliases: str, python_type: Optional[type] = None):
  """
  Decorator registering a scalar predicate under a canonical name.

  Args:
      name (str): Canonical name reported in error messages.
      *aliases (str): Alternative spellings resolving to `name`.
      python_type (type, optional): Builtin class this name stands for. Declaring
          a collection with that class is equivalent to declaring it with `name`.
  """

  def wrapper(fn: Predicate) -> Predicate:
    global _REGISTRY_VERSION
    _SCALAR_REGISTRY[name] = fn
    for alias in aliases:
      _ALIASES[alias] = name
    if python_type is not None:
      _SCALAR_CLASSES[name] = python_type
      _CLASS_TO_SCALAR[python_type] = name
    _REGISTRY_VERSION += 1
    return fn

  return wrapper


def registry_version() -> int:
  """Incremented on every registration; invalidates cached type descriptors."""
  return _REGISTRY_VERSION


def canonical_name(name: str) -> str:
  """Resolves an alias (e.g. ``"int"``) to its canonical name (``"integer"``)."""
  return _ALIASES.get(name, name)


def get_predicate(name: str) -> Optional[Predicate]:
  """
  Looks up the predicate for a scalar name or alias.

  Args:
      name (str): Scalar name.

  Returns:
      Optional[Predicate]: The predicate, or None if no such scalar exists.
  """
  return _SCALAR_REGISTRY.get(canonical_name(name))


def available_scalars() -> List[str]:
  """Returns the canonical names of all registered scalars."""
  return list(_SCALAR_REGISTRY.keys())


def scalar_name_for_class(cls: Any) -> Optional[str]:
  """Maps a builtin class (``int``, ``str``...) to its canonical scalar name."""
  try:
    return _CLASS_TO_SCALAR.get(cls)
  except TypeError:
    # Unhashable declaration, cannot be a builtin class
    return None


def scalar_class(name: str) -> Optional[type]:
  """Returns the builtin class registered for a scalar name, if any."""
  return _SCALAR_CLASSES.get(canonical_name(name))


def is_primitive(value: Any) -> bool:
  """True if the exact type of `value` is a builtin scalar or container type."""
  return type(value) in _PRIMITIVE_NAMES


def primitive_type_name(value: Any) -> str:
  """
  Name reported for a primitive value in error messages.

  Args:
      value (Any): A value for which `is_primitive` holds.

  Returns:
      str: e.g. ``"integer"``, ``"string"``, ``"null"``.
  """
  return _PRIMITIVE_NAMES.get(type(value), type(value).__name__)


# --- Builtin Scalars ---


@register_scalar("integer", "int", "long", python_type=int)
def _is_integer(value: Any) -> bool:
  return isinstance(value, int) and not isinstance(value, bool)


@register_scalar("float", "double", "real", python_type=float)
def _is_float(value: Any) -> bool:
  return isinstance(value, float)


@register_scalar("complex", python_type=complex)
def _is_complex(value: Any) -> bool:
  return isinstance(value, complex)


@register_scalar("string", "str", python_type=str)
def _is_string(value: Any) -> bool:
  return isinstance(value, str)


@register_scalar("bytes", python_type=bytes)
def _is_bytes(value: Any) -> bool:
  return isinstance(value, bytes)


@register_scalar("boolean", "bool", python_type=bool)
def _is_boolean(value: Any) -> bool:
  return isinstance(value, bool)


@register_scalar("null", "none", python_type=type(None))
def _is_null(value: Any) -> bool:
  return value is None


@register_scalar("list", python_type=list)
def _is_list(value: Any) -> bool:
  return isinstance(value, list)


@register_scalar("tuple", python_type=tuple)
def _is_tuple(value: Any) -> bool:
  return isinstance(value, tuple)


@register_scalar("dict", "mapping", python_type=dict)
def _is_dict(value: Any) -> bool:
  return isinstance(value, dict)


@register_scalar("set", python_type=set)
def _is_set(value: Any) -> bool:
  return isinstance(value, (set, frozenset))


@register_scalar("array")
def _is_array(value: Any) -> bool:
  """Ordered or keyed container: list, tuple or dict."""
  return isinstance(value, (list, tuple, dict))


@register_scalar("numeric", "number")
def _is_numeric(value: Any) -> bool:
  """Integers, floats and strings holding a decimal number. Booleans are excluded."""
  if isinstance(value, bool):
    return False
  if isinstance(value, (int, float)):
    return True
  if isinstance(value, str):
    return _NUMERIC_RE.match(value) is not None
  return False


@register_scalar("scalar")
def _is_scalar(value: Any) -> bool:
  return isinstance(value, (int, float, str, bool))


@register_scalar("iterable")
def _is_iterable(value: Any) -> bool:
  try:
    iter(value)
  except TypeError:
    return False
  return True


@register_scalar("countable", "sized")
def _is_countable(value: Any) -> bool:
  return hasattr(value, "__len__")
