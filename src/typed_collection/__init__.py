"""
typed-collection Package.

Ordered, keyed containers that enforce a declared element type at runtime and
only merge with collections whose declared types are compatible.

Usage
-----

Declaring a Collection
^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    from typed_collection import TypedCollection

    class Animal: ...
    class Dog(Animal): ...

    class Animals(TypedCollection[Animal]):
      pass

    class Dogs(TypedCollection[Dog]):
      pass

    animals = Animals([Animal()])
    animals.merge(Dogs([Dog(), Dog()]))  # Dog is a subtype of Animal
    print(animals.count())
    # 3

Scalar Declarations
^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    from typed_collection import collection_of, InvalidElementError

    Integers = collection_of("integer")
    try:
      Integers().add("5")
    except InvalidElementError as e:
      print(e)
    # Collection of type "Collection[integer]" expects elements of type "integer" but element with type "string" given
"""

from typed_collection.core.collection import TypedCollection, UntypedCollection, collection_of
from typed_collection.core.compatibility import is_compatible
from typed_collection.core.descriptor import TypeDescriptor, describe_type
from typed_collection.core.predicates import register_scalar
from typed_collection.enums import TypeKind
from typed_collection.errors import (
  CollectionError,
  IncompatibleCollectionTypesError,
  InvalidElementError,
)

__version__ = "0.1.0"

__all__ = [
  "CollectionError",
  "IncompatibleCollectionTypesError",
  "InvalidElementError",
  "TypeDescriptor",
  "TypeKind",
  "TypedCollection",
  "UntypedCollection",
  "collection_of",
  "describe_type",
  "is_compatible",
  "register_scalar",
  "__version__",
]
