"""
Tests for merge and replace between collections.

Verifies that:
1. Same-type merges append every element (identity preserved).
2. Subtype and interface rules permit the documented directions only.
3. Incompatible merges raise before touching either collection.
4. `replace` keeps string keys and appends integer-keyed elements.
"""

import logging

import pytest

from typed_collection import (
  IncompatibleCollectionTypesError,
  InvalidElementError,
  UntypedCollection,
  collection_of,
)
from tests.zoo import (
  Animal,
  Animals,
  Car,
  Cars,
  Cat,
  Dog,
  Dogs,
  Integers,
  NamedThings,
  Numbers,
  Puppy,
  Puppies,
  Robot,
  Robots,
  Speakers,
  Strings,
)


def test_merge_same_type_appends_all():
  a = Integers([1, 2])
  b = Integers({"x": 3, "y": 4})
  old_count = a.count()

  result = a.merge(b)

  assert result is a
  assert a.count() == old_count + b.count()
  assert a.to_dict() == {0: 1, 1: 2, 2: 3, 3: 4}


def test_merge_preserves_identity():
  dogs_a = Dogs([Dog("a")])
  rex, fido = Dog("rex"), Dog("fido")
  dogs_a.merge(Dogs([rex, fido]))

  assert rex in dogs_a
  assert fido in dogs_a


def test_merge_into_itself_doubles():
  coll = Integers([1, 2])
  coll.merge(coll)
  assert coll.values() == [1, 2, 1, 2]


def test_merge_subtype_into_supertype():
  animals = Animals([Animal()])
  animals.merge(Dogs([Dog(), Dog()]))
  animals.merge(Puppies([Puppy()]))
  assert animals.count() == 4


def test_merge_supertype_into_subtype_rejected():
  """
  Scenario: Animal collection merged into a Dog collection.
  Expectation: Rejected on declared types, even though every element is a Dog.
  """
  dogs = Dogs([Dog()])
  animals = Animals([Dog()])

  with pytest.raises(IncompatibleCollectionTypesError) as exc:
    dogs.merge(animals)

  assert exc.value.collection_type == "Dogs"
  assert exc.value.expected_type == "tests.zoo.Dog"
  assert exc.value.other_collection_type == "Animals"
  assert exc.value.other_type == "tests.zoo.Animal"
  assert dogs.count() == 1
  assert animals.count() == 1


def test_merge_implementation_into_interface():
  speakers = Speakers([Cat()])
  speakers.merge(Dogs([Dog()]))
  assert speakers.count() == 2


def test_merge_interface_into_implementation():
  dogs = Dogs()
  dogs.merge(Speakers([Dog(), Puppy()]))
  assert dogs.count() == 2


def test_merge_interface_into_implementation_still_validates_elements():
  """
  Scenario: The declared types are compatible but the Speaker collection holds a Cat.
  Expectation: The Cat fails `add`; the Dog before it has already been appended.
  """
  rex = Dog("rex")
  dogs = Dogs()

  with pytest.raises(InvalidElementError):
    dogs.merge(Speakers([rex, Cat()]))

  assert dogs.values() == [rex]


def test_merge_interface_into_non_implementing_class_rejected():
  with pytest.raises(IncompatibleCollectionTypesError):
    Animals().merge(Speakers([Dog()]))


def test_merge_unrelated_types_rejected_and_unchanged():
  dogs = Dogs([Dog()])
  cars = Cars([Car()])

  with pytest.raises(IncompatibleCollectionTypesError):
    dogs.merge(cars)
  with pytest.raises(IncompatibleCollectionTypesError):
    cars.merge(dogs)

  assert dogs.count() == 1
  assert cars.count() == 1


def test_merge_protocol_implementation():
  named = NamedThings()
  named.merge(Robots([Robot()]))
  assert named.count() == 1


def test_merge_scalar_types_by_name():
  ints = Integers([1])
  ints.merge(collection_of(int)([2]))
  ints.merge(collection_of("long")([3]))
  assert ints.values() == [1, 2, 3]

  with pytest.raises(IncompatibleCollectionTypesError):
    ints.merge(Numbers([4]))
  with pytest.raises(IncompatibleCollectionTypesError):
    ints.merge(Strings(["5"]))


def test_typeless_target_accepts_any_collection():
  anything = UntypedCollection([1])
  anything.merge(Cars([Car()])).merge(Strings(["s"]))
  assert anything.count() == 3


def test_typeless_source_into_typed_target_rejected():
  with pytest.raises(IncompatibleCollectionTypesError) as exc:
    Integers().merge(UntypedCollection([1]))
  assert exc.value.other_type == "typeless"


def test_replace_keeps_string_keys_and_appends_integers():
  target = Strings({"a": "old", "b": "keep"}).add("zero")
  source = Strings({"a": "new", "c": "added"}).add("one")

  target.replace(source)

  assert target.to_dict() == {"a": "new", "b": "keep", 0: "zero", "c": "added", 1: "one"}


def test_replace_checks_compatibility():
  dogs = Dogs([Dog()])
  with pytest.raises(IncompatibleCollectionTypesError):
    dogs.replace(Animals({"x": Dog()}))
  assert dogs.keys() == [0]


def test_replace_subtype_into_supertype():
  animals = Animals({"pet": Animal()})
  rex = Dog("rex")
  animals.replace(Dogs({"pet": rex}))
  assert animals.get("pet") is rex


def test_merge_logs_transfer(caplog):
  with caplog.at_level(logging.DEBUG, logger="typed_collection.core.collection"):
    Integers([1]).merge(Integers([2, 3]))
  assert "Merged 2 element(s) from Integers into Integers" in caplog.text
