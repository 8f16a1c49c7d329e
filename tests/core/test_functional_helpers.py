"""
Tests for filter, sort, map, first and find_first.
"""

import pytest

from tests.zoo import Dog, Dogs, Integers, Strings


def test_filter_keeps_keys_and_class():
  coll = Integers({"a": 1, "b": 2, 5: 3})
  odds = coll.filter(lambda value, key: value % 2 == 1)

  assert isinstance(odds, Integers)
  assert odds.to_dict() == {"a": 1, 5: 3}


def test_filter_passes_value_and_key():
  seen = []
  Strings({"k": "v"}).filter(lambda value, key: seen.append((value, key)) or True)
  assert seen == [("v", "k")]


def test_filter_does_not_mutate_source():
  coll = Integers([1, 2, 3])
  coll.filter(lambda value, key: False)
  assert coll.values() == [1, 2, 3]


def test_filtered_collection_continues_auto_index():
  filtered = Integers([1, 2, 3]).filter(lambda value, key: key != 2)
  filtered.add(4)
  assert filtered.keys() == [0, 1, 2]


def test_sort_with_comparator_in_place():
  coll = Integers({"x": 3, "y": 1, "z": 2})
  result = coll.sort(lambda a, b: a - b)

  assert result is coll
  assert coll.items() == [(0, 1), (1, 2), (2, 3)]


def test_sort_resets_auto_index():
  coll = Integers([3, 1])
  coll.set(10, 2)
  coll.sort(lambda a, b: a - b)
  coll.add(4)
  assert coll.keys() == [0, 1, 2, 3]


def test_sort_with_key_and_reverse():
  coll = Strings(["bb", "a", "ccc"])
  coll.sort(key=len, reverse=True)
  assert coll.values() == ["ccc", "bb", "a"]


def test_sort_rejects_comparator_and_key_together():
  with pytest.raises(TypeError):
    Integers([1]).sort(lambda a, b: 0, key=abs)


def test_map_returns_plain_list():
  dogs = Dogs([Dog("a"), Dog("b")])
  names = dogs.map(lambda dog: dog.name)

  assert names == ["a", "b"]
  assert type(names) is list


def test_first():
  assert Integers().first() is None

  coll = Integers([4, 5])
  assert coll.first() == 4
  coll.remove(0)
  assert coll.first() == 5


def test_find_first():
  coll = Integers([1, 8, 9, 10])
  assert coll.find_first(lambda value, key: value > 5) == 8
  assert coll.find_first(lambda value, key: value > 50) is None
