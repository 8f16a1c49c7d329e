"""
String Helpers.

Small stateless predicates and a base64 alphabet translation, kept alongside
the collections for callers that filter string-typed collections.
"""

from typing import Iterable

# URL-safe alphabet -> standard alphabet, character for character.
_URL_UNSAFE_TABLE = str.maketrans({"_": "/", "-": "+", "*": "="})


def contains(haystack: str, needle: str) -> bool:
  """True if `needle` occurs anywhere in `haystack`."""
  return needle in haystack


def contains_one_of(haystack: str, needles: Iterable[str]) -> bool:
  """
  True if at least one of `needles` occurs in `haystack`.

  Args:
      haystack (str): Text to search.
      needles (Iterable[str]): Candidate substrings, checked in order.

  Returns:
      bool: False for an empty `needles`.
  """
  return any(contains(haystack, needle) for needle in needles)


def ends_with(haystack: str, needle: str) -> bool:
  """True if `haystack` ends with `needle`. An empty needle always matches."""
  return haystack.endswith(needle)


def to_url_unsafe(base64_url: str) -> str:
  """
  Converts URL-safe base64 into the standard alphabet.

  Replaces ``_`` with ``/``, ``-`` with ``+`` and ``*`` with ``=``. Length and
  padding are not validated.
  """
  return base64_url.translate(_URL_UNSAFE_TABLE)
