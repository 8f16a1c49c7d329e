"""
Exceptions raised by typed collections.

Only two failure modes exist in the collection API. Every other operation is
total and signals absence through `None` or `False`.
"""


class CollectionError(Exception):
  """Base class for all typed-collection errors."""


class InvalidElementError(CollectionError, TypeError):
  """
  Raised when a value does not satisfy the declared element type.

  Attributes:
      collection_type (str): Concrete class name of the owning collection.
      expected_type (str): The declared element type.
      actual_type (str): The observed type of the rejected value.
  """

  def __init__(self, collection_type: str, expected_type: str, actual_type: str):
    self.collection_type = collection_type
    self.expected_type = expected_type
    self.actual_type = actual_type
    super().__init__(
      f'Collection of type "{collection_type}" expects elements of type "{expected_type}" '
      f'but element with type "{actual_type}" given'
    )


class IncompatibleCollectionTypesError(CollectionError, TypeError):
  """
  Raised when `merge` or `replace` is attempted between collections whose
  declared element types do not subsume each other.

  Attributes:
      collection_type (str): Concrete class name of the receiving collection.
      expected_type (str): Declared element type of the receiving collection.
      other_collection_type (str): Concrete class name of the merged collection.
      other_type (str): Declared element type of the merged collection.
  """

  def __init__(
    self,
    collection_type: str,
    expected_type: str,
    other_collection_type: str,
    other_type: str,
  ):
    self.collection_type = collection_type
    self.expected_type = expected_type
    self.other_collection_type = other_collection_type
    self.other_type = other_type
    super().__init__(
      f'The collection "{other_collection_type}" must have elements which are instances of "{expected_type}" '
      f'to be merged with collection of type "{collection_type}", but elements of type "{other_type}" given'
    )
