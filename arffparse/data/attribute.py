# License: BSD 3 clause
"""
Classes describing the columns of an ARFF relation.

Every column is an ``Attribute`` that is either numeric or categorical.
Categorical attributes carry a fixed, ordered vocabulary and values are
stored in the data matrix as the (zero-based) position of the value in
that vocabulary.
"""

import re
from enum import Enum
from typing import Dict, Iterable, Tuple

from arffparse.exceptions import (
    InvalidOperationError,
    MalformedAttributeError,
    MalformedNumberError,
    UnknownCategoryError,
)

# plain decimal or scientific notation; no "inf", "nan" or digit separators
NUMBER_RE = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")


class AttributeType(Enum):
    """The kind of values an attribute holds."""

    NUMERIC = "numeric"
    CATEGORICAL = "categorical"


class Attribute(object):
    """
    Name, type, and (for categorical attributes) vocabulary of one column.

    Instances should be created with :meth:`numeric` or :meth:`categorical`
    and are not modified afterwards.

    Parameters
    ----------
    name : str
        The name of the attribute.
    kind : :class:`AttributeType`
        Whether the attribute is numeric or categorical.
    categories : Iterable[str], default=()
        The possible values of a categorical attribute, in file order.
        Must be empty for numeric attributes.

    Notes
    -----
    Duplicate categories are kept as they are. The code of a duplicated
    value is the position of its first occurrence, so later copies can
    never be produced by :meth:`encode`.
    """

    def __init__(self, name: str, kind: AttributeType, categories: Iterable[str] = ()):
        """Initialize an Attribute instance."""
        super(Attribute, self).__init__()
        self._name = name
        self._kind = kind
        self._categories: Tuple[str, ...] = tuple(categories)

        if kind is AttributeType.NUMERIC and self._categories:
            raise ValueError(f"Numeric attribute '{name}' cannot have categories.")
        if kind is AttributeType.CATEGORICAL and not self._categories:
            raise MalformedAttributeError(
                f"Categorical attribute '{name}' must have at least one category."
            )

        # first occurrence wins for duplicated categories
        self._category_index: Dict[str, int] = {}
        for index, category in enumerate(self._categories):
            self._category_index.setdefault(category, index)

    @classmethod
    def numeric(cls, name: str) -> "Attribute":
        """Create a numeric attribute called ``name``."""
        return cls(name, AttributeType.NUMERIC)

    @classmethod
    def categorical(cls, name: str, categories: Iterable[str]) -> "Attribute":
        """
        Create a categorical attribute.

        Parameters
        ----------
        name : str
            The name of the attribute.
        categories : Iterable[str]
            The possible values, in the order that defines their codes.

        Returns
        -------
        attribute : :class:`Attribute`
            The new attribute.

        Raises
        ------
        MalformedAttributeError
            If ``categories`` is empty.
        """
        return cls(name, AttributeType.CATEGORICAL, categories)

    @property
    def name(self) -> str:
        return self._name

    @property
    def kind(self) -> AttributeType:
        return self._kind

    @property
    def categories(self) -> Tuple[str, ...]:
        return self._categories

    @property
    def is_numeric(self) -> bool:
        return self._kind is AttributeType.NUMERIC

    @property
    def is_categorical(self) -> bool:
        return self._kind is AttributeType.CATEGORICAL

    def _check_categorical(self, operation: str) -> None:
        if not self.is_categorical:
            raise InvalidOperationError(
                f"Cannot {operation} because '{self._name}' is not a categorical attribute"
            )

    def encode(self, category: str) -> float:
        """
        Return the numeric code used to store ``category``.

        Parameters
        ----------
        category : str
            A value from this attribute's vocabulary.

        Returns
        -------
        code : float
            The zero-based position of ``category`` in :attr:`categories`.

        Raises
        ------
        InvalidOperationError
            If this is a numeric attribute.
        UnknownCategoryError
            If ``category`` is not in the vocabulary.
        """
        self._check_categorical("encode a category")
        try:
            return float(self._category_index[category])
        except KeyError:
            raise UnknownCategoryError(self._name, category) from None

    def decode(self, code: float) -> str:
        """
        Return the category stored as ``code``; the inverse of :meth:`encode`.

        Raises
        ------
        InvalidOperationError
            If this is a numeric attribute.
        UnknownCategoryError
            If ``code`` is not the code of any category.
        """
        self._check_categorical("decode a category")
        try:
            index = int(code)
        except (TypeError, ValueError, OverflowError):
            raise UnknownCategoryError(self._name, code) from None
        if index != code or not 0 <= index < len(self._categories):
            raise UnknownCategoryError(self._name, code)
        return self._categories[index]

    def parse_value(self, text: str) -> float:
        """
        Convert one field of a data row to its stored float value.

        Numeric attributes parse ``text`` as a float; categorical
        attributes encode it.

        Raises
        ------
        MalformedNumberError
            If this is a numeric attribute and ``text`` is not a number.
        UnknownCategoryError
            If this is a categorical attribute and ``text`` is not in
            its vocabulary.
        """
        if self.is_categorical:
            return self.encode(text)
        if not NUMBER_RE.fullmatch(text):
            raise MalformedNumberError(
                text,
                message=f"Could not convert '{text}' to a number for attribute '{self._name}'",
            )
        return float(text)

    def __eq__(self, other):
        if not isinstance(other, Attribute):
            return NotImplemented
        return (
            self._name == other._name
            and self._kind is other._kind
            and self._categories == other._categories
        )

    def __hash__(self):
        return hash((self._name, self._kind, self._categories))

    def __repr__(self):
        if self.is_categorical:
            return f"Attribute.categorical({self._name!r}, {list(self._categories)!r})"
        return f"Attribute.numeric({self._name!r})"
