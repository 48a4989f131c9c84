# License: BSD 3 clause
"""
This package reads ARFF (Attribute-Relation File Format) files into
datasets of typed attributes and numeric rows, ready for numeric and
statistical processing.

>>> from arffparse import parse
>>> dataset = parse("@relation r\\n@attribute x numeric\\n@data\\n1.5\\n")
>>> dataset.rows.tolist()
[[1.5]]
"""

from .data import ARFFReader, Attribute, AttributeType, Dataset, load, parse, parse_relation_name
from .exceptions import (
    ARFFError,
    ARFFIOError,
    ARFFParseError,
    AttributesBeforeRelationError,
    DuplicateRelationError,
    EmptyRelationNameError,
    FieldCountMismatchError,
    InvalidLabelCountError,
    InvalidOperationError,
    MalformedAttributeError,
    MalformedNumberError,
    MalformedSparseEntryError,
    MissingRelationError,
    RelationNotSetError,
    SparseIndexError,
    UnknownCategoryError,
    UnsupportedAttributeTypeError,
)
from .version import __version__

__all__ = [
    "ARFFReader",
    "Attribute",
    "AttributeType",
    "Dataset",
    "load",
    "parse",
    "parse_relation_name",
    "ARFFError",
    "ARFFIOError",
    "ARFFParseError",
    "AttributesBeforeRelationError",
    "DuplicateRelationError",
    "EmptyRelationNameError",
    "FieldCountMismatchError",
    "InvalidLabelCountError",
    "InvalidOperationError",
    "MalformedAttributeError",
    "MalformedNumberError",
    "MalformedSparseEntryError",
    "MissingRelationError",
    "RelationNotSetError",
    "SparseIndexError",
    "UnknownCategoryError",
    "UnsupportedAttributeTypeError",
    "__version__",
]
