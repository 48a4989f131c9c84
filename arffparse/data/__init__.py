# License: BSD 3 clause
"""Handles reading ARFF data into datasets of typed attributes and numeric rows."""

import csv

from .attribute import Attribute, AttributeType
from .dataset import Dataset
from .readers import ARFFReader, ParserState, RelationName, load, parse, parse_relation_name

# Register dialect for handling ARFF files; backslashes are not escapes
csv.register_dialect(
    "arff",
    delimiter=",",
    quotechar="'",
    doublequote=False,
    lineterminator="\n",
    skipinitialspace=True,
)


__all__ = [
    "Attribute",
    "AttributeType",
    "Dataset",
    "ARFFReader",
    "ParserState",
    "RelationName",
    "load",
    "parse",
    "parse_relation_name",
]
