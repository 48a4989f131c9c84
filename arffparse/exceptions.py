# License: BSD 3 clause
"""
Exceptions raised while reading ARFF data.

Everything that goes wrong while interpreting ARFF text is an
``ARFFParseError`` (which is also a ``ValueError``). Failing to read a file
from disk is an ``ARFFIOError`` (which is also an ``OSError``) and is kept
apart from the parse errors. Both derive from ``ARFFError``.
"""


class ARFFError(Exception):
    """Base class for all errors raised by arffparse."""


class ARFFParseError(ARFFError, ValueError):
    """
    Malformed or unsupported ARFF content.

    Parameters
    ----------
    message : str
        Description of the problem.
    line : Optional[str], default=None
        The (stripped) source line being processed, if known.
    line_number : Optional[int], default=None
        The 1-based number of that line in the input, if known.
    """

    def __init__(self, message, line=None, line_number=None):
        super(ARFFParseError, self).__init__(message)
        self.message = message
        self.line = line
        self.line_number = line_number

    def __str__(self):
        if self.line_number is not None:
            return f"line {self.line_number}: {self.message}\n{self.line}"
        if self.line is not None:
            return f"{self.message}\n{self.line}"
        return self.message


class DuplicateRelationError(ARFFParseError):
    """A second ``@relation`` statement was found."""


class AttributesBeforeRelationError(ARFFParseError):
    """A ``@relation`` statement came after one or more ``@attribute`` statements."""


class EmptyRelationNameError(ARFFParseError):
    """The ``@relation`` statement has no name."""


class MissingRelationError(ARFFParseError):
    """The input never declared a relation."""


class RelationNotSetError(ARFFParseError):
    """An ``@attribute`` statement came before the ``@relation`` statement."""


class UnsupportedAttributeTypeError(ARFFParseError):
    """The type of an attribute is neither numeric nor categorical."""

    def __init__(self, line, attribute_name, type_spec):
        super(UnsupportedAttributeTypeError, self).__init__(
            f"Unsupported type '{type_spec}' for attribute '{attribute_name}'", line=line
        )
        self.attribute_name = attribute_name
        self.type_spec = type_spec


class MalformedAttributeError(ARFFParseError):
    """An ``@attribute`` statement that cannot be split into a name and a type."""


class UnknownCategoryError(ARFFParseError):
    """A value (or code) that is not part of a categorical attribute's vocabulary."""

    def __init__(self, attribute_name, value):
        super(UnknownCategoryError, self).__init__(
            f"Unknown categorical value '{value}' for attribute '{attribute_name}'"
        )
        self.attribute_name = attribute_name
        self.value = value


class InvalidOperationError(ARFFParseError, TypeError):
    """A categorical-only operation was used on a numeric attribute."""


class FieldCountMismatchError(ARFFParseError):
    """A dense data row does not have one field per attribute."""

    def __init__(self, expected, actual, line=None):
        super(FieldCountMismatchError, self).__init__(
            f"Expected {expected} fields but found {actual}", line=line
        )
        self.expected = expected
        self.actual = actual


class MalformedNumberError(ARFFParseError):
    """A number (a numeric value, a sparse index, or a label count) could not be parsed."""

    def __init__(self, value, message=None, line=None):
        if message is None:
            message = f"Could not convert '{value}' to a number"
        super(MalformedNumberError, self).__init__(message, line=line)
        self.value = value


class MalformedSparseEntryError(ARFFParseError):
    """A sparse row entry that is not an ``index value`` pair."""


class SparseIndexError(ARFFParseError):
    """A sparse row entry refers to a column that does not exist."""

    def __init__(self, index, num_attributes, line=None):
        super(SparseIndexError, self).__init__(
            f"Sparse index {index} is out of range for {num_attributes} attributes",
            line=line,
        )
        self.index = index
        self.num_attributes = num_attributes


class InvalidLabelCountError(ARFFParseError):
    """The ``-C`` flag asks for more label columns than there are attributes."""

    def __init__(self, label_count, num_attributes):
        super(InvalidLabelCountError, self).__init__(
            f"The relation declares {label_count} label columns but only "
            f"{num_attributes} attributes"
        )
        self.label_count = label_count
        self.num_attributes = num_attributes


class ARFFIOError(ARFFError, OSError):
    """The ARFF file could not be read."""

    def __init__(self, path, reason):
        super(ARFFIOError, self).__init__(f"Could not read ARFF file '{path}': {reason}")
        self.path = path
        self.reason = reason
