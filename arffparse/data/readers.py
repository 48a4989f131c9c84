# License: BSD 3 clause
"""
This module handles reading ARFF text into a ``Dataset``.

The input is processed in a single pass, one line at a time. Blank lines
and comment lines (starting with ``%``) are skipped everywhere. Until the
``@data`` statement, lines are header statements (``@relation``,
``@attribute``); afterwards every line is an instance, written either in
dense form (``1.5,red,0``) or in sparse form (``{0 1.5, 1 red}``), in
which case every column that is not mentioned is zero.

Notes about labels
------------------
Label columns are always the last columns of the resulting dataset. By
default there is a single label, the last attribute. The relation name
may contain a ``-C <N>`` flag (as in ``@relation 'yeast -C -14'``) that
changes this:

- ``N > 0`` means the last ``N`` attributes are labels.
- ``N < 0`` means the *first* ``-N`` attributes are labels. These columns
  are moved behind the features, both in the attribute list and in every
  row.

The flag is left in the stored relation name.
"""

import csv
import re
import sys
from enum import Enum
from typing import List, NamedTuple, Optional

from bs4 import UnicodeDammit

from arffparse.data.attribute import Attribute
from arffparse.data.dataset import Dataset
from arffparse.exceptions import (
    ARFFIOError,
    ARFFParseError,
    AttributesBeforeRelationError,
    DuplicateRelationError,
    EmptyRelationNameError,
    FieldCountMismatchError,
    InvalidLabelCountError,
    MalformedAttributeError,
    MalformedNumberError,
    MalformedSparseEntryError,
    MissingRelationError,
    RelationNotSetError,
    SparseIndexError,
    UnsupportedAttributeTypeError,
)
from arffparse.types import PathOrStr, Row
from arffparse.utils.constants import (
    ATTRIBUTE_KEYWORD,
    CLOSE_BRACE,
    COMMENT_MARKER,
    DATA_KEYWORD,
    DEFAULT_LABEL_COUNT,
    DIRECTIVE_MARKER,
    FILE_ENCODINGS,
    LABEL_COUNT_FLAG,
    NUMERIC_TYPE_NAMES,
    OPEN_BRACE,
    PROGRESS_INTERVAL,
    QUOTE_CHARS,
    RELATION_KEYWORD,
)
from arffparse.utils.logging import get_arffparse_logger

# registered in ``arffparse.data``
ARFF_DIALECT = "arff"

INTEGER_RE = re.compile(r"-?[0-9]+")


class ParserState(Enum):
    """Where in the file the reader currently is."""

    AWAITING_RELATION = 1
    IN_HEADER = 2
    IN_DATA = 3


class RelationName(NamedTuple):
    """A relation name along with the label layout encoded in it."""

    name: str
    label_count: int
    swap: bool
    label_flag: bool


def strip_quotes(text: str) -> str:
    """Remove one pair of matching single or double quotes around ``text``."""
    if len(text) > 1 and text[0] == text[-1] and text[0] in QUOTE_CHARS:
        return text[1:-1]
    return text


def _parse_int(text: str) -> Optional[int]:
    # ``int()`` alone would also take "+1", "1_0" and non-ASCII digits
    if not INTEGER_RE.fullmatch(text):
        return None
    return int(text)


def parse_relation_name(raw: str) -> RelationName:
    """
    Interpret the text following ``@relation``.

    Parameters
    ----------
    raw : str
        Everything after the ``@relation`` keyword.

    Returns
    -------
    relation : :class:`RelationName`
        The unquoted name, the number of label columns, whether those
        columns come first in the file (and so need to be moved to the
        end), and whether a ``-C`` flag was present at all.

    Raises
    ------
    EmptyRelationNameError
        If the name is empty, with or without quotes.
    MalformedNumberError
        If ``-C`` is not followed by an integer.
    """
    name = strip_quotes(raw.strip())
    if not name:
        raise EmptyRelationNameError("The relation must have a name")

    # look for "-C N" or "-CN"; everything else is just part of the name
    value = None
    tokens = name.split()
    for i, token in enumerate(tokens):
        if token == LABEL_COUNT_FLAG:
            if i + 1 == len(tokens):
                raise MalformedNumberError(
                    "", message=f"Missing value for {LABEL_COUNT_FLAG} in relation '{name}'"
                )
            value = _parse_int(tokens[i + 1])
            if value is None:
                raise MalformedNumberError(
                    tokens[i + 1],
                    message=f"Value '{tokens[i + 1]}' for {LABEL_COUNT_FLAG} "
                    f"in relation '{name}' is not an integer",
                )
            break
        elif token.startswith(LABEL_COUNT_FLAG):
            value = _parse_int(token[len(LABEL_COUNT_FLAG) :])
            if value is not None:
                break

    if value is None:
        return RelationName(name, DEFAULT_LABEL_COUNT, False, False)
    return RelationName(name, abs(value), value < 0, True)


class ARFFReader(object):
    """
    Reader for creating a ``Dataset`` instance from ARFF text.

    Each reader parses its text once; create a new reader (or use
    :func:`parse`) for every input.

    Parameters
    ----------
    text : str
        The full ARFF content.
    source : str, default="<string>"
        Where ``text`` came from. Only used in messages.
    quiet : bool, default=True
        Do not print "Loading..." progress messages to stderr.
    logger : logging.Logger, default=None
        A logger instance to use to log messages instead of creating
        a new one by default.
    """

    def __init__(self, text, source="<string>", quiet=True, logger=None):
        super(ARFFReader, self).__init__()
        self.text = text
        self.source = source
        self.quiet = quiet
        self.logger = logger if logger else get_arffparse_logger(__name__)
        self._progress_msg = ""

        self._state = ParserState.AWAITING_RELATION
        self._relation: Optional[RelationName] = None
        self._attributes: List[Attribute] = []
        self._rows: List[Row] = []

    @classmethod
    def for_path(cls, path: PathOrStr, **kwargs) -> "ARFFReader":
        """
        Create a reader for the ARFF file at ``path``.

        The file is read fully into memory and decoded as UTF-8, falling
        back to Windows-1252.

        Parameters
        ----------
        path : PathOrStr
            The path to the ARFF file.
        kwargs : dict, optional
            Other arguments to the ``ARFFReader``.

        Returns
        -------
        reader : :class:`ARFFReader`
            A reader for the decoded file content.

        Raises
        ------
        ARFFIOError
            If the file cannot be read.
        """
        try:
            with open(path, "rb") as arff_file:
                content = arff_file.read()
        except OSError as e:
            raise ARFFIOError(path, e.strerror or str(e)) from e

        text = UnicodeDammit(content, FILE_ENCODINGS).unicode_markup or ""
        kwargs.setdefault("source", str(path))
        return cls(text, **kwargs)

    @property
    def state(self) -> ParserState:
        return self._state

    def _print_progress(self, progress_num, end="\r"):
        """
        Print out the number of rows read so far.

        Nothing gets printed if ``self.quiet`` is ``True``.

        Parameters
        ----------
        progress_num
            Progress indicator value. Must be able to convert to string.
        end : str, default='\r'
            The string to put at the end of the line.  "\\r" should be
            used for every update except for the final one.
        """
        if not self.quiet:
            print(f"{self._progress_msg}{progress_num:>15}", end=end, file=sys.stderr)
            sys.stderr.flush()

    def _read_relation(self, rest: str) -> None:
        if self._relation is not None:
            raise DuplicateRelationError("Relation cannot have multiple @relation statements")
        if self._attributes:
            raise AttributesBeforeRelationError(
                "The @relation statement must occur before any @attribute statements"
            )

        self._relation = parse_relation_name(rest)
        self._state = ParserState.IN_HEADER
        self.logger.debug(
            f"Relation '{self._relation.name}' with {self._relation.label_count} "
            f"label column(s){' first' if self._relation.swap else ''}"
        )

    def _read_attribute(self, line: str, rest: str) -> None:
        if self._relation is None:
            raise RelationNotSetError(
                "The @relation statement must occur before any @attribute statements"
            )
        if not rest:
            raise MalformedAttributeError("The @attribute statement has no name")

        # quoted names are taken literally up to the matching quote
        if rest[0] in QUOTE_CHARS:
            end = rest.find(rest[0], 1)
            if end == -1:
                raise MalformedAttributeError(
                    f"Missing closing {rest[0]} in the name of the attribute"
                )
            name = rest[1:end]
            type_spec = rest[end + 1 :].strip()
        else:
            name, *remainder = rest.split(None, 1)
            type_spec = remainder[0].strip() if remainder else ""

        if type_spec.lower() in NUMERIC_TYPE_NAMES:
            attribute = Attribute.numeric(name)
        elif (
            len(type_spec) > 1
            and type_spec.startswith(OPEN_BRACE)
            and type_spec.endswith(CLOSE_BRACE)
        ):
            values = next(csv.reader([type_spec[1:-1]], dialect=ARFF_DIALECT), [])
            categories = [strip_quotes(value.strip()) for value in values]
            if categories == [""]:
                categories = []
            attribute = Attribute.categorical(name, categories)
        else:
            raise UnsupportedAttributeTypeError(line, name, type_spec)

        self._attributes.append(attribute)

    @staticmethod
    def _split_keyword(line: str):
        """
        Split a header line into its (lowercase) keyword and the rest.

        The keyword may be followed directly by a quote, as in
        ``@relation'my data'``. Returns ``(None, line)`` for lines that
        do not start with a known keyword.
        """
        lowered = line.lower()
        for keyword in (RELATION_KEYWORD, ATTRIBUTE_KEYWORD, DATA_KEYWORD):
            if lowered.startswith(keyword):
                rest = line[len(keyword) :]
                if not rest or rest[0].isspace() or rest[0] in QUOTE_CHARS:
                    return keyword, rest.strip()
        return None, line

    def _read_header_line(self, line: str) -> None:
        keyword, rest = self._split_keyword(line)

        if keyword == RELATION_KEYWORD:
            self._read_relation(rest)
        elif keyword == ATTRIBUTE_KEYWORD:
            self._read_attribute(line, rest)
        elif keyword == DATA_KEYWORD:
            if self._relation is None:
                raise MissingRelationError("The @data statement must follow a @relation statement")
            self._check_label_count()
            self._state = ParserState.IN_DATA
        else:
            self.logger.warning(f"Skipping unsupported header statement in {self.source}: {line}")

    def _check_label_count(self) -> None:
        if self._relation is None or not self._relation.label_flag:
            return
        if self._relation.label_count > len(self._attributes):
            raise InvalidLabelCountError(self._relation.label_count, len(self._attributes))

    def _read_sparse_row(self, line: str, row: Row) -> None:
        for entry in line[1:-1].split(","):
            entry = entry.strip()
            if not entry:
                continue
            tokens = [
                token
                for token in self.split_with_quotes(entry.replace("\t", " "), escape_char=None)
                if token
            ]
            if len(tokens) != 2:
                raise MalformedSparseEntryError(
                    f"Sparse entry '{entry}' is not an index followed by a value"
                )
            index_str, value = tokens
            index = _parse_int(index_str)
            if index is None:
                raise MalformedNumberError(
                    index_str, message=f"Sparse index '{index_str}' is not an integer"
                )
            if not 0 <= index < len(self._attributes):
                raise SparseIndexError(index, len(self._attributes))
            row[index] = self._attributes[index].parse_value(strip_quotes(value))

    def _read_dense_row(self, line: str, row: Row) -> None:
        fields = next(csv.reader([line], dialect=ARFF_DIALECT), [])
        if len(fields) != len(self._attributes):
            raise FieldCountMismatchError(len(self._attributes), len(fields))
        for i, (attribute, field) in enumerate(zip(self._attributes, fields)):
            row[i] = attribute.parse_value(strip_quotes(field.strip()))

    def _read_data_line(self, line: str) -> None:
        row = [0.0] * len(self._attributes)
        if line.startswith(OPEN_BRACE) and line.endswith(CLOSE_BRACE):
            self._read_sparse_row(line, row)
        else:
            self._read_dense_row(line, row)

        if self._relation.swap:
            label_count = self._relation.label_count
            row = row[label_count:] + row[:label_count]
        self._rows.append(row)

    @staticmethod
    def split_with_quotes(string, delimiter=" ", quote_char="'", escape_char="\\"):
        """
        A replacement for ``string.split()`` that won't split delimiters
        enclosed in quotes.

        Parameters
        ----------
        string : str
            The string with quotes to split

        delimiter : str, default=' '
            The delimiter to split on.

        quote_char : str, default="'"
            The quote character to ignore.

        escape_char : str, default='\\\\'
            The escape character.
        """
        return next(
            csv.reader([string], delimiter=delimiter, quotechar=quote_char, escapechar=escape_char)
        )

    def read(self) -> Dataset:
        """
        Parse the text given to this reader.

        Returns
        -------
        dataset : :class:`arffparse.data.dataset.Dataset`
            The relation, with the label columns last.

        Raises
        ------
        ARFFParseError
            If the text is not valid ARFF. Errors raised while processing
            a particular line have their ``line`` and ``line_number``
            attributes set.
        """
        self._progress_msg = f"Loading {self.source}..."
        self._print_progress(0)

        for line_number, raw_line in enumerate(self.text.split("\n"), start=1):
            line = raw_line.strip()
            if not line or line.startswith(COMMENT_MARKER):
                continue

            try:
                if self._state is ParserState.IN_DATA:
                    self._read_data_line(line)
                    if len(self._rows) % PROGRESS_INTERVAL == 0:
                        self._print_progress(len(self._rows))
                elif line.startswith(DIRECTIVE_MARKER):
                    self._read_header_line(line)
                else:
                    self.logger.warning(
                        f"Skipping line {line_number} of {self.source} before @data: {line}"
                    )
            except ARFFParseError as e:
                if e.line_number is None:
                    e.line = line
                    e.line_number = line_number
                raise

        self._print_progress(len(self._rows), end="\n")
        return self._assemble()

    def _assemble(self) -> Dataset:
        if self._relation is None:
            raise MissingRelationError(f"No @relation statement found in {self.source}")
        self._check_label_count()

        attributes = self._attributes
        label_count = self._relation.label_count
        if self._relation.swap:
            attributes = attributes[label_count:] + attributes[:label_count]
        elif not self._relation.label_flag:
            label_count = min(label_count, len(attributes))

        dataset = Dataset(self._relation.name, attributes, self._rows, label_count=label_count)
        self.logger.info(
            f"Read relation '{dataset.name}' from {self.source}: {len(dataset.attributes)} "
            f"attributes, {len(dataset)} rows, {dataset.label_count} label column(s)"
        )
        return dataset


def parse(text: str, **kwargs) -> Dataset:
    """
    Parse ARFF text into a ``Dataset``.

    Parameters
    ----------
    text : str
        The full ARFF content.
    kwargs : dict, optional
        Other arguments to the ``ARFFReader``.

    Returns
    -------
    dataset : :class:`arffparse.data.dataset.Dataset`
        The parsed relation.
    """
    return ARFFReader(text, **kwargs).read()


def load(path: PathOrStr, **kwargs) -> Dataset:
    """
    Read and parse the ARFF file at ``path``.

    Raises
    ------
    ARFFIOError
        If the file cannot be read.
    ARFFParseError
        If its content is not valid ARFF.
    """
    return ARFFReader.for_path(path, **kwargs).read()
