# License: BSD 3 clause
"""Constants describing the subset of the ARFF format that we read."""

# lines starting with this are ignored everywhere
COMMENT_MARKER = "%"

# header directives; matched case-insensitively
DIRECTIVE_MARKER = "@"
RELATION_KEYWORD = "@relation"
ATTRIBUTE_KEYWORD = "@attribute"
DATA_KEYWORD = "@data"

# quote characters allowed around relation and attribute names
QUOTE_CHARS = ("'", '"')

# attribute type names that all mean "numeric"
NUMERIC_TYPE_NAMES = frozenset(["numeric", "real", "integer"])

# delimiters around categorical vocabularies and sparse rows
OPEN_BRACE = "{"
CLOSE_BRACE = "}"

# flag inside the relation name that sets the number (and position)
# of the label columns, e.g. ``@relation 'scene -C -6'``
LABEL_COUNT_FLAG = "-C"
DEFAULT_LABEL_COUNT = 1

# encodings tried, in order, when decoding a file read from disk
FILE_ENCODINGS = ["utf-8", "windows-1252"]

# how often (in rows) progress is printed when not quiet
PROGRESS_INTERVAL = 100
