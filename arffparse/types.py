# License: BSD 3 clause
"""Custom type aliases for readability."""
from __future__ import annotations

from pathlib import Path
from typing import List, Sequence, Union

import numpy as np
from typing_extensions import TypeAlias

# a string path or Path object
PathOrStr: TypeAlias = Union[Path, str]

# one decoded instance, one float per attribute
Row: TypeAlias = List[float]

# anything that can be turned into a row by numpy
RowLike: TypeAlias = Union[Sequence[float], np.ndarray]

# all decoded instances, shape (n_rows, n_attributes)
RowMatrix: TypeAlias = np.ndarray
