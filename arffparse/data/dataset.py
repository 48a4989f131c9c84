# License: BSD 3 clause
"""Class holding a parsed ARFF relation."""

from typing import Iterable, Iterator, Optional, Tuple

import numpy as np

from arffparse.data.attribute import Attribute
from arffparse.types import RowLike, RowMatrix


class Dataset(object):
    """
    Encapsulate the attributes, rows, and label layout of an ARFF relation.

    Parameters
    ----------
    name : str
        The name of the relation.
    attributes : Iterable[:class:`arffparse.data.attribute.Attribute`]
        The attributes (columns), features first and labels last.
    rows : Optional[Union[List[List[float]], numpy.ndarray]], default=None
        The instances, one float per attribute. Categorical values are
        stored as their codes. ``None`` means there are no instances.
    label_count : int, default=1
        How many of the trailing attributes are labels.

    Notes
    -----
    The row matrix is stored as a read-only ``float64`` array of shape
    ``(len(rows), len(attributes))``.
    """

    def __init__(
        self,
        name: str,
        attributes: Iterable[Attribute],
        rows: Optional[RowMatrix] = None,
        label_count: int = 1,
    ):
        """Initialize a Dataset instance."""
        super(Dataset, self).__init__()
        self.name = name
        self.attributes: Tuple[Attribute, ...] = tuple(attributes)
        num_attributes = len(self.attributes)

        if rows is None or len(rows) == 0:
            matrix = np.empty((0, num_attributes), dtype=np.float64)
        else:
            matrix = np.array(rows, dtype=np.float64)
        if matrix.ndim != 2 or matrix.shape[1] != num_attributes:
            raise ValueError(
                f"Every row must have {num_attributes} values, but the rows "
                f"have shape {matrix.shape}"
            )
        matrix.setflags(write=False)
        self.rows: RowMatrix = matrix

        if not 0 <= label_count <= num_attributes:
            raise ValueError(
                f"Number of labels ({label_count}) must be between 0 and the "
                f"number of attributes ({num_attributes})"
            )
        self.label_count = label_count

    @property
    def num_features(self) -> int:
        """Number of attributes that are not labels."""
        return len(self.attributes) - self.label_count

    @property
    def feature_attributes(self) -> Tuple[Attribute, ...]:
        return self.attributes[: self.num_features]

    @property
    def label_attributes(self) -> Tuple[Attribute, ...]:
        return self.attributes[self.num_features :]

    @property
    def features(self) -> RowMatrix:
        """The feature columns of :attr:`rows`."""
        return self.rows[:, : self.num_features]

    @property
    def labels(self) -> RowMatrix:
        """The label columns of :attr:`rows`."""
        return self.rows[:, self.num_features :]

    def obscure_labels(self, row: RowLike) -> np.ndarray:
        """
        Return a copy of ``row`` with all label values replaced by NaN.

        This is handy for asking a model to predict the labels of an
        instance without giving them away.

        Parameters
        ----------
        row : Union[Sequence[float], numpy.ndarray]
            An instance with one value per attribute.

        Returns
        -------
        obscured : numpy.ndarray
            A new ``float64`` array; ``row`` itself is not changed.

        Raises
        ------
        ValueError
            If ``row`` does not have one value per attribute.
        """
        obscured = np.array(row, dtype=np.float64)
        if obscured.shape != (len(self.attributes),):
            raise ValueError(
                f"Expected a row with {len(self.attributes)} values, got shape {obscured.shape}"
            )
        obscured[self.num_features :] = np.nan
        return obscured

    def __len__(self) -> int:
        """Return the number of instances."""
        return self.rows.shape[0]

    def __iter__(self) -> Iterator[np.ndarray]:
        """Iterate through the instances."""
        return iter(self.rows)

    def __eq__(self, other):
        """
        Check whether two datasets are the same.

        Notes
        -----
        We consider row values to be equal if any differences are in the
        sixth decimal place or higher.
        """
        if not isinstance(other, Dataset):
            return NotImplemented
        return (
            self.name == other.name
            and self.attributes == other.attributes
            and self.label_count == other.label_count
            and self.rows.shape == other.rows.shape
            and np.allclose(self.rows, other.rows, rtol=1e-6)
        )

    def __repr__(self):
        return (
            f"Dataset(name={self.name!r}, attributes={len(self.attributes)}, "
            f"rows={len(self)}, label_count={self.label_count})"
        )
