from typing import NamedTuple, Tuple

import numpy as np

from .errors import ShapeError


class Observation(NamedTuple):
    features: Tuple[float, ...]
    label: float


def _feature_len(row, i):
    try:
        features, _ = row
        return len(features)
    except (TypeError, ValueError) as e:
        raise ShapeError(f"row {i} is not a (features, label) pair: {row!r}") from e


class Dataset:
    """
    Immutable table of observations: (n, F) feature matrix + n labels.
    Build it with Dataset.load(rows) or Dataset.from_arrays(X, y).
    """

    def __init__(self, X, y):
        X = np.array(X, dtype=float)
        y = np.array(y, dtype=float).ravel()
        if X.ndim != 2:
            raise ShapeError(f"X must be 2-D, got shape {X.shape}")
        if len(X) != len(y):
            raise ShapeError(f"X has {len(X)} rows but y has {len(y)} labels")
        if len(X) == 0:
            raise ShapeError("dataset needs at least one row")
        X.flags.writeable = False
        y.flags.writeable = False
        self._X = X
        self._y = y

    @classmethod
    def load(cls, rows):
        """
        rows: iterable of (features, label) pairs
        """
        rows = list(rows)
        if not rows:
            raise ShapeError("dataset needs at least one row")
        F = _feature_len(rows[0], 0)
        for i, row in enumerate(rows):
            n = _feature_len(row, i)
            if n != F:
                raise ShapeError(f"row {i} has {n} features, expected {F}")
        X = np.array([list(features) for features, _ in rows], dtype=float)
        X = X.reshape(len(rows), F)
        y = np.array([label for _, label in rows], dtype=float)
        return cls(X, y)

    @classmethod
    def from_arrays(cls, X, y):
        return cls(X, y)

    def feature_count(self) -> int:
        return self._X.shape[1]

    def size(self) -> int:
        return self._X.shape[0]

    def __len__(self):
        return self.size()

    def row(self, i: int) -> Observation:
        if not 0 <= i < self.size():
            raise IndexError(f"row {i} out of range for dataset of size {self.size()}")
        return Observation(tuple(float(v) for v in self._X[i]), float(self._y[i]))

    def __iter__(self):
        for i in range(self.size()):
            yield self.row(i)

    # read-only views for vectorized training
    @property
    def features(self) -> np.ndarray:
        return self._X.view()

    @property
    def labels(self) -> np.ndarray:
        return self._y.view()

    def __repr__(self):
        return f"Dataset(size={self.size()}, feature_count={self.feature_count()})"
