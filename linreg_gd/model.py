import math

import numpy as np

from .errors import ShapeError


class GradientDescentRegressor:
    """
    Linear regression trained with full-batch gradient descent.

    W = [w0, w1, ..., wF], w0 is the intercept. Starts at zero; every fit()
    continues from the current weights.
    """

    def __init__(self, n_features: int):
        if n_features < 0:
            raise ValueError(f"n_features must be >= 0, got {n_features}")
        self.n_features_in_ = int(n_features)
        self.W = np.zeros(self.n_features_in_ + 1)
        self.loss_history_: list[float] = []

    def _check_features(self, features):
        x = np.asarray(features, dtype=float)
        if x.ndim != 1 or x.shape[0] != self.n_features_in_:
            raise ShapeError(
                f"expected {self.n_features_in_} features, got shape {x.shape}"
            )
        return x

    def predict(self, features) -> float:
        x = self._check_features(features)
        return float(self.W[0] + x @ self.W[1:])

    def predict_batch(self, X) -> np.ndarray:
        X = np.asarray(X, dtype=float)
        if X.ndim != 2 or X.shape[1] != self.n_features_in_:
            raise ShapeError(
                f"expected (n, {self.n_features_in_}) features, got shape {X.shape}"
            )
        return self.W[0] + X @ self.W[1:]

    def fit(self, dataset, iterations: int, learning_rate: float, verbose=False, log_every=100):
        if dataset.feature_count() != self.n_features_in_:
            raise ShapeError(
                f"dataset has {dataset.feature_count()} features, "
                f"model expects {self.n_features_in_}"
            )
        if iterations < 0:
            raise ValueError(f"iterations must be >= 0, got {iterations}")
        if not math.isfinite(learning_rate):
            raise ValueError(f"learning_rate must be finite, got {learning_rate}")
        if log_every < 1:
            raise ValueError(f"log_every must be >= 1, got {log_every}")

        X, y = dataset.features, dataset.labels
        n = len(y)
        grad = np.empty_like(self.W)
        self.loss_history_ = []
        # divergence is allowed to run into inf/nan
        with np.errstate(over="ignore", invalid="ignore"):
            for it in range(iterations):
                diff = (self.W[0] + X @ self.W[1:]) - y
                grad[0] = diff.sum()
                grad[1:] = X.T @ diff
                self.W -= learning_rate * grad

                loss = float(diff @ diff) / n
                self.loss_history_.append(loss)
                if verbose and (it % log_every == 0 or it == iterations - 1):
                    print(f"[GD] iter {it + 1}/{iterations} | MSE={loss:.6f}")
        return self

    def weights(self) -> tuple:
        return tuple(float(w) for w in self.W)

    @property
    def intercept_(self) -> float:
        return float(self.W[0])

    @property
    def coef_(self) -> np.ndarray:
        return self.W[1:].copy()

    def __repr__(self):
        return f"GradientDescentRegressor(n_features={self.n_features_in_})"
