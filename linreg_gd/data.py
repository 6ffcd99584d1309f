import numpy as np
import pandas as pd

from .dataset import Dataset


def load_frame(
    csv_path: str | None,
    target_col: str | None,
    n_samples=1000,
    n_features=5,
    noise_std=1.0,
    seed=42,
):
    """
    Returns (X, y, feature_names).
    csv_path given: every column except target_col is a feature, in file order.
    Otherwise: synthetic y = b + Xw + noise.
    """
    if csv_path:
        if target_col is None:
            raise ValueError("target_col is required when reading a CSV")
        df = pd.read_csv(csv_path)
        feats = df.drop(columns=[target_col])
        X = feats.to_numpy(dtype=float)
        y = df[target_col].to_numpy(dtype=float)
        return X, y, [str(c) for c in feats.columns]
    rng = np.random.default_rng(seed)
    X = rng.normal(size=(n_samples, n_features))
    true_w = rng.normal(size=(n_features,))
    true_b = rng.normal()
    y = true_b + X @ true_w + rng.normal(scale=noise_std, size=(n_samples,))
    return X, y, [f"x{i + 1}" for i in range(n_features)]


def train_test_split(X, y, test_size=0.2, seed=42):
    rng = np.random.default_rng(seed)
    n = len(X)
    idx = np.arange(n)
    rng.shuffle(idx)
    n_test = int(n * test_size)
    if n_test == 0 or n_test == n:
        raise ValueError(f"test_size={test_size} leaves an empty split for {n} rows")
    test_idx, train_idx = idx[:n_test], idx[n_test:]
    return X[train_idx], y[train_idx], X[test_idx], y[test_idx]


def load_dataset(cfg_data: dict, seed=42):
    """
    Config-driven loader: returns (train Dataset, test Dataset, feature_names).
    """
    X, y, names = load_frame(
        cfg_data.get("csv_path"),
        cfg_data.get("target"),
        cfg_data["n_samples"],
        cfg_data["n_features"],
        cfg_data["noise_std"],
        seed,
    )
    X_tr, y_tr, X_te, y_te = train_test_split(X, y, cfg_data["test_size"], seed)
    return Dataset.from_arrays(X_tr, y_tr), Dataset.from_arrays(X_te, y_te), names
