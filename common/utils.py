import copy, os, pickle, random
import numpy as np
import yaml

DEFAULT_CONFIG = {
    "random_seed": 42,
    "data": {
        "csv_path": None,
        "target": None,
        "n_samples": 1000,
        "n_features": 5,
        "noise_std": 1.0,
        "test_size": 0.2,
    },
    "training": {
        "lr": 0.0005,
        "iterations": 1000,
        "verbose": False,
        "log_every": 100,
    },
    "paths": {
        "model_path": "artifacts/linreg_gd.pkl",
    },
}


def ensure_dir(path: str):
    d = os.path.dirname(path)
    if d:
        os.makedirs(d, exist_ok=True)


def save_pickle(obj, path: str):
    ensure_dir(path)
    with open(path, "wb") as f:
        pickle.dump(obj, f)


def load_pickle(path: str):
    with open(path, "rb") as f:
        return pickle.load(f)


def set_seed(seed: int = 42):
    random.seed(seed)
    np.random.seed(seed)


def load_yaml(path: str):
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_config(path: str | None = None):
    """
    YAML config merged section by section over DEFAULT_CONFIG.
    """
    cfg = copy.deepcopy(DEFAULT_CONFIG)
    if path is None:
        return cfg
    for k, v in load_yaml(path).items():
        if isinstance(v, dict) and isinstance(cfg.get(k), dict):
            cfg[k].update(v)
        else:
            cfg[k] = v
    return cfg
