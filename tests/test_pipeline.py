import json

import numpy as np
import pandas as pd
import pytest
import yaml

from common.utils import DEFAULT_CONFIG, load_config, load_pickle
from linreg_gd.data import load_frame, load_dataset, train_test_split
from linreg_gd.evaluate import run_evaluate, run_predict
from linreg_gd.train import run_train


def _write_config(tmp_path, **sections):
    path = tmp_path / "cfg.yaml"
    path.write_text(yaml.safe_dump(sections), encoding="utf-8")
    return str(path)


def test_load_config_merges_defaults(tmp_path):
    cfg = load_config(_write_config(tmp_path, training={"lr": 0.1}))
    assert cfg["training"]["lr"] == 0.1
    assert cfg["training"]["iterations"] == DEFAULT_CONFIG["training"]["iterations"]
    assert cfg["data"] == DEFAULT_CONFIG["data"]
    # defaults are not mutated
    assert DEFAULT_CONFIG["training"]["lr"] == 0.0005


def test_load_config_without_path():
    assert load_config() == DEFAULT_CONFIG


def test_synthetic_frame_is_seeded():
    X1, y1, names = load_frame(None, None, n_samples=50, n_features=4, seed=3)
    X2, y2, _ = load_frame(None, None, n_samples=50, n_features=4, seed=3)
    assert X1.shape == (50, 4)
    assert names == ["x1", "x2", "x3", "x4"]
    np.testing.assert_array_equal(X1, X2)
    np.testing.assert_array_equal(y1, y2)


def test_csv_frame(tmp_path):
    csv = tmp_path / "d.csv"
    pd.DataFrame({"a": [1, 2], "price": [3, 4], "b": [5, 6]}).to_csv(csv, index=False)
    X, y, names = load_frame(str(csv), "price")
    assert names == ["a", "b"]
    np.testing.assert_array_equal(X, [[1.0, 5.0], [2.0, 6.0]])
    np.testing.assert_array_equal(y, [3.0, 4.0])


def test_csv_requires_target(tmp_path):
    with pytest.raises(ValueError):
        load_frame(str(tmp_path / "d.csv"), None)


def test_split_sizes():
    X = np.arange(20.0).reshape(10, 2)
    y = np.arange(10.0)
    X_tr, y_tr, X_te, y_te = train_test_split(X, y, test_size=0.3, seed=0)
    assert len(X_tr) == 7 and len(X_te) == 3
    assert sorted(np.concatenate([y_tr, y_te])) == list(y)


@pytest.mark.parametrize("test_size", [0.0, 1.0])
def test_split_rejects_empty_partition(test_size):
    X = np.zeros((10, 1))
    with pytest.raises(ValueError):
        train_test_split(X, np.zeros(10), test_size=test_size)


def test_load_dataset_from_config():
    cfg = dict(DEFAULT_CONFIG["data"], n_samples=100, n_features=2)
    train_ds, test_ds, names = load_dataset(cfg, seed=0)
    assert train_ds.size() == 80 and test_ds.size() == 20
    assert train_ds.feature_count() == 2
    assert names == ["x1", "x2"]


def test_train_evaluate_predict(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    model_path = str(tmp_path / "out" / "model.pkl")
    cfg_path = _write_config(
        tmp_path,
        random_seed=0,
        data={"n_samples": 200, "n_features": 3, "noise_std": 0.1},
        training={"lr": 0.001, "iterations": 1000},
        paths={"model_path": model_path},
    )

    model, metrics = run_train(cfg_path)
    out = capsys.readouterr().out
    assert "[DATA] train=160 | test=40 | features=3" in out
    assert "[TEST] RMSE=" in out
    assert metrics["test"]["rmse"] < 0.2

    bundle = load_pickle(model_path)
    assert bundle["feature_names"] == ["x1", "x2", "x3"]
    assert bundle["model"].weights() == model.weights()
    assert bundle["config"]["training"]["iterations"] == 1000

    X, y, names = load_frame(None, None, n_samples=200, n_features=3, noise_std=0.1, seed=0)
    df = pd.DataFrame(X, columns=names)
    df["y"] = y
    csv = tmp_path / "eval.csv"
    df.to_csv(csv, index=False)

    pred, m = run_evaluate(model_path, str(csv), "y", out_dir=str(tmp_path / "runs"))
    assert pred.shape == (200,)
    assert m["rmse"] < 0.2
    saved = json.loads((tmp_path / "runs" / "metrics.json").read_text(encoding="utf-8"))
    assert saved == pytest.approx(m)

    y_hat = run_predict(model_path, list(X[0]))
    assert y_hat == pytest.approx(model.predict(X[0]))
    assert "[PREDICT]" in capsys.readouterr().out


def test_train_rejects_zero_log_every(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    cfg_path = _write_config(
        tmp_path,
        data={"n_samples": 50, "n_features": 2},
        training={"verbose": True, "log_every": 0},
        paths={"model_path": str(tmp_path / "m.pkl")},
    )
    with pytest.raises(ValueError):
        run_train(cfg_path)
