import json
import os

import pandas as pd

from common.utils import load_pickle
from .metrics import evaluate_all, format_metrics


def run_evaluate(model_path: str, csv_path: str, target_col: str, out_dir: str | None = None):
    bundle = load_pickle(model_path)
    model, names = bundle["model"], bundle["feature_names"]
    df = pd.read_csv(csv_path)
    X = df[names].to_numpy(dtype=float)
    y = df[target_col].to_numpy(dtype=float)
    pred = model.predict_batch(X)
    metrics = evaluate_all(y, pred)
    print(format_metrics("EVAL", metrics))

    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
        with open(os.path.join(out_dir, "metrics.json"), "w", encoding="utf-8") as f:
            json.dump(metrics, f, indent=2)
    return pred, metrics


def run_predict(model_path: str, features):
    model = load_pickle(model_path)["model"]
    y_hat = model.predict(features)
    print(f"[PREDICT] {y_hat:.4f}")
    return y_hat
