import numpy as np


def _pair(y, p):
    y = np.asarray(y, dtype=float)
    p = np.asarray(p, dtype=float)
    if y.shape != p.shape:
        raise ValueError(f"y and p differ in shape: {y.shape} vs {p.shape}")
    return y, p


def mse(y, p):
    y, p = _pair(y, p)
    return float(np.mean((y - p) ** 2))


def rmse(y, p):
    return mse(y, p) ** 0.5


def mae(y, p):
    y, p = _pair(y, p)
    return float(np.mean(np.abs(y - p)))


def r2(y, p):
    y, p = _pair(y, p)
    ss_res = np.sum((y - p) ** 2)
    ss_tot = np.sum((y - y.mean()) ** 2)
    # constant target: 1.0 on an exact fit, else 0.0 (same as sklearn r2_score)
    if ss_tot == 0:
        return 1.0 if ss_res == 0 else 0.0
    return float(1 - ss_res / ss_tot)


def evaluate_all(y_true, y_pred):
    return {
        "mse": mse(y_true, y_pred),
        "rmse": rmse(y_true, y_pred),
        "mae": mae(y_true, y_pred),
        "r2": r2(y_true, y_pred),
    }


def format_metrics(tag, m):
    return f"[{tag}] RMSE={m['rmse']:.4f} | MAE={m['mae']:.4f} | R2={m['r2']:.4f}"
