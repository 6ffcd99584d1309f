from common.utils import set_seed, load_config, save_pickle
from .data import load_dataset
from .model import GradientDescentRegressor
from .metrics import evaluate_all, format_metrics


def run_train(cfg_path="configs/scratch.yaml"):
    cfg = load_config(cfg_path)
    seed = cfg["random_seed"]
    set_seed(seed)
    train_ds, test_ds, names = load_dataset(cfg["data"], seed)
    print(
        f"[DATA] train={train_ds.size()} | test={test_ds.size()} | "
        f"features={train_ds.feature_count()}"
    )

    tcfg = cfg["training"]
    model = GradientDescentRegressor(train_ds.feature_count()).fit(
        train_ds,
        iterations=tcfg["iterations"],
        learning_rate=tcfg["lr"],
        verbose=tcfg["verbose"],
        log_every=tcfg["log_every"],
    )

    w = model.weights()
    print(f"[TRAIN] intercept={w[0]:.4f}")
    for name, coef in zip(names, w[1:]):
        print(f"[TRAIN] {name}={coef:.4f}")

    m_tr = evaluate_all(train_ds.labels, model.predict_batch(train_ds.features))
    m_te = evaluate_all(test_ds.labels, model.predict_batch(test_ds.features))
    print(format_metrics("TRAIN", m_tr))
    print(format_metrics("TEST", m_te))

    path = cfg["paths"]["model_path"]
    save_pickle({"model": model, "config": cfg, "feature_names": names}, path)
    print(f"Saved -> {path}")
    return model, {"train": m_tr, "test": m_te}
