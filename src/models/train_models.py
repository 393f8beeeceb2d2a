# src/models/train_models.py
from __future__ import annotations
from pathlib import Path
import argparse
import json

import joblib
import numpy as np
import pandas as pd
from joblib import parallel_config
from sklearn.model_selection import StratifiedKFold, cross_val_score, train_test_split

from src.analysis.compare_models import TRUE_COL, metric_dict, write_report
from src.data.prepare_dataset import LABEL_COL
from src.ensemble.ensemble import ENSEMBLE_COL, predict_test, with_ensemble
from src.ensemble.majority_vote import agreement_summary
from src.models.classifiers import MODEL_ORDER, build_classifiers, split_features

DATA_DIR = Path("data/processed")
MODEL_DIR = Path("models")
PRED_DIR = Path("outputs/predictions")
OUT_DIR = Path("outputs/training")


def worker_pool(n_jobs: int):
    """Scoped joblib config: backend and n_jobs apply only inside the block.

    loky keeps its reusable executor alive afterwards for the next run.
    """
    return parallel_config(backend="loky", n_jobs=n_jobs)


def load_split(name: str) -> pd.DataFrame:
    p = DATA_DIR / f"{name}.csv"
    if not p.exists():
        raise FileNotFoundError(f"Missing {p}. Run the prepare step first.")
    return pd.read_csv(p)


def cross_validate(pipe, X, y, folds: int, seed: int) -> np.ndarray:
    cv = StratifiedKFold(n_splits=folds, shuffle=True, random_state=seed)
    return cross_val_score(pipe, X, y, cv=cv, scoring="accuracy")


def run_train(folds: int = 5, val_frac: float = 0.3, seed: int = 42, n_jobs: int = -1):
    if folds < 2:
        raise ValueError("--folds must be at least 2.")
    if not 0.0 < val_frac < 1.0:
        raise ValueError("--val-frac must be between 0 and 1.")

    train_df = load_split("train")
    test_df = load_split("test")

    X, y = split_features(train_df, LABEL_COL)
    X_tr, X_val, y_tr, y_val = train_test_split(
        X, y,
        test_size=val_frac,
        stratify=y,
        random_state=seed,
        shuffle=True,
    )

    MODEL_DIR.mkdir(parents=True, exist_ok=True)
    OUT_DIR.mkdir(parents=True, exist_ok=True)
    PRED_DIR.mkdir(parents=True, exist_ok=True)

    models = build_classifiers(seed=seed)
    results = {}
    val_preds = {}

    with worker_pool(n_jobs):
        for name in MODEL_ORDER:
            pipe = models[name]
            scores = cross_validate(pipe, X_tr, y_tr, folds, seed)
            print(f"{name}: CV accuracy {scores.mean():.4f} ± {scores.std():.4f} over {folds} folds")

            pipe.fit(X_tr, y_tr)
            val_preds[name] = pipe.predict(X_val)
            joblib.dump(pipe, MODEL_DIR / f"{name}.joblib")

            results[name] = {
                "cv_fold_accuracy": [float(s) for s in scores],
                "cv_accuracy_mean": float(scores.mean()),
                "cv_accuracy_std": float(scores.std()),
                "val": metric_dict(y_val, val_preds[name]),
            }
            write_report(y_val, val_preds[name], OUT_DIR / f"val_{name}_report.txt")

        test_out = predict_test(models, test_df)

    val_out = with_ensemble(val_preds)
    val_out.insert(0, TRUE_COL, y_val.to_numpy())
    val_out.to_csv(PRED_DIR / "val_predictions.csv", index=False)
    test_out.to_csv(PRED_DIR / "test_predictions.csv", index=False)

    ens_metrics = metric_dict(y_val, val_out[ENSEMBLE_COL])
    write_report(y_val, val_out[ENSEMBLE_COL], OUT_DIR / "val_ensemble_report.txt")

    summary = {
        "args": {"folds": folds, "val_frac": val_frac, "seed": seed, "n_jobs": n_jobs},
        "rows": {"train": int(len(X_tr)), "val": int(len(X_val)), "test": int(len(test_df))},
        "features": int(X.shape[1]),
        "models": results,
        "ensemble": {
            "order": list(MODEL_ORDER),
            "val": ens_metrics,
            "expected_out_of_sample_error": 1.0 - ens_metrics["accuracy"],
            "agreement": agreement_summary(*(val_preds[n] for n in MODEL_ORDER)),
        },
    }
    with open(OUT_DIR / "summary.json", "w") as f:
        json.dump(summary, f, indent=2)

    print("✅ Training complete.")
    print(f"Ensemble validation accuracy: {ens_metrics['accuracy']:.4f}")
    print("Saved models ->", MODEL_DIR)
    print("Predictions ->", PRED_DIR)
    return summary


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Cross-validate and fit the RF / GBM / LDA classifiers.")
    parser.add_argument("--folds", type=int, default=5, help="Number of cross-validation folds.")
    parser.add_argument("--val-frac", type=float, default=0.3, help="Fraction of training rows held out for validation.")
    parser.add_argument("--seed", type=int, default=42, help="Random seed for splits and models.")
    parser.add_argument("--n-jobs", type=int, default=-1, help="Worker processes for training (-1 = all cores).")
    return parser.parse_args(argv)


def run(argv=None):
    args = parse_args(argv)
    return run_train(folds=args.folds, val_frac=args.val_frac, seed=args.seed, n_jobs=args.n_jobs)


if __name__ == "__main__":
    run()
