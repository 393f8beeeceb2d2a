# src/ensemble/ensemble.py
from __future__ import annotations
from pathlib import Path
import json

import joblib
import pandas as pd

from src.analysis.compare_models import TRUE_COL, metric_dict, write_report
from src.data.prepare_dataset import ID_COL
from src.ensemble.majority_vote import agreement_summary, combine_predictions
from src.models.classifiers import MODEL_ORDER, split_features

DATA_DIR = Path("data/processed")
MODEL_DIR = Path("models")
PRED_DIR = Path("outputs/predictions")
OUT_DIR = Path("outputs/ensemble")

ENSEMBLE_COL = "ensemble"


# --- Utility checks ---

def ensure_inputs_ready():
    missing = []
    if not (DATA_DIR / "test.csv").exists():
        missing.append(f"Missing processed split: {DATA_DIR / 'test.csv'}")
    if not (PRED_DIR / "val_predictions.csv").exists():
        missing.append(f"Missing validation predictions: {PRED_DIR / 'val_predictions.csv'}")
    for name in MODEL_ORDER:
        p = MODEL_DIR / f"{name}.joblib"
        if not p.exists():
            missing.append(f"Missing model: {p}")
    if missing:
        raise FileNotFoundError("Cannot run ensemble – prerequisites not met:\n" + "\n".join(missing))


def load_models():
    return {name: joblib.load(MODEL_DIR / f"{name}.joblib") for name in MODEL_ORDER}


def with_ensemble(preds) -> pd.DataFrame:
    """Per-model label columns plus the majority-vote column."""
    out = pd.DataFrame({name: list(preds[name]) for name in MODEL_ORDER})
    out[ENSEMBLE_COL] = combine_predictions(preds, MODEL_ORDER)
    return out


def predict_test(models, test_df: pd.DataFrame) -> pd.DataFrame:
    X_test, _ = split_features(test_df, None, drop=(ID_COL,))
    preds = {name: models[name].predict(X_test) for name in MODEL_ORDER}
    out = with_ensemble(preds)
    if ID_COL in test_df.columns:
        out.insert(0, ID_COL, test_df[ID_COL].to_numpy())
    return out


def run():
    ensure_inputs_ready()

    val = pd.read_csv(PRED_DIR / "val_predictions.csv", dtype=str, keep_default_na=False)
    val_preds = {name: val[name] for name in MODEL_ORDER}
    val_out = with_ensemble(val_preds)
    y_val = val[TRUE_COL]

    test_df = pd.read_csv(DATA_DIR / "test.csv")
    test_out = predict_test(load_models(), test_df)

    OUT_DIR.mkdir(parents=True, exist_ok=True)
    report_path = write_report(y_val, val_out[ENSEMBLE_COL], OUT_DIR / "val_majority_report.txt")
    test_path = OUT_DIR / "test_predictions.csv"
    test_out.to_csv(test_path, index=False)

    summary = {
        "order": list(MODEL_ORDER),
        "val_metrics": metric_dict(y_val, val_out[ENSEMBLE_COL]),
        "val_agreement": agreement_summary(*(val_preds[n] for n in MODEL_ORDER)),
        "test_agreement": agreement_summary(*(test_out[n] for n in MODEL_ORDER)),
        "reports": {"val_majority": str(report_path), "test_predictions": str(test_path)},
    }
    with open(OUT_DIR / "summary.json", "w") as f:
        json.dump(summary, f, indent=2)

    print("✅ Ensemble complete.")
    print(f"Validation accuracy (majority vote): {summary['val_metrics']['accuracy']:.4f}")
    print("Reports ->", summary["reports"])
    return summary
