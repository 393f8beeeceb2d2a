# src/analysis/compare_models.py
from __future__ import annotations
from pathlib import Path
import json

import matplotlib.pyplot as plt
import pandas as pd

from sklearn.metrics import (
    accuracy_score, precision_recall_fscore_support,
    classification_report, confusion_matrix
)

PRED_DIR = Path("outputs/predictions")
TRAIN_SUMMARY = Path("outputs/training/summary.json")
REPORT_DIR = Path("reports")
PLOT_DIR = Path("outputs/plots")

TRUE_COL = "y_true"


def metric_dict(y_true, y_pred):
    acc = accuracy_score(y_true, y_pred)
    p, r, f1, _ = precision_recall_fscore_support(
        y_true, y_pred, average="macro", zero_division=0
    )
    return {
        "accuracy": float(acc),
        "precision": float(p),
        "recall": float(r),
        "f1": float(f1),
    }


def write_report(y_true, y_pred, out_txt: Path) -> Path:
    labels = sorted(set(map(str, y_true)) | set(map(str, y_pred)))
    y_true = [str(v) for v in y_true]
    y_pred = [str(v) for v in y_pred]
    rep = classification_report(y_true, y_pred, labels=labels, digits=4, zero_division=0)
    cm = confusion_matrix(y_true, y_pred, labels=labels)
    out_txt.parent.mkdir(parents=True, exist_ok=True)
    with open(out_txt, "w") as f:
        f.write(rep)    #type: ignore
        f.write(f"\nConfusion Matrix (rows=true, cols=pred, labels={labels}):\n")
        f.write(str(cm))
    return out_txt


def load_val_predictions() -> pd.DataFrame:
    p = PRED_DIR / "val_predictions.csv"
    if not p.exists():
        raise FileNotFoundError(f"Missing {p}. Run the training step first.")
    return pd.read_csv(p, dtype=str, keep_default_na=False)


def run():
    df = load_val_predictions()
    plt.switch_backend("Agg")
    models = [c for c in df.columns if c != TRUE_COL]
    y_true = df[TRUE_COL]

    results = {}
    for name in models:
        results[name] = metric_dict(y_true, df[name])
        write_report(y_true, df[name], REPORT_DIR / f"val_{name}_report.txt")

    cv = {}
    if TRAIN_SUMMARY.exists():
        with open(TRAIN_SUMMARY) as f:
            cv = json.load(f).get("models", {})
    for name, m in results.items():
        if name in cv:
            m["cv_accuracy_mean"] = cv[name]["cv_accuracy_mean"]

    REPORT_DIR.mkdir(parents=True, exist_ok=True)
    json_path = REPORT_DIR / "model_comparison_summary.json"
    with open(json_path, "w") as f:
        json.dump(results, f, indent=2)

    PLOT_DIR.mkdir(parents=True, exist_ok=True)
    plt.figure()
    plt.bar(models, [results[m]["accuracy"] for m in models])
    plt.ylabel("Accuracy")
    plt.title("Model comparison (validation split)")
    plt.tight_layout()
    plot_path = PLOT_DIR / "val_accuracy_comparison.png"
    plt.savefig(plot_path)
    plt.close()

    md_lines = ["# Model Comparison (Validation Split)\n",
                "| Model | Accuracy | Precision | Recall | F1 | CV accuracy |",
                "|-------|----------|-----------|--------|----|-------------|"]
    for name in models:
        m = results[name]
        cv_acc = f"{m['cv_accuracy_mean']:.4f}" if "cv_accuracy_mean" in m else "-"
        md_lines.append(
            f"| {name} | {m['accuracy']:.4f} | {m['precision']:.4f} | {m['recall']:.4f} | {m['f1']:.4f} | {cv_acc} |"
        )
    md_path = REPORT_DIR / "model_comparison_val.md"
    with open(md_path, "w") as f:
        f.write("\n".join(md_lines))

    print("✅ Comparison complete.")
    print("JSON summary ->", json_path)
    print("Markdown table ->", md_path)
    print("Accuracy bar plot ->", plot_path)
    return results
