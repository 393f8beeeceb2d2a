# src/data/prepare_dataset.py
from __future__ import annotations
from pathlib import Path
import argparse
import json

import pandas as pd

from src.data.download_dataset import READ_KW, raw_path
from src.data.prune import prune_columns, sparse_column_report

OUT_DIR = Path("data/processed")

LABEL_COL = "classe"
ID_COL = "problem_id"  # testing file carries this instead of the label

# X, user_name, three timestamp columns, new_window, num_window
LEADING_DROP = 7
MISSING_THRESHOLD = 0.9


def load_raw(name: str) -> pd.DataFrame:
    p = raw_path(name)
    if not p.exists():
        raise FileNotFoundError(f"Missing {p}. Run the download step first.")
    return pd.read_csv(p, **READ_KW)


def select_like(test_df: pd.DataFrame, train_df: pd.DataFrame) -> pd.DataFrame:
    """Restrict the testing frame to the training feature columns, same order."""
    features = [c for c in train_df.columns if c != LABEL_COL]
    missing = [c for c in features if c not in test_df.columns]
    if missing:
        raise ValueError(f"Testing data lacks training columns: {missing}")
    cols = features + ([ID_COL] if ID_COL in test_df.columns else [])
    return test_df[cols].copy()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Drop metadata and sparse columns from the raw sensor data.")
    parser.add_argument("--leading-drop", type=int, default=LEADING_DROP,
                        help="Number of leading identifier/metadata columns to remove.")
    parser.add_argument("--threshold", type=float, default=MISSING_THRESHOLD,
                        help="Drop a column when more than this fraction of rows is missing (or blank).")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    train_raw = load_raw("training")
    test_raw = load_raw("testing")
    if train_raw.columns[-1] != LABEL_COL:
        raise ValueError(f"Expected '{LABEL_COL}' as the last training column, got '{train_raw.columns[-1]}'")

    train_df = prune_columns(train_raw, args.leading_drop, args.threshold)
    test_df = select_like(test_raw, train_df)

    OUT_DIR.mkdir(parents=True, exist_ok=True)
    train_csv = OUT_DIR / "train.csv"
    test_csv = OUT_DIR / "test.csv"
    train_df.to_csv(train_csv, index=False)
    test_df.to_csv(test_csv, index=False)

    report = sparse_column_report(train_raw.iloc[:, args.leading_drop:], args.threshold)
    summary = {
        "leading_drop": list(map(str, train_raw.columns[:args.leading_drop])),
        "threshold": args.threshold,
        "rows": {"train": int(len(train_df)), "test": int(len(test_df))},
        "kept": list(map(str, train_df.columns)),
        "dropped_sparse": report.loc[report["dropped"], "column"].astype(str).tolist(),
        "label_counts": {str(k): int(v) for k, v in train_df[LABEL_COL].value_counts().sort_index().items()},
    }
    with open(OUT_DIR / "prune_summary.json", "w") as f:
        json.dump(summary, f, indent=2)

    print(f"Columns: {train_raw.shape[1]} raw -> {train_df.shape[1]} kept "
          f"({args.leading_drop} metadata, {len(summary['dropped_sparse'])} sparse dropped)")
    print("✅ Prepared splits saved:")
    print(" -", train_csv)
    print(" -", test_csv)


if __name__ == "__main__":
    main()
