# src/data/download_dataset.py
from __future__ import annotations
from pathlib import Path
import argparse

import pandas as pd

RAW_DIR = Path("data/raw")

BASE_URL = "https://d396qusza40orc.cloudfront.net/predmachlearn"
SPLITS = {
    "training": f"{BASE_URL}/pml-training.csv",
    "testing": f"{BASE_URL}/pml-testing.csv",
}

# Only the literal "NA" is a missing marker; empty fields stay "".
READ_KW = {"keep_default_na": False, "na_values": ["NA"], "low_memory": False}


def raw_path(name: str) -> Path:
    return RAW_DIR / f"pml-{name}.csv"


def fetch_split(url: str) -> pd.DataFrame:
    return pd.read_csv(url, **READ_KW)


def save_split(df: pd.DataFrame, name: str) -> Path:
    RAW_DIR.mkdir(parents=True, exist_ok=True)
    out = raw_path(name)
    df.to_csv(out, index=False, na_rep="NA")
    return out


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Download the Weight Lifting Exercise training/testing CSVs.")
    parser.add_argument("--force", action="store_true", help="Re-download even if cached files exist.")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    for name, url in SPLITS.items():
        out = raw_path(name)
        if out.exists() and not args.force:
            print(f"{name}: cached at {out} (use --force to refresh)")
            continue
        df = fetch_split(url)
        save_split(df, name)
        print(f"{name}: {len(df)} rows, {df.shape[1]} columns -> {out}")

    print("✅ Dataset downloaded to:", RAW_DIR)


if __name__ == "__main__":
    main()
