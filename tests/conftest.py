from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from src.data import download_dataset

CENTERS = {"A": 0.0, "B": 3.0, "C": 6.0}


def sensor_frame(labels, noise: float, seed: int = 0) -> pd.DataFrame:
    """Raw-layout frame: 7 metadata columns, 3 usable sensors, 2 sparse ones."""
    rng = np.random.default_rng(seed)
    n = len(labels)
    mu = np.array([CENTERS[l] for l in labels])

    kurtosis = [""] * n
    kurtosis[:4] = ["0.5", "#DIV/0!", "-1.2", "0.1"][:n]
    max_roll = [np.nan] * n
    max_roll[:2] = [1.0, 2.0][:n]

    return pd.DataFrame({
        "Unnamed: 0": np.arange(1, n + 1),
        "user_name": rng.choice(["adelmo", "carlitos", "pedro"], n),
        "raw_timestamp_part_1": 1322489729 + np.arange(n),
        "raw_timestamp_part_2": rng.integers(0, 999999, n),
        "cvtd_timestamp": "28/11/2011 14:15",
        "new_window": "no",
        "num_window": np.arange(n) // 5,
        "roll_belt": mu + rng.normal(0, noise, n),
        "pitch_belt": -mu + rng.normal(0, noise, n),
        "yaw_belt": rng.normal(0, noise, n),
        "kurtosis_roll_belt": kurtosis,
        "max_roll_belt": max_roll,
    })


@pytest.fixture()
def training_raw() -> pd.DataFrame:
    labels = list(np.repeat(["A", "B", "C"], 30))
    df = sensor_frame(labels, noise=0.5)
    df["classe"] = labels
    return df


@pytest.fixture()
def testing_raw() -> pd.DataFrame:
    labels = ["A", "B", "C", "A", "B", "C"]
    df = sensor_frame(labels, noise=0.0, seed=1)
    df["kurtosis_roll_belt"] = ""
    df["max_roll_belt"] = np.nan
    df["problem_id"] = np.arange(1, len(labels) + 1)
    return df


@pytest.fixture()
def workspace(tmp_path, monkeypatch, training_raw, testing_raw):
    """Project-relative data dirs under tmp_path, with the raw CSVs cached."""
    monkeypatch.chdir(tmp_path)
    download_dataset.save_split(training_raw, "training")
    download_dataset.save_split(testing_raw, "testing")
    return tmp_path
