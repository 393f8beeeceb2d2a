# src/models/classifiers.py
from __future__ import annotations
from typing import Dict, Tuple

import pandas as pd
from sklearn.discriminant_analysis import LinearDiscriminantAnalysis
from sklearn.ensemble import GradientBoostingClassifier, RandomForestClassifier
from sklearn.impute import SimpleImputer
from sklearn.pipeline import Pipeline

# Voting order: the first model breaks three-way ties.
MODEL_ORDER = ("rf", "gbm", "lda")


def build_classifiers(seed: int = 42) -> Dict[str, Pipeline]:
    def wrap(clf) -> Pipeline:
        return Pipeline([
            ("impute", SimpleImputer(strategy="median")),
            ("clf", clf),
        ])

    return {
        "rf": wrap(RandomForestClassifier(n_estimators=200, random_state=seed)),
        "gbm": wrap(GradientBoostingClassifier(n_estimators=150, max_depth=3, random_state=seed)),
        "lda": wrap(LinearDiscriminantAnalysis()),
    }


def split_features(df: pd.DataFrame, label_col: str | None, drop=()) -> Tuple[pd.DataFrame, pd.Series | None]:
    """Numeric feature matrix and (optional) label vector.

    Text-typed feature columns are coerced to numbers; anything unparseable
    becomes NaN and is imputed inside the pipelines.
    """
    excluded = set(drop) | ({label_col} if label_col else set())
    X = df[[c for c in df.columns if c not in excluded]]
    X = X.apply(pd.to_numeric, errors="coerce")
    y = df[label_col].astype(str) if label_col else None
    return X, y
