# src/ensemble/majority_vote.py
from __future__ import annotations
from typing import Dict, List, Mapping, Sequence

from src.errors import InvalidArgument

# When all three classifiers disagree, the first one's label is kept.
TIE_BREAK_DEFAULT = 0


def _vote(a, b, c):
    if a == b or a == c:
        return a
    if b == c:
        return b
    return (a, b, c)[TIE_BREAK_DEFAULT]


def _check_lengths(labels_a, labels_b, labels_c) -> int:
    n_a, n_b, n_c = len(labels_a), len(labels_b), len(labels_c)
    if not n_a == n_b == n_c:
        raise InvalidArgument(f"Prediction lengths differ: {n_a}, {n_b}, {n_c}")
    return n_a


def combine(labels_a: Sequence, labels_b: Sequence, labels_c: Sequence) -> List:
    """Majority vote over three per-row label sequences.

    Row by row: if A agrees with B or with C, A wins; otherwise if B agrees
    with C, B wins; otherwise all three differ and A is used. Inputs are
    not modified and the result has one label per row, in input order.
    """
    _check_lengths(labels_a, labels_b, labels_c)
    return [_vote(a, b, c) for a, b, c in zip(list(labels_a), list(labels_b), list(labels_c))]


def combine_predictions(predictions: Mapping[str, Sequence], order: Sequence[str]) -> List:
    """Combine named predictions; ``order[0]`` is the tie-break classifier."""
    if len(order) != 3 or len(set(order)) != 3:
        raise InvalidArgument(f"Expected three distinct classifier names, got {list(order)}")
    unknown = [name for name in order if name not in predictions]
    if unknown:
        raise InvalidArgument(f"No predictions for {unknown}; have {sorted(predictions)}")
    return combine(*(predictions[name] for name in order))


def agreement_summary(labels_a: Sequence, labels_b: Sequence, labels_c: Sequence) -> Dict[str, int]:
    """How many rows each voting rule decided."""
    _check_lengths(labels_a, labels_b, labels_c)
    counts: Dict[str, int] = {"a_agrees": 0, "b_c_agree": 0, "fallback": 0}
    for a, b, c in zip(list(labels_a), list(labels_b), list(labels_c)):
        if a == b or a == c:
            counts["a_agrees"] += 1
        elif b == c:
            counts["b_c_agree"] += 1
        else:
            counts["fallback"] += 1
    return counts
