# inspect_results.py
"""
Print a nice summary of how each model scored (CV and validation accuracy)
and the ensemble's expected out-of-sample error.
"""

import json
from pathlib import Path

SUMMARY_PATH = Path("outputs/training/summary.json")

def main():
    if not SUMMARY_PATH.exists():
        raise FileNotFoundError(f"Summary file not found at {SUMMARY_PATH}. "
                                "Run run_train.py first.")

    with open(SUMMARY_PATH, "r") as f:
        summary = json.load(f)

    print(f"\n{'Model':12s}  {'CV acc':>7s}  {'CV std':>7s}  {'Val acc':>7s}  {'Val F1':>7s}")
    print("-" * 48)
    for name, m in summary["models"].items():
        print(f"{name:12s}  {m['cv_accuracy_mean']:7.4f}  {m['cv_accuracy_std']:7.4f}  "
              f"{m['val']['accuracy']:7.4f}  {m['val']['f1']:7.4f}")
    ens = summary["ensemble"]
    print(f"{'ensemble':12s}  {'':>7s}  {'':>7s}  {ens['val']['accuracy']:7.4f}  {ens['val']['f1']:7.4f}")
    print(f"\nExpected out-of-sample error: {ens['expected_out_of_sample_error']:.4f}")
    print("Vote agreement:", ens["agreement"])

if __name__ == "__main__":
    main()
