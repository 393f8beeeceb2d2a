# run_ensemble.py
"""
Re-run the majority vote from saved models and validation predictions.
"""
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.ensemble.ensemble import run  # noqa: E402

if __name__ == "__main__":
    run()
