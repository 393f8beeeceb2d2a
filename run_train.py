# run_train.py
"""
Cross-validate and fit RF, GBM and LDA, then majority-vote their predictions.
"""
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.models.train_models import run  # noqa: E402

if __name__ == "__main__":
    run()
