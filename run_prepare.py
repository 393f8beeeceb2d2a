# run_prepare.py
"""
Drop metadata and sparse columns, write data/processed/{train,test}.csv.
"""
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.data.prepare_dataset import main  # noqa: E402

if __name__ == "__main__":
    main()
