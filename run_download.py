# run_download.py
"""
Download pml-training.csv / pml-testing.csv into data/raw (pass --force to refresh).
"""
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.data.download_dataset import main  # noqa: E402

if __name__ == "__main__":
    main()
