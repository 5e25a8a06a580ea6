"""Streamlit entry point.

Run with ``streamlit run moneymentor/Home.py``.
"""

from __future__ import annotations

import sys
from pathlib import Path

# make the moneymentor package importable when launched by path
project_root = Path(__file__).parent.parent.resolve()
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from moneymentor.app import main

if __name__ == "__main__":
    main()
