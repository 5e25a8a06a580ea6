#!/usr/bin/env python3
"""Direct launcher for MoneyMentor.

Starts Streamlit on moneymentor/Home.py from the project root.
"""

import subprocess
import sys
from pathlib import Path

project_root = Path(__file__).parent.resolve()
home = project_root / "moneymentor" / "Home.py"

if __name__ == "__main__":
    sys.exit(subprocess.run([
        sys.executable, "-m", "streamlit", "run",
        str(home),
    ]).returncode)
