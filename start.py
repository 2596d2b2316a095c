"""
InfoHub Startup Script.

Run with: python start.py
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from infohub.launcher import main

if __name__ == "__main__":
    main()
