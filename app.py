"""InfoHub Application Entry Point.

Simple redirect to the dashboard app.

For development: python start.py
Or directly: streamlit run app.py
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

# Import and run the dashboard app
from infohub.app import main

if __name__ == "__main__":
    main()
