"""
InfoHub Startup.

Starts the Streamlit dashboard as a child process and stops it cleanly
on Ctrl+C or SIGTERM.
Run with: python start.py  (or the `infohub` console script)
"""

import signal
import subprocess
import sys
import time
from pathlib import Path
from typing import Optional

from infohub.config.settings import get_settings

PROJECT_ROOT = Path(__file__).parent.parent
APP_PATH = Path(__file__).parent / "app.py"
_process = None  # Running Streamlit child, if any


def build_command(port: int) -> list:
    """Command line that serves the dashboard on the given port."""
    return [
        sys.executable, "-m", "streamlit", "run",
        str(APP_PATH),
        "--server.port", str(port),
        "--server.headless", "true",
    ]


def start_frontend(port: Optional[int] = None) -> subprocess.Popen:
    """Start Streamlit frontend, or return the one already running."""
    global _process
    if _process is not None and _process.poll() is None:
        return _process

    port = port or get_settings().FRONTEND_PORT
    print(f"[FRONTEND] Starting on http://localhost:{port}")

    _process = subprocess.Popen(
        build_command(port),
        cwd=str(PROJECT_ROOT),
        stdout=sys.stdout,
        stderr=sys.stderr,
    )
    return _process


def cleanup(signum=None, frame=None):
    """Stop the Streamlit child process and exit."""
    print("\n[SHUTDOWN] Stopping InfoHub...")

    if _process is not None and _process.poll() is None:
        _process.terminate()
        try:
            _process.wait(timeout=5)
        except subprocess.TimeoutExpired:
            _process.kill()

    print("[SHUTDOWN] Done")
    sys.exit(0)


def main():
    """Main entry point."""
    signal.signal(signal.SIGINT, cleanup)
    signal.signal(signal.SIGTERM, cleanup)

    print("=" * 50)
    print("InfoHub - Starting")
    print("=" * 50)

    frontend = start_frontend()

    print("Press Ctrl+C to stop")
    print("=" * 50)

    try:
        while True:
            if frontend.poll() is not None:
                print(f"[ERROR] frontend exited with code {frontend.returncode}")
                cleanup()
                return
            time.sleep(1)
    except KeyboardInterrupt:
        cleanup()


if __name__ == "__main__":
    main()
