"""Start the ReTree outline converter locally and open it in a browser tab."""

import sys
import threading
import time
import webbrowser
from pathlib import Path

import requests


PORT = 8501
URL = f"http://localhost:{PORT}"
STARTUP_TIMEOUT_S = 30


def _open_when_ready() -> None:
    """Open the converter page as soon as the server accepts requests."""
    deadline = time.monotonic() + STARTUP_TIMEOUT_S
    while time.monotonic() < deadline:
        try:
            ready = requests.get(URL, timeout=2).status_code == 200
        except requests.RequestException:
            ready = False
        if ready:
            webbrowser.open(URL)
            return
        time.sleep(1)


def main() -> None:
    # Source checkouts run without `pip install -e .`
    src_dir = Path(__file__).resolve().parent / "src"
    if src_dir.is_dir() and str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))

    from streamlit.web import bootstrap

    threading.Thread(target=_open_when_ready, daemon=True).start()

    bootstrap.run(
        str(src_dir / "ReTree" / "app.py"),
        is_hello=False,
        args=[],
        flag_options={
            "server.headless": True,
            "server.port": PORT,
            "browser.gatherUsageStats": False,
        },
    )


if __name__ == "__main__":
    main()
