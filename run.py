"""Launch the RestCLI Streamlit viewer and open it in the browser."""

from __future__ import annotations

import argparse
import sys
import threading
import time
import webbrowser
from pathlib import Path

import requests

DEFAULT_PORT = 8501
SRC_DIR = Path(__file__).resolve().parent / "src"


def wait_until_ready(url: str, attempts: int = 30, delay: float = 1.0) -> bool:
    """Return True once *url* answers 200, False after *attempts* polls."""
    with requests.Session() as session:
        for _ in range(attempts):
            try:
                if session.get(url, timeout=2).status_code == 200:
                    return True
            except requests.RequestException:
                pass
            time.sleep(delay)
    return False


def _open_when_ready(url: str) -> None:
    if wait_until_ready(url):
        webbrowser.open(url)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Start the RestCLI tree viewer.")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument(
        "--no-browser",
        action="store_true",
        help="Do not open a browser window.",
    )
    args = parser.parse_args(argv)

    if str(SRC_DIR) not in sys.path:
        sys.path.insert(0, str(SRC_DIR))

    from streamlit.web import bootstrap

    if not args.no_browser:
        url = f"http://localhost:{args.port}"
        threading.Thread(target=_open_when_ready, args=(url,), daemon=True).start()

    bootstrap.run(
        str(SRC_DIR / "RestCLI" / "app.py"),
        is_hello=False,
        args=[],
        flag_options={
            "server.headless": True,
            "server.port": args.port,
            "browser.gatherUsageStats": False,
        },
    )


if __name__ == "__main__":
    main()
