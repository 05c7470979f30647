"""Launch the Streamlit admin console or public site."""

from __future__ import annotations

import argparse
import shutil
import subprocess
import sys
from pathlib import Path

UI_ROOT = Path(__file__).resolve().parents[1] / "ui"
APPS = {"admin": UI_ROOT / "admin_app.py", "site": UI_ROOT / "site_app.py"}


def build_command(app: str, port: int | None = None) -> list[str]:
    cmd = ["streamlit", "run", str(APPS[app])]
    if port:
        cmd += ["--server.port", str(port)]
    return cmd


def _run(app: str) -> None:
    parser = argparse.ArgumentParser(description=f"Run the {app} Streamlit app")
    parser.add_argument("--port", type=int, default=None, help="Port to serve on")
    args = parser.parse_args()
    if not shutil.which("streamlit"):
        print("streamlit is not installed. Run: pip install -e .")
        sys.exit(1)
    raise SystemExit(subprocess.call(build_command(app, args.port)))


def admin() -> None:
    _run("admin")


def site() -> None:
    _run("site")
