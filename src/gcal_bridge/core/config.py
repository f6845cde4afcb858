from __future__ import annotations

from pathlib import Path

from platformdirs import user_data_dir

APP_NAME = "gcal-bridge"
APP_AUTHOR = "gcal-bridge"
DATA_DIR = Path(user_data_dir(APP_NAME, APP_AUTHOR))
CREDENTIALS_FILE = DATA_DIR / "credentials.json"
LOG_FILE = DATA_DIR / "gcal_bridge.log"


def ensure_data_dir() -> None:
    DATA_DIR.mkdir(parents=True, exist_ok=True)
