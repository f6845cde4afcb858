"""Filesystem locations shared by logging and credential persistence."""

from .config import APP_NAME, CREDENTIALS_FILE, DATA_DIR, LOG_FILE, ensure_data_dir

__all__ = ["APP_NAME", "CREDENTIALS_FILE", "DATA_DIR", "LOG_FILE", "ensure_data_dir"]
