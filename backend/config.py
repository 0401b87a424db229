"""Application configuration."""

import os
from pathlib import Path

DATA_DIR = Path(os.environ.get("DATA_DIR", str(Path(__file__).parent.parent / "data")))
DATA_DIR.mkdir(parents=True, exist_ok=True)

DATABASE_URL = os.environ.get("DATABASE_URL", f"sqlite:///{DATA_DIR}/drive.db")

# Uploads larger than this are rejected with 413
MAX_UPLOAD_SIZE = int(os.environ.get("MAX_UPLOAD_SIZE", str(10 << 20)))

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").strip().upper()

# Server
ADDR = os.environ.get("ADDR", ":4443").strip()
CERT_FILE = os.environ.get("CERT_FILE", "").strip()
CERT_KEY = os.environ.get("CERT_KEY", "").strip()
