"""Central configuration for Life Replay, read from the environment."""

import os
from pathlib import Path

# Storage
DATA_DIR = Path(
    os.environ.get("LIFE_REPLAY_DATA_DIR", str(Path.home() / ".life-replay"))
).expanduser()

# Local API server
HOST = os.environ.get("LIFE_REPLAY_HOST", "127.0.0.1")
PORT = int(os.environ.get("LIFE_REPLAY_PORT", "8000"))
LOG_LEVEL = os.environ.get("LIFE_REPLAY_LOG_LEVEL", "info").lower()

# CLI default target
BASE_URL = os.environ.get("LIFE_REPLAY_URL", f"http://{HOST}:{PORT}")
