import os
import sys
from pathlib import Path

# `pytest` from the repo root: make `apps` and `store` importable and point
# pytest-django at the store settings.
BACKEND_DIR = Path(__file__).resolve().parent / "backend"
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "store.settings")
