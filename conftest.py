import sys
from pathlib import Path
import os

# Ensure repo root on sys.path for imports from anywhere in tests tree.
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("VRS_DATABASE_URL", "memory://test")
os.environ.setdefault("VRS_MOCK_LATENCY_MS", "0")
