import sys
from pathlib import Path

# Ensure the backend packages are importable when running tests from repo root.
ROOT = Path(__file__).resolve().parents[1]
for path in (ROOT, ROOT / "season_stats" / "src"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))
