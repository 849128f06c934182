import sys
from pathlib import Path

# Make 'evalprompts' importable when the package is not installed
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))
