"""Define basic paths needed for testing."""
from pathlib import Path

_my_dir = Path(__file__).resolve().parent
other_dir = _my_dir / "other"
output_dir = _my_dir / "output"
