"""Utility functions for arffparse tests."""
from pathlib import Path


def unlink(file_path):
    """
    Remove a file path if it exists.

    Parameters
    ----------
    file_path : Union[str, Path]
        File path to remove.

    """
    file_path = Path(file_path)
    if file_path.exists():
        file_path.unlink()
