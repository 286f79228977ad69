"""File helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union


def read_bytes(filename: Union[str, os.PathLike]) -> bytes:
    """Return the whole content of a file."""
    return Path(filename).read_bytes()