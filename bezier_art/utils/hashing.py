"""SHA-256 hashing for output provenance.

Provides:
    - sha256_file(): Hash file contents (rendered PNGs, configs)
    - sha256_array(): Hash raw pixel buffers (determinism checks)

The scene manifest records the PNG hash so two runs with the same seed
and config can be compared without diffing images.

Usage:
    from bezier_art.utils import hashing
    digest = hashing.sha256_file("bezier.png")
"""

import hashlib
from pathlib import Path
from typing import Union

import numpy as np


def sha256_file(path: Union[str, Path], chunk_size: int = 1 << 20) -> str:
    """Compute SHA-256 hash of file contents.

    Parameters
    ----------
    path : Union[str, Path]
        File path
    chunk_size : int
        Read chunk size in bytes, default 1 MB

    Returns
    -------
    str
        SHA-256 hex digest (64 characters)

    Raises
    ------
    FileNotFoundError
        If file doesn't exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    sha256 = hashlib.sha256()
    with open(path, 'rb') as f:
        for chunk in iter(lambda: f.read(chunk_size), b''):
            sha256.update(chunk)

    return sha256.hexdigest()


def sha256_array(arr: np.ndarray) -> str:
    """Compute SHA-256 hash of array values.

    Same values, dtype and shape give the same digest. Shape is mixed into
    the hash so a (2, 6) and a (3, 4) buffer with equal bytes differ.
    """
    arr = np.ascontiguousarray(arr)
    sha256 = hashlib.sha256()
    sha256.update(str(arr.shape).encode('utf-8'))
    sha256.update(arr.dtype.str.encode('utf-8'))
    sha256.update(arr.tobytes())
    return sha256.hexdigest()
