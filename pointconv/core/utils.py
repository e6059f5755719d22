from __future__ import annotations
import logging
import numpy as np

f32 = np.float32


def get_logger(name: str = "pointconv") -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        fmt = logging.Formatter("[%(levelname)s] %(message)s")
        handler.setFormatter(fmt)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger

def truncate_uint(value: float | np.floating, bits: int) -> int:
    """Narrow a float to an unsigned integer: truncate toward zero, wrap modulo 2**bits."""
    return int(value) % (1 << bits)

def inverse_focal(focal: float) -> np.float32:
    """Single-precision 1 / focal; the focal and its inverse must both be finite and non-zero."""
    with np.errstate(divide="ignore", over="ignore"):
        focal32 = f32(focal)
        inv = f32(1) / focal32
    if focal32 == 0 or not np.isfinite(focal32) or not np.isfinite(inv) or inv == 0:
        raise ValueError(f"focal must be finite and non-zero in single precision, got {focal}")
    return inv
