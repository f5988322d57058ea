from __future__ import annotations
import numpy as np
from typing import Tuple

"""
This module provides the pairwise geometry shared by the force pass. The geometry_buffers function computes, in one pass over the position array, the displacement from every body to every other body (target minus source, d[i, j] = pos[j] - pos[i]), the squared Euclidean distances, and the Manhattan distances used by the coarse proximity filter. Diagonal entries describe a body against itself and are left for the caller to mask. It assumes an (n, 2) position array.

"""




__all__ = ["geometry_buffers"]

def geometry_buffers(
    pos: np.ndarray,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    pos = np.asarray(pos)

    diff = pos[None, :, :] - pos[:, None, :]
    r2 = np.einsum("ijk,ijk->ij", diff, diff, optimize=True)
    manhattan = np.abs(diff).sum(axis=-1)

    return diff, r2, manhattan
