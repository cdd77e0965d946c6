"""
Ordered Containers
==================

Helpers that let shape-preserving distributions (Dirichlet, isotropic normal,
element-wise traversals) accept any ordered container:

- ``list`` and ``tuple`` are rebuilt with the same type;
- ``numpy.ndarray`` is traversed in C order and rebuilt with the same shape;
- mappings are traversed by value in key order and rebuilt as ``dict``;
- any other iterable is materialised as a ``list``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Iterable, Mapping
from typing import Any

import numpy as np


def values_of(container: Iterable[Any]) -> list[Any]:
    """Return the elements of ``container`` in traversal order."""
    if isinstance(container, Mapping):
        return list(container.values())
    if isinstance(container, np.ndarray):
        return list(container.ravel())
    return list(container)


def rebuild(container: Iterable[Any], values: list[Any]) -> Any:
    """
    Rebuild a container shaped like ``container`` from ``values``.

    Parameters
    ----------
    container : Iterable
        Template container; only its type and shape are used.
    values : list
        New elements, in the order produced by :func:`values_of`.

    Returns
    -------
    Any
        Container of the same kind as ``container``.
    """
    if isinstance(container, Mapping):
        return dict(zip(container.keys(), values, strict=True))
    if isinstance(container, np.ndarray):
        return np.asarray(values).reshape(container.shape)
    if isinstance(container, tuple):
        return tuple(values)
    return list(values)


__all__ = ["values_of", "rebuild"]
