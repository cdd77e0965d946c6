"""
Sampling-Function Distributions
===============================

This module defines :class:`Distribution`, a probability distribution
characterised by its sampling function, together with the combinators used to
build hierarchical models from simpler, local conditionals:

- :func:`fmap` – transform the support, leaving the draws unchanged;
- :func:`combine` – draw two distributions independently, left first;
- :func:`sequence` – draw a value, then draw from a distribution built from it;
- :func:`lift` – interleave an effect with the draws;
- :func:`pure` – point mass, consumes no randomness;
- :func:`traverse` / :func:`replicate` – draws over containers.

Notes
-----
- A distribution is an immutable description. Nothing is drawn until
  :meth:`Distribution.sample` is called with a random source.
- Composition fixes a strict total order of primitive draws against a single
  source, which is what makes sampling reproducible under a fixed seed.
- ``beta(1, 8).bind(lambda p: binomial(10, p))`` is the beta-binomial
  distribution: the uncertainty in ``p`` is marginalised out.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import operator
from typing import TYPE_CHECKING, Any

from pysatl_prob.distributions.containers import rebuild, values_of

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from pysatl_prob.random.source import RandomSource
    from pysatl_prob.types import Effect


class Distribution[T]:
    """
    A probability distribution characterised by a sampling function.

    Parameters
    ----------
    sampler : Callable[[RandomSource], T]
        Procedure drawing one value from the given source.
    name : str, optional
        Human-readable label used in ``repr``.
    """

    __slots__ = ("_sampler", "_name")

    def __init__(self, sampler: Callable[[RandomSource], T], name: str | None = None) -> None:
        self._sampler = sampler
        self._name = name

    @property
    def name(self) -> str | None:
        """Label of the distribution, if any."""
        return self._name

    def sample(self, source: RandomSource) -> T:
        """Run the sampling procedure once against ``source``."""
        return self._sampler(source)

    def named(self, name: str) -> Distribution[T]:
        """Same sampling procedure under a new label."""
        return Distribution(self._sampler, name=name)

    # ------------------------------------------------------------------ #
    # Composition
    # ------------------------------------------------------------------ #

    def map[U](self, f: Callable[[T], U]) -> Distribution[U]:
        """Apply ``f`` to every sample; consumes the same randomness as ``self``."""
        sampler = self._sampler
        return Distribution(lambda source: f(sampler(source)))

    def combine[U](self, other: Distribution[U]) -> Distribution[tuple[T, U]]:
        """Draw ``self`` then ``other`` from the same source and pair the results."""
        first, second = self._sampler, other._sampler

        def sampler(source: RandomSource) -> tuple[T, U]:
            a = first(source)
            b = second(source)
            return a, b

        return Distribution(sampler)

    def bind[U](self, make_next: Callable[[T], Distribution[U]]) -> Distribution[U]:
        """
        Draw ``v`` from ``self``, then draw from ``make_next(v)``.

        Parameters
        ----------
        make_next : Callable[[T], Distribution[U]]
            Builds the conditional distribution given the first draw.

        Returns
        -------
        Distribution[U]
            The predictive distribution of the two-stage model.
        """
        first = self._sampler

        def sampler(source: RandomSource) -> U:
            value = first(source)
            return make_next(value).sample(source)

        return Distribution(sampler)

    def then[U](self, other: Distribution[U]) -> Distribution[U]:
        """Draw ``self``, discard the value, then draw ``other``."""
        return self.bind(lambda _: other)

    @classmethod
    def pure(cls, value: T) -> Distribution[T]:
        """Point mass at ``value``."""
        return cls(lambda _source: value, name="pure")

    @classmethod
    def lift(cls, effect: Effect[T]) -> Distribution[T]:
        """Run ``effect`` at this position of the draw order, every time it is sampled."""
        return cls(lambda _source: effect(), name="lift")

    # ------------------------------------------------------------------ #
    # Numeric lifting
    # ------------------------------------------------------------------ #

    def _binary(self, other: Any, op: Callable[[Any, Any], Any], reflected: bool = False) -> Any:
        rhs = other if isinstance(other, Distribution) else Distribution.pure(other)
        # operands are drawn in written order
        pair = rhs.combine(self) if reflected else self.combine(rhs)
        return pair.map(lambda xy: op(xy[0], xy[1]))

    def __add__(self, other: Any) -> Distribution[Any]:
        return self._binary(other, operator.add)

    def __radd__(self, other: Any) -> Distribution[Any]:
        return self._binary(other, operator.add, reflected=True)

    def __sub__(self, other: Any) -> Distribution[Any]:
        return self._binary(other, operator.sub)

    def __rsub__(self, other: Any) -> Distribution[Any]:
        return self._binary(other, operator.sub, reflected=True)

    def __mul__(self, other: Any) -> Distribution[Any]:
        return self._binary(other, operator.mul)

    def __rmul__(self, other: Any) -> Distribution[Any]:
        return self._binary(other, operator.mul, reflected=True)

    def __truediv__(self, other: Any) -> Distribution[Any]:
        return self._binary(other, operator.truediv)

    def __rtruediv__(self, other: Any) -> Distribution[Any]:
        return self._binary(other, operator.truediv, reflected=True)

    def __neg__(self) -> Distribution[Any]:
        return self.map(operator.neg)

    def __abs__(self) -> Distribution[Any]:
        return self.map(abs)

    def __repr__(self) -> str:
        label = self._name if self._name is not None else "anonymous"
        return f"{type(self).__name__}({label})"


def fmap[T, U](f: Callable[[T], U], dist: Distribution[T]) -> Distribution[U]:
    """Function form of :meth:`Distribution.map`."""
    return dist.map(f)


def combine[T, U](first: Distribution[T], second: Distribution[U]) -> Distribution[tuple[T, U]]:
    """Function form of :meth:`Distribution.combine`."""
    return first.combine(second)


def sequence[T, U](
    dist: Distribution[T], make_next: Callable[[T], Distribution[U]]
) -> Distribution[U]:
    """Function form of :meth:`Distribution.bind`."""
    return dist.bind(make_next)


def pure[T](value: T) -> Distribution[T]:
    """Function form of :meth:`Distribution.pure`."""
    return Distribution.pure(value)


def lift[T](effect: Effect[T]) -> Distribution[T]:
    """Function form of :meth:`Distribution.lift`."""
    return Distribution.lift(effect)


def traverse[T](
    make: Callable[[Any], Distribution[T]], container: Iterable[Any]
) -> Distribution[Any]:
    """
    Draw ``make(x)`` for every element ``x`` of an ordered container.

    Elements are drawn in traversal order and the results are packed into a
    container of the same kind and shape (see :mod:`.containers`).

    Parameters
    ----------
    make : Callable[[Any], Distribution[T]]
        Builds the distribution of each element.
    container : Iterable
        List, tuple, NumPy array, mapping or any other iterable.

    Returns
    -------
    Distribution
        Distribution over containers shaped like ``container``.
    """
    items = values_of(container)

    def sampler(source: RandomSource) -> Any:
        return rebuild(container, [make(item).sample(source) for item in items])

    return Distribution(sampler, name="traverse")


def replicate[T](n: int, dist: Distribution[T]) -> Distribution[list[T]]:
    """
    ``n`` independent draws from ``dist`` as a list, first draw first.

    Raises
    ------
    ValueError
        If ``n`` is negative.
    """
    if n < 0:
        raise ValueError(f"Number of replicates must be non-negative, got {n}.")
    draw = dist.sample
    return Distribution(lambda source: [draw(source) for _ in range(n)], name="replicate")


__all__ = [
    "Distribution",
    "fmap",
    "combine",
    "sequence",
    "pure",
    "lift",
    "traverse",
    "replicate",
]
