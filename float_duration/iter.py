"""Iteration over evenly spaced durations.

:func:`subdivide` splits the span between two durations into ``steps`` evenly
spaced points, computed lazily::

    def cost(t: FloatDuration) -> float:
        return 0.5 * t.as_seconds() ** 2

    total = sum(cost(t) for t in subdivide(FloatDuration.zero(), FloatDuration.minutes(10), 100))

:func:`subdivide_with_step` also hands out the step size, the common shape of
a fixed-step simulation loop::

    x, v = 5.0, 0.0
    for t, dt in subdivide_with_step(FloatDuration.zero(), FloatDuration.hours(1), 100):
        a = -x
        v += a * dt.as_seconds()
        x += v * dt.as_seconds()
"""

from collections.abc import Iterator
from itertools import repeat
from operator import index

from float_duration.duration import FloatDuration


class Subdivide:
    """A lazy, restartable lattice of evenly spaced durations.

    Returned by :func:`subdivide`; not meant to be built directly. Each call to
    ``iter()`` starts again from the first point.
    """

    def __init__(
        self, begin: FloatDuration, end: FloatDuration, steps: int, endpoint: bool
    ):
        steps = index(steps)
        if steps < 0:
            raise ValueError(f"subdivide() requires steps >= 0, got {steps}")
        if endpoint and steps < 2:
            raise ValueError(
                f"subdivide(endpoint=True) requires at least two steps to visit "
                f"both endpoints, got {steps}.\n"
                f"Hint: use endpoint=False for a half-open span"
            )

        self.begin: FloatDuration = begin
        self.end: FloatDuration = end
        self.steps: int = steps
        self.endpoint: bool = endpoint
        self._span: FloatDuration = end - begin
        self._divisions: int = steps - 1 if endpoint else steps

    @property
    def step_size(self) -> FloatDuration:
        """The distance between consecutive points."""
        return self._span / self._divisions

    def _point(self, i: int) -> FloatDuration:
        if self.endpoint and i == self.steps - 1:
            return self.end
        return self.begin + self._span * i / self._divisions

    def __len__(self) -> int:
        return self.steps

    def __iter__(self) -> Iterator[FloatDuration]:
        for i in range(self.steps):
            yield self._point(i)

    def __reversed__(self) -> Iterator[FloatDuration]:
        for i in reversed(range(self.steps)):
            yield self._point(i)

    def __getitem__(self, i: int) -> FloatDuration:
        i = index(i)
        if i < 0:
            i += self.steps
        if not 0 <= i < self.steps:
            raise IndexError(f"Subdivide index out of range for {self.steps} steps")
        return self._point(i)

    def __repr__(self) -> str:
        return (
            f"Subdivide(begin={self.begin!r}, end={self.end!r}, "
            f"steps={self.steps}, endpoint={self.endpoint})"
        )


def subdivide(
    begin: FloatDuration, end: FloatDuration, steps: int, *, endpoint: bool = False
) -> Subdivide:
    """Split the span from ``begin`` to ``end`` into ``steps`` evenly spaced points.

    By default the span is half-open: the i-th point is
    ``begin + (end - begin) * i / steps`` for ``i`` in ``range(steps)``, so
    ``begin`` is included, ``end`` is not, and ``steps == 0`` yields nothing.

    With ``endpoint=True`` the span is closed: the first point is ``begin``,
    the last is exactly ``end``, and ``steps`` must be at least 2.

    Raises:
        TypeError: If ``steps`` is not an integer
        ValueError: If ``steps`` is negative, or below 2 with ``endpoint=True``
    """
    return Subdivide(begin, end, steps, endpoint)


def subdivide_with_step(
    begin: FloatDuration, end: FloatDuration, steps: int, *, endpoint: bool = False
) -> Iterator[tuple[FloatDuration, FloatDuration]]:
    """Like :func:`subdivide`, but yield ``(t, step_size)`` pairs."""
    points = subdivide(begin, end, steps, endpoint=endpoint)
    return zip(points, repeat(points.step_size))
