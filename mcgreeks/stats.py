"""Running statistics of a Monte Carlo estimator."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from os import PathLike
from typing import Iterator

_Z_95 = 1.96


def _sqrt(value: float) -> float:
    """Square root that yields NaN instead of raising for negative input."""
    return math.sqrt(value) if value >= 0 else math.nan


@dataclass
class Stats:
    """Samples with their running mean, running second moment and variance."""

    values: list[float] = field(default_factory=list)
    mean: list[float] = field(default_factory=list)
    cumsum: list[float] = field(default_factory=list)
    var: list[float] = field(default_factory=list)

    def add(self, x: float) -> Stats:
        """Record one sample and update the running statistics."""
        self.values.append(x)
        n = len(self.values)
        if n == 1:
            self.mean.append(x)
            self.cumsum.append(x * x)
            self.var.append(0.0)
        else:
            new_mean = (self.mean[-1] * len(self.mean) + x) / n
            self.mean.append(new_mean)
            new_cumsum = self.cumsum[-1] + x * x
            self.cumsum.append(new_cumsum)
            self.var.append(new_cumsum / n - new_mean * new_mean)
        return self

    def __iadd__(self, x: float) -> Stats:
        return self.add(x)

    def upper_confidence(self) -> list[float]:
        """Upper bound of the 95% confidence interval after each sample."""
        return [
            m + _Z_95 * _sqrt(v / i)
            for i, (m, v) in enumerate(zip(self.mean, self.var), start=1)
        ]

    def lower_confidence(self) -> list[float]:
        """Lower bound of the 95% confidence interval after each sample."""
        return [
            m - _Z_95 * _sqrt(v / i)
            for i, (m, v) in enumerate(zip(self.mean, self.var), start=1)
        ]

    def estimate(self) -> float:
        """The Monte Carlo estimate: the mean over all samples."""
        if not self.mean:
            raise ValueError("no samples recorded")
        return self.mean[-1]

    def rows(self) -> Iterator[tuple[int, float, float, float, float]]:
        """Yield (index, value, mean, upper, lower) for each sample, from 1."""
        yield from zip(
            range(1, len(self.values) + 1),
            self.values,
            self.mean,
            self.upper_confidence(),
            self.lower_confidence(),
        )

    def __str__(self) -> str:
        return "".join(
            f"{k} {value:g} {mean:g} {upper:g} {lower:g}\n"
            for k, value, mean, upper, lower in self.rows()
        )

    def export(self, path: str | PathLike[str]) -> None:
        """Write the rows to a whitespace-separated text file."""
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(str(self))