"""Option products priced by Monte Carlo with Malliavin-weight Greeks."""

from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod
from typing import Callable

from mcgreeks.stats import Stats


def standard_normal(rng: random.Random) -> float:
    """Draw one standard normal variate from ``rng``."""
    return rng.gauss(0.0, 1.0)


def monte_carlo(
    stats: Stats,
    variable: Callable[[random.Random], float],
    measurement: Callable[[float, float], float],
    rng: random.Random,
    n: int,
) -> Stats:
    """Add ``n`` samples of ``measurement`` on pairs of draws of ``variable``."""
    for _ in range(n):
        w1 = variable(rng)
        w2 = variable(rng)
        stats += measurement(w1, w2)
    return stats


def monte_carlo_asian(
    stats: Stats, measurement: Callable[[], float], n: int
) -> Stats:
    """Add ``n`` samples of a self-contained ``measurement``."""
    for _ in range(n):
        stats += measurement()
    return stats


def _terminal_price(s0, sigma, r, maturity, n, theta):
    return s0 * math.exp(
        (r - sigma * sigma / 2) * maturity + sigma * (n + theta) * math.sqrt(maturity)
    )


def _delta_weight(s0, sigma, maturity, x):
    return (x * math.sqrt(maturity)) / (s0 * sigma * maturity)


def _vega_weight(sigma, maturity, x):
    wt = x * math.sqrt(maturity)
    return (wt * wt / sigma * maturity) - wt - (1 / sigma)


def _gamma_weight(s0, sigma, maturity, x):
    return _vega_weight(sigma, maturity, x) / (s0 * s0 * sigma * maturity)


class Product(ABC):
    """A European product on a Black-Scholes underlying."""

    def __init__(self, s0: float, sigma: float, r: float, strike: float, maturity: int):
        self.s0 = s0
        self.sigma = sigma
        self.r = r
        self.strike = strike
        self.maturity = maturity

    @abstractmethod
    def payoff(self, n: float, m: float, theta: float = 0.0) -> float:
        """Payoff for normal draws ``n`` and ``m``, with ``n`` shifted by ``theta``."""

    @abstractmethod
    def delta_weight(self, x: float, y: float) -> float:
        """Malliavin weight for the delta."""

    @abstractmethod
    def gamma_weight(self, x: float, y: float) -> float:
        """Malliavin weight for the gamma."""

    @abstractmethod
    def vega_weight(self, x: float, y: float) -> float:
        """Malliavin weight for the vega."""

    def _estimate(
        self,
        rng: random.Random,
        n: int,
        weight: Callable[[float, float], float] | None,
    ) -> Stats:
        discount = math.exp(-self.r * self.maturity)
        if weight is None:
            def measurement(x: float, y: float) -> float:
                return discount * self.payoff(x, y)
        else:
            def measurement(x: float, y: float) -> float:
                return discount * self.payoff(x, y) * weight(x, y)
        return monte_carlo(Stats(), standard_normal, measurement, rng, n)

    def price(self, rng: random.Random, n: int, t: float = 0.0) -> Stats:
        """Monte Carlo estimate of the discounted payoff."""
        return self._estimate(rng, n, None)

    def delta(self, rng: random.Random, n: int, t: float = 0.0) -> Stats:
        """Monte Carlo estimate of the delta."""
        return self._estimate(rng, n, self.delta_weight)

    def gamma(self, rng: random.Random, n: int, t: float = 0.0) -> Stats:
        """Monte Carlo estimate of the gamma."""
        return self._estimate(rng, n, self.gamma_weight)

    def vega(self, rng: random.Random, n: int, t: float = 0.0) -> Stats:
        """Monte Carlo estimate of the vega."""
        return self._estimate(rng, n, self.vega_weight)


class DigitalOption(Product):
    """Pays ``quantity`` when the terminal price is above the strike."""

    def __init__(
        self,
        s0: float,
        sigma: float,
        r: float,
        strike: float,
        maturity: int,
        quantity: float,
    ):
        super().__init__(s0, sigma, r, strike, maturity)
        self.quantity = quantity

    def payoff(self, n: float, m: float, theta: float = 0.0) -> float:
        st = _terminal_price(self.s0, self.sigma, self.r, self.maturity, n, theta)
        return self.quantity * float(st > self.strike)

    def delta_weight(self, x: float, y: float) -> float:
        return _delta_weight(self.s0, self.sigma, self.maturity, x)

    def gamma_weight(self, x: float, y: float) -> float:
        return _gamma_weight(self.s0, self.sigma, self.maturity, x)

    def vega_weight(self, x: float, y: float) -> float:
        return _vega_weight(self.sigma, self.maturity, x)


class DigitalOptionInterval(Product):
    """Corridor option: pays ``quantity`` when the terminal price is in [strike, max_strike]."""

    def __init__(
        self,
        s0: float,
        sigma: float,
        r: float,
        min_strike: float,
        maturity: int,
        quantity: float,
        max_strike: float,
    ):
        super().__init__(s0, sigma, r, min_strike, maturity)
        self.quantity = quantity
        self.max_strike = max_strike

    def payoff(self, n: float, m: float, theta: float = 0.0) -> float:
        st = _terminal_price(self.s0, self.sigma, self.r, self.maturity, n, theta)
        return self.quantity * float(self.strike <= st <= self.max_strike)

    def delta_weight(self, x: float, y: float) -> float:
        return _delta_weight(self.s0, self.sigma, self.maturity, x)

    def gamma_weight(self, x: float, y: float) -> float:
        return _gamma_weight(self.s0, self.sigma, self.maturity, x)

    def vega_weight(self, x: float, y: float) -> float:
        return _vega_weight(self.sigma, self.maturity, x)


class AsianOption:
    """Arithmetic-average Asian call simulated on a discretised path."""

    def __init__(
        self,
        s0: float,
        sigma: float,
        r: float,
        strike: float,
        maturity: int,
        steps: int,
        rng: random.Random,
    ):
        self.s0 = s0
        self.sigma = sigma
        self.r = r
        self.strike = strike
        self.maturity = maturity
        self.steps = steps
        self.rng = rng

    def approx(self, k: int) -> float:
        """Riemann sum of (t/T)^k * S_t over a freshly simulated path."""
        h = self.maturity / self.steps
        drift = (self.r - self.sigma * self.sigma / 2) * h
        diffusion = self.sigma * math.sqrt(h)
        total = 0.0
        st = self.s0
        for i in range(self.steps):
            st *= math.exp(drift + diffusion * standard_normal(self.rng))
            total += (i / self.steps) ** k * st
        return total * h

    def payoff(self) -> float:
        """Call payoff on the simulated average."""
        return max(self.approx(0) - self.strike, 0.0)

    def delta_weight(self) -> float:
        """Malliavin weight for the delta of the Asian option."""
        approx0 = self.approx(0)
        approx1 = self.approx(1)
        approx2 = self.approx(2)
        w = math.sqrt(self.maturity) * standard_normal(self.rng) / self.sigma
        return (approx0 / approx1) * ((w + approx2 / approx1) - 1)

    def price(self, n: int, t: float = 0.0) -> Stats:
        """Monte Carlo estimate of the discounted payoff."""
        discount = math.exp(-self.r * self.maturity)
        return monte_carlo_asian(Stats(), lambda: discount * self.payoff(), n)

    def delta(self, n: int, t: float = 0.0) -> Stats:
        """Monte Carlo estimate of the delta."""
        discount = math.exp(-self.r * self.maturity)

        def measurement() -> float:
            return discount * self.payoff() * self.delta_weight() / self.s0

        return monte_carlo_asian(Stats(), measurement, n)