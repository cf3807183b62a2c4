# mcgreeks

Monte Carlo estimates of option prices and their sensitivities (delta, gamma,
vega). The sensitivities come from likelihood-ratio (Malliavin) weights, so the
path is never simulated again with bumped parameters.

Supported products, all in `mcgreeks.products`:

- `DigitalOption(s0, sigma, r, strike, maturity, quantity)`: pays `quantity`
  when the terminal price ends strictly above the strike. It offers `price`,
  `delta`, `gamma` and `vega`.
- `DigitalOptionInterval(s0, sigma, r, min_strike, maturity, quantity, max_strike)`:
  a corridor option. It pays `quantity` when the terminal price lies in
  `[min_strike, max_strike]`. It offers `price`, `delta`, `gamma` and `vega`.
- `AsianOption(s0, sigma, r, strike, maturity, steps, rng)`: an
  arithmetic-average call on a path cut into `steps` time steps. It offers
  `price` and `delta` only.

Each estimate comes back as a `Stats` object from `mcgreeks.stats`. It keeps
the sampled values, the running mean, the running variance and 95% confidence
bands for every step.

## Installation

```
pip install .
```

For the test suite:

```
pip install .[test]
pytest
```

## Running the examples

```
mcgreeks
```

The command prices three example options:

- a digital option with S0=100, sigma=0.2, r=0.05, K=140 and T=1;
- a corridor option with S0=100, sigma=0.2, r=0.1, bounds 100 to 110 and T=1;
- an Asian call with S0=100, sigma=0.2, r=0.1, K=100, T=1 and 150 steps.

It prints each estimate. It also writes the convergence data to
`DigitalPrice.dat`, `DigitalDelta.dat`, `DigitalGamma.dat`, `DigitalVega.dat`,
the four matching `Corridor*.dat` files, `AsianPrice.dat` and
`AsianDelta.dat`.

Options:

- `--seed N`: seed of the random generator. The default is the current time in seconds.
- `--samples N`: number of samples per estimate, at least 1. The default is 10000.
- `--output-dir DIR`: directory that receives the `.dat` files. It is created if it does not exist. The default is the current directory.

Each line of a `.dat` file holds:

```
<step> <value> <running mean> <upper 95% bound> <lower 95% bound>
```

## Using the library

Pass a `random.Random` to every estimate so that runs can be repeated:

```python
import random

from mcgreeks.products import DigitalOption, AsianOption

rng = random.Random(12345)

digital = DigitalOption(100.0, 0.2, 0.05, 140.0, 1, 1.0)
price = digital.price(rng, 10_000)
delta = digital.delta(rng, 10_000)
print(price.estimate(), delta.estimate())

price.export("DigitalPrice.dat")

asian = AsianOption(100.0, 0.2, 0.1, 100.0, 1, 150, rng)
print(asian.price(10_000).estimate())
```

The `t` parameter of `price`, `delta`, `gamma` and `vega` is accepted but has
no effect.

The sampling loops can also be used directly:

- `monte_carlo(stats, variable, measurement, rng, n)` draws two values of
  `variable(rng)` per sample and adds `measurement(w1, w2)` to `stats`.
- `monte_carlo_asian(stats, measurement, n)` adds `measurement()` to `stats`
  `n` times.
- `standard_normal(rng)` draws one standard normal variate.

A `Stats` object can also be filled by hand:

```python
from mcgreeks.stats import Stats

stats = Stats()
for x in (1.0, 2.0, 3.0):
    stats += x
print(stats.estimate())           # 2.0
print(stats.upper_confidence())   # running 95% upper bounds
print(list(stats.rows()))         # (step, value, mean, upper, lower) tuples
print(stats)                      # the same rows that export() writes
```

`estimate()` raises `ValueError` when no sample has been recorded.

## What it does not do

The Asian option has no gamma or vega estimates. The products use a single
Black-Scholes underlying with constant volatility and rate. Results are written
only as whitespace-separated `.dat` text files, and no plots are produced.