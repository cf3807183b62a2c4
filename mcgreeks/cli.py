"""Command that prices the example digital, corridor and Asian options."""

from __future__ import annotations

import argparse
import random
import time
from pathlib import Path
from typing import Sequence

from mcgreeks.products import AsianOption, DigitalOption, DigitalOptionInterval, Product
from mcgreeks.stats import Stats

DEFAULT_SAMPLES = 10000


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mcgreeks",
        description=(
            "Estimate prices and Greeks of example options by Monte Carlo "
            "and export the running statistics to .dat files."
        ),
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="seed of the random generator (default: current time)",
    )
    parser.add_argument(
        "--samples",
        type=_positive_int,
        default=DEFAULT_SAMPLES,
        help=f"number of Monte Carlo samples per estimate (default: {DEFAULT_SAMPLES})",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("."),
        help="directory that receives the .dat files (default: current directory)",
    )
    return parser


def _report(label: str, stats: Stats) -> None:
    print(f"{label} : {stats.estimate():g}")


def _run_european(
    title: str,
    prefix: str,
    option: Product,
    rng: random.Random,
    samples: int,
    output_dir: Path,
) -> None:
    print(title)
    results = {
        "Price": option.price(rng, samples),
        "Delta": option.delta(rng, samples),
        "Gamma": option.gamma(rng, samples),
        "Vega": option.vega(rng, samples),
    }
    _report("Monte Carlo", results["Price"])
    for name in ("Delta", "Gamma", "Vega"):
        _report(name, results[name])
    for name, stats in results.items():
        stats.export(output_dir / f"{prefix}{name}.dat")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the three example pricings; return the exit status."""
    args = _build_parser().parse_args(argv)
    seed = args.seed if args.seed is not None else int(time.time())
    rng = random.Random(seed)
    samples: int = args.samples
    output_dir: Path = args.output_dir
    output_dir.mkdir(parents=True, exist_ok=True)

    _run_european(
        "Option Digitale",
        "Digital",
        DigitalOption(100.0, 0.2, 0.05, 140.0, 1, 1.0),
        rng,
        samples,
        output_dir,
    )

    _run_european(
        "Option Corridor",
        "Corridor",
        DigitalOptionInterval(100.0, 0.2, 0.1, 100.0, 1, 1.0, 110.0),
        rng,
        samples,
        output_dir,
    )

    print("Option Asiatique")
    asian = AsianOption(100.0, 0.2, 0.1, 100.0, 1, 150, rng)
    price = asian.price(samples)
    delta = asian.delta(samples)
    _report("Monte Carlo", price)
    _report("Delta", delta)
    price.export(output_dir / "AsianPrice.dat")
    delta.export(output_dir / "AsianDelta.dat")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())