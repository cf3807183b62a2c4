"""Monte Carlo pricing and Greeks for digital, corridor and Asian options."""

__version__ = "0.1.0"
__all__ = ["stats", "products", "cli"]