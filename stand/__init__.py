"""Environment configuration loading, dotenv parsing and variable resolution."""

__version__ = "0.1.0"

__all__ = ["__version__"]