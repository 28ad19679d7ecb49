"""Text messaging between processes over SIGUSR1/SIGUSR2, one bit per signal, with small C-style helper modules."""

__version__ = "0.1.0"