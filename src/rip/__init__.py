"""rip: installer and launcher for the RIP vulnerability scanner binary."""

__version__ = "0.2.0"
