"""Building blocks for a transactional analytical storage engine."""

__version__ = "0.1.0"