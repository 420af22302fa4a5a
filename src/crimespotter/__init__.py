"""CrimeSpotter UK: a thin proxy over the data.police.uk street-level crime API."""

__version__ = "1.0.0"
