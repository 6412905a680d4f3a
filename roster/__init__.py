"""Hall resident roster: typed, validated person records."""

__version__ = "0.1.0"
