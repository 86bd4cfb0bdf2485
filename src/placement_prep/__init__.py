"""Job description analysis: skills, readiness score and interview prep plan."""

__version__ = "0.1.0"
