"""suitegen: AI-generated test suites for source repositories."""

__version__ = "0.1.0"
