"""Integration-test harness for the Elasticsearch HTTP client."""

__version__ = "0.1.0"
