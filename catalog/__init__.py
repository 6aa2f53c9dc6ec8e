"""Product catalog service and shared table view engine."""

__version__ = "0.1.0"
