"""An interactive auction of lots with bidding and status reports, plus two small record examples."""

__version__ = "0.1.0"
__all__ = ["auction", "cli", "movies", "recordings"]