"""Terminal browser for a paginated, category-filtered post catalogue."""

__version__ = "0.1.0"
