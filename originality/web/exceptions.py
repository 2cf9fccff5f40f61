class WebSearchError(Exception):
    """Raised when the search provider cannot answer a query."""
