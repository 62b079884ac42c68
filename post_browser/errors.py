# post_browser/errors.py

class PostBrowserError(Exception):
    """Base class for all post browser errors."""
    pass

class InvalidFilterError(PostBrowserError, ValueError):
    """A filter state violates its invariants (e.g. page < 1)."""
    pass

class InvalidAddressError(PostBrowserError, ValueError):
    """An address does not belong to the listing it was parsed against."""
    pass

class DataSourceError(PostBrowserError):
    """The content query service could not answer a request."""
    pass

class ConfigError(PostBrowserError):
    """Error related to configuration."""
    pass
