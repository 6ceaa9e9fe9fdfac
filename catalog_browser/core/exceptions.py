class CatalogBrowserError(Exception):
    """Base exception for all catalog_browser errors"""
    pass


class ConfigError(CatalogBrowserError):
    """Invalid or inconsistent global.json"""
    pass


class RecordNormalizationError(CatalogBrowserError, ValueError):
    """A raw catalog entry cannot be turned into a Record (missing/invalid tag)"""
    pass


class InvalidViewStateError(CatalogBrowserError, ValueError):
    """Unknown status filter, sort key or sort direction"""
    pass


class CatalogLoadError(CatalogBrowserError):
    """
    Base for failures of the one-off catalog load.
    Terminal for the attempt: no retry, no partial catalog.
    """
    pass


class LoadTransportError(CatalogLoadError):
    """
    The data source could not be retrieved
    (non-success response, network failure, unreadable file)
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class LoadFormatError(CatalogLoadError):
    """The retrieved document is not JSON or is missing the records array"""
    pass
