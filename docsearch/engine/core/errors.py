"""Exceptions raised by the index store and its sources."""


class DocSearchError(Exception):
    """Base class for docsearch errors."""


class MalformedIndexError(DocSearchError):
    """The index payload could not be parsed into entities.

    Fatal to the load that raised it; no partial index is installed.
    """


class IndexFetchError(DocSearchError):
    """The index source could not deliver a payload."""


class IndexNotLoadedError(DocSearchError):
    """The index store was read before any successful load."""
