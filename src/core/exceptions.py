"""
Exception taxonomy for the wiki backend.

Errors that a client can act on derive from WikiError and carry the HTTP
status they map to. Anything else (an unreadable content directory, a broken
front matter block) propagates untouched and surfaces as a 5xx. This module
must not import the web framework.
"""


class WikiError(Exception):
    """Base class for client-facing wiki errors."""

    status_code: int = 500

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class MissingParameterError(WikiError):
    """A required request parameter was absent or blank."""

    status_code = 400

    def __init__(self, parameter: str):
        super().__init__(f"{parameter.capitalize()} is required")
        self.parameter = parameter


class ArticleNotFoundError(WikiError):
    """No published article matches the requested slug or path."""

    status_code = 404

    def __init__(self, identifier: str):
        super().__init__("Article not found")
        self.identifier = identifier


class ContentStoreError(Exception):
    """The content store could not be read or holds malformed content."""
    pass
