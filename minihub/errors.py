"""Error hierarchy for MiniHub.

Errors that map onto an HTTP response carry a ``status_code``; the app
registers a handler that renders the message as plain text.
"""


class MiniHubError(Exception):
    """Base class for all MiniHub errors"""
    status_code = 500


class ValidationError(MiniHubError):
    """A required field is missing or blank, or a field has a bad value"""
    status_code = 400


class NotFoundError(MiniHubError):
    """Unknown repository, file or commit id"""
    status_code = 404


class PersistenceError(MiniHubError):
    """The JSON document could not be written"""
