# encoding: utf-8
"""
nanocouch.exceptions

Everything that can go wrong...
"""

class CouchError(Exception):
    """Base class for every error raised by nanocouch."""

class InvalidUrl(CouchError, ValueError):
    """Exception raised when a server url can't be parsed into a scheme and host."""

class InvalidName(CouchError, ValueError):
    """Exception raised (before any request is made) for a database name the
    server would reject.
    """

class MissingRevision(CouchError, ValueError):
    """Exception raised (before any request is made) when a mutation that
    requires a `_rev` was called without one.
    """

class HTTPError(CouchError):
    """Base class for errors based on HTTP status codes >= 400.

    Attributes:
        status (int): the HTTP status code of the response

        error (str): the `error` field of the server's reply (e.g., "not_found")

        reason (str): the human-readable `reason` field of the server's reply

        response: the decoded error body
    """
    def __init__(self, reason=None, status=None, error=None, response=None):
        super(HTTPError, self).__init__(reason)
        self.status = status
        self.error = error
        self.reason = reason
        self.response = response

    def __str__(self):
        if self.error:
            return '%s: %s' % (self.error, self.reason)
        return str(self.reason or self.status)

class BadRequest(HTTPError):
    """Exception raised when a 400 HTTP error is received in response to a
    request.
    """

class Unauthorized(HTTPError):
    """Exception raised when the server requires authentication credentials
    but either none are provided, or they are incorrect.
    """

class NotFound(HTTPError):
    """Exception raised when a 404 HTTP error is received in response to a
    request.
    """

class Conflict(HTTPError):
    """Exception raised when a 409 HTTP error is received in response to a
    request (i.e., the supplied _rev is stale or missing)."""

class AlreadyExists(HTTPError):
    """Exception raised when a 412 HTTP error is received in response to a
    request.
    """
PreconditionFailed = AlreadyExists

class ServerError(HTTPError):
    """Exception raised when a 5xx HTTP error is received in response to a
    request.
    """

class UnexpectedStatus(HTTPError):
    """Exception raised for an HTTP error status with no more specific meaning."""

class MalformedResponse(CouchError):
    """Exception raised when a successful response can't be decoded into the
    expected shape.
    """

class TransportError(CouchError):
    """Exception raised when the request never produced an HTTP response
    (connection refused, timeout, dns failure...).

    Attributes:
        cause: the exception raised by the underlying http client
    """
    def __init__(self, cause):
        super(TransportError, self).__init__(str(cause))
        self.cause = cause
