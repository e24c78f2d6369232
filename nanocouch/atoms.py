# encoding: utf-8
"""
nanocouch.atoms

Dict-ish building blocks for decoded responses.
"""

from .exceptions import MalformedResponse, HTTPError, BadRequest, Unauthorized, \
                        NotFound, Conflict, AlreadyExists

__all__ = ['adict', 'Document', 'Status', 'OperationResult', 'Confirmation', 'ServerInfo',
           'DbInfo', 'ErrorResponse', 'BulkResult', 'AllDocs', 'FindResult', 'Changes']

class adict(dict):
    """A dict whose keys can also be read and written as attributes"""
    def __getattr__(self, attr):
        try:
            return self[attr]
        except KeyError:
            raise AttributeError(attr)

    def __setattr__(self, attr, value):
        self[attr] = value

    def __delattr__(self, attr):
        try:
            del self[attr]
        except KeyError:
            raise AttributeError(attr)

    def __repr__(self):
        return '%s(%s)' % (type(self).__name__, dict.__repr__(self))

class Document(adict):
    """A document as stored on the server (including its `_id` and `_rev`)"""
    @property
    def id(self):
        return self.get('_id')

    @property
    def rev(self):
        return self.get('_rev')

    def __repr__(self):
        return '<%s %r@%r %r>' % (type(self).__name__, self.id, self.rev,
                                  dict([(k,v) for k,v in self.items() if k not in ('_id','_rev')]))

class Status(adict):
    """Metadata describing a single request/response exchange.

    Attributes:
        code (int): the HTTP status code (None if the request never got a response)

        headers (dict): the response headers

        ok (bool): whether the exchange produced a usable result

        error (class): the exception class describing the failure (if any)

        exception (Exception): the exception instance describing the failure (if any)

        response: the decoded error body (if any)
    """
    def __init__(self, code=None, headers=None):
        super(Status, self).__init__(code=code, headers=headers or {}, ok=True,
                                     error=None, exception=None, response=None)

    def fail(self, exc):
        self.ok = False
        self.error = type(exc)
        self.exception = exc
        return self

# typed reply shapes

class Shape(adict):
    """An adict whose construction from a decoded response insists on a few keys"""
    required = ()

    @classmethod
    def from_json(cls, data):
        if not isinstance(data, dict):
            raise MalformedResponse('expected a json object for %s, got %s' % (cls.__name__, type(data).__name__))
        missing = [k for k in cls.required if k not in data]
        if missing:
            raise MalformedResponse('%s is missing %s' % (cls.__name__, ', '.join(missing)))
        return cls(data)

class OperationResult(Shape):
    """The reply to a document write: `{ok:True, id:'', rev:''}`"""
    required = ('ok', 'id', 'rev')

class Confirmation(Shape):
    """The reply to a database create/destroy: `{ok:True}`"""
    required = ('ok',)

class ServerInfo(Shape):
    """The server's welcome message (`{couchdb:'Welcome', version:'', ...}`)"""
    required = ('couchdb', 'version')

class DbInfo(Shape):
    required = ('db_name',)

class ErrorResponse(adict):
    """The body of a failed request: `{error:'', reason:''}`"""
    @classmethod
    def from_json(cls, data):
        if isinstance(data, dict):
            return cls(data, error=data.get('error'), reason=data.get('reason'))
        return cls(error=None, reason=data)

class AllDocs(Shape):
    required = ('rows',)

class FindResult(Shape):
    required = ('docs',)

class Changes(Shape):
    required = ('results', 'last_seq')

BULK_ERRORS = {'bad_request':BadRequest, 'unauthorized':Unauthorized, 'not_found':NotFound,
               'conflict':Conflict, 'file_exists':AlreadyExists}

class BulkResult(Shape):
    """The outcome of writing one doc in a `_bulk_docs` request.

    Either `{ok:True, id:'', rev:''}` or `{id:'', error:'', reason:''}`
    """
    @classmethod
    def from_json(cls, data):
        res = super(BulkResult, cls).from_json(data)
        if 'error' not in res and 'rev' not in res:
            raise MalformedResponse('bulk result has neither a rev nor an error')
        return res

    @property
    def failed(self):
        return 'error' in self

    @property
    def exception(self):
        """An exception instance describing a failed write (or None)"""
        if not self.failed:
            return None
        exc_type = BULK_ERRORS.get(self['error'], HTTPError)
        return exc_type(self.get('reason'), error=self['error'], response=dict(self))
