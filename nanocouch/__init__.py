# encoding: utf-8
"""
nanocouch | a nano-flavoured CouchDB client

Server info, database lifecycle, and document operations over CouchDB's HTTP
api, with blocking (requests) and callback-driven (tornado) calling styles.

BSD Licensed
"""

__title__ = 'nanocouch'
__version__ = '0.1.0'
__license__ = 'BSD'

__all__ = ['Couch', 'Database', 'Document', 'defaults', 'CouchError', 'InvalidUrl', 'InvalidName',
           'MissingRevision', 'HTTPError', 'BadRequest', 'Unauthorized', 'NotFound', 'Conflict',
           'AlreadyExists', 'PreconditionFailed', 'ServerError', 'UnexpectedStatus',
           'MalformedResponse', 'TransportError']

from .config import defaults
from .atoms import Document
from .couchdb import Couch, Database
from .exceptions import CouchError, InvalidUrl, InvalidName, MissingRevision, HTTPError, \
                        BadRequest, Unauthorized, NotFound, Conflict, AlreadyExists, \
                        PreconditionFailed, ServerError, UnexpectedStatus, MalformedResponse, \
                        TransportError
