# encoding: utf-8
"""
nanocouch.config

Internal state
"""

import os
import json as _json
from .atoms import adict, Document

defaults = adict({
            "host":"http://127.0.0.1",
            "port":5984,
            "url":os.environ.get('COUCHDB_URL'),
            "types":adict({
                "doc":Document,
                "dict":adict
            }),
            "http":adict({
                "timeout":60
            })
         })

class json(object):
    @classmethod
    def decode(cls, string, **opts):
        """Decode the given JSON string.

        :param string: the JSON string (or utf-8 bytes) to decode
        :return: the corresponding Python data structure
        :rtype: object
        """
        if isinstance(string, bytes):
            string = string.decode('utf-8')
        return _json.loads(string, object_hook=defaults.types.dict, **opts)

    @classmethod
    def encode(cls, obj, **opts):
        """Encode the given object as a JSON string.

        :param obj: the Python data structure to encode
        :return: the corresponding JSON string
        :rtype: str
        """
        return _json.dumps(obj, allow_nan=False, ensure_ascii=False, **opts)
