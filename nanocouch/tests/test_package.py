# -*- coding: utf-8 -*-
"""
nanocouch.tests.test_package
"""
import unittest
import nanocouch

class PackageTestCase(unittest.TestCase):

    def test_exports(self):
        expected = set([
        'Couch', 'Database', 'Document', 'defaults', 'CouchError', 'HTTPError', 'BadRequest',
        'Conflict', 'NotFound', 'AlreadyExists', 'PreconditionFailed', 'ServerError', 'Unauthorized',
        'UnexpectedStatus', 'MalformedResponse', 'TransportError', 'InvalidUrl', 'InvalidName',
        'MissingRevision'
        ])
        exported = set(e for e in dir(nanocouch) if not e.startswith('_'))
        self.assertTrue(expected <= exported)
        self.assertEqual(expected, set(nanocouch.__all__))

    def test_defaults(self):
        self.assertEqual(5984, nanocouch.defaults.port)
        self.assertIs(nanocouch.Document, nanocouch.defaults.types.doc)

def suite():
    suite = unittest.TestSuite()
    suite.addTest(unittest.defaultTestLoader.loadTestsFromTestCase(PackageTestCase))
    return suite

if __name__ == '__main__':
    unittest.main(defaultTest='suite')
