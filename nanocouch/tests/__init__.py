#!/usr/bin/env python
# encoding: utf-8
"""
nanocouch.tests
"""

import unittest

def suite():
    from nanocouch.tests import test_package, test_mapping, test_async, test_blocking
    suite = unittest.TestSuite()
    suite.addTest(test_package.suite())
    suite.addTest(test_mapping.suite())
    suite.addTest(test_async.suite())
    suite.addTest(test_blocking.suite())
    return suite


if __name__ == '__main__':
    unittest.main(defaultTest='suite')
