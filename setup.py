#!/usr/bin/env python
import re
import codecs
from setuptools import setup

VERSION = re.search(r"__version__ = '([^']+)'",
                    codecs.open('nanocouch/__init__.py', encoding='utf-8').read()).group(1)
README = codecs.open('README.rst', encoding='utf-8').read()
setup(
    name='nanocouch',
    version=VERSION,
    packages=['nanocouch', 'nanocouch.tests'],
    license='BSD',
    description='A nano-flavoured CouchDB client library',
    long_description=README,
    python_requires='>=3.8',
    install_requires=[
        'requests>=2.20',
        'tornado>=6.0',
    ],
    extras_require={
        'test': ['pytest'],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Database :: Front-Ends',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ]
)
