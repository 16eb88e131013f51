#!/usr/bin/env python

from setuptools import setup

def long_description():
    try:
        with open('README.md') as f:
            return f.read()
    except OSError:
        return ''

setup(
    name = 'cellformat',
    version = '0.1.0',
    description = 'spreadsheet number formats for python',
    long_description = long_description(),
    long_description_content_type = 'text/markdown',
    install_requires = [],
    extras_require = {
        'test': ['pytest', 'exemplary'],
    },
    packages = ['cellformat'],
    python_requires = '>=3.8',
    classifiers = [
        'Development Status :: 2 - Pre-Alpha',
        'Topic :: Office/Business :: Financial :: Spreadsheet',
        'Topic :: Text Processing',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
    ],
    platforms = 'any',
    license = 'MIT License',
    keywords = ['spreadsheet', 'number format', 'excel'],
)
