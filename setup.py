#!/usr/bin/env python
"""
Setup.py distribution file for ansipaint.
"""
# std imports
import os
import codecs

# 3rd party
import setuptools


def _get_here(fname):
    return os.path.join(os.path.dirname(__file__), fname)


def _get_version(fname, key='package'):
    import json
    with open(fname, 'r') as fin:
        return json.load(fin)[key]


def main():
    """Setup.py entry point."""
    setuptools.setup(
        name='ansipaint',
        version=_get_version(
            _get_here(os.path.join('ansipaint', 'version.json'))),
        description=(
            "Paint terminal text with ANSI SGR style expressions"),
        long_description=codecs.open(
            _get_here('README.rst'), 'rb', 'utf8').read(),
        license='MIT',
        packages=['ansipaint'],
        package_data={
            'ansipaint': ['*.json'],
            '': ['*.rst'],
        },
        python_requires='>=3.8',
        extras_require={
            'test': ['pytest'],
        },
        zip_safe=True,
        classifiers=[
            'Intended Audience :: Developers',
            'Natural Language :: English',
            'Development Status :: 4 - Beta',
            'Environment :: Console',
            'License :: OSI Approved :: MIT License',
            'Operating System :: POSIX',
            'Programming Language :: Python :: 3',
            'Topic :: Software Development :: Libraries',
            'Topic :: Software Development :: User Interfaces',
            'Topic :: Terminals'
        ],
        keywords=['ansi', 'sgr', 'terminal', 'color', 'escape-sequence',
                  'console', 'style'],
    )


if __name__ == '__main__':
    main()
