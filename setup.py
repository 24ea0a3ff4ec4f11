#!/usr/bin/env python3
# encoding: utf-8
"""
setup.py

Copyright (c) 2009-2017 Exa Networks. All rights reserved.
"""

import os

import setuptools


def filesOf(directory):
    files = []
    for l, d, fs in os.walk(directory):
        if not d:
            for f in fs:
                files.append(os.path.join(l, f))
    return files


data_files = [
    ('etc/ripcodec', filesOf('etc/ripcodec')),
]

setuptools.setup(
    name='ripcodec',
    version='1.0.0',
    description='RIP version 1 and 2 packet encoder and decoder (RFC 1058, RFC 2453)',
    license='BSD-3-Clause',
    python_requires='>=3.12',
    package_dir={'': 'src'},
    packages=setuptools.find_packages(where='src'),
    install_requires=[],
    extras_require={
        'test': [
            'pytest>=7.0',
            'hypothesis>=6.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'ripcodec = ripcodec.application.main:main',
        ],
    },
    data_files=data_files,
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: System Administrators',
        'Intended Audience :: Telecommunications Industry',
        'License :: OSI Approved :: BSD License',
        'Programming Language :: Python :: 3',
        'Topic :: Internet',
        'Topic :: System :: Networking',
    ],
)
