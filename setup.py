#!/usr/bin/env python
# -*- coding: utf-8 -*-

from setuptools import setup
setup(name='grammodel',
    version='0.1',
    description='Resolution of grammar productions into a validated, immutable grammar model',
    install_requires=['Jinja2>=2.7.0'],
    python_requires='>=3.10',
    packages=['grammodel', 'grammodel.tests'],
    package_dir={'': 'src'},
    license = "Boost",
    test_suite = "grammodel.tests",
    classifiers=[
        # Supported python versions
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',

        # License
        'License :: OSI Approved :: Boost Software License 1.0 (BSL-1.0)',

        # Topics
        'Topic :: Software Development :: Libraries',
    ]
    )
