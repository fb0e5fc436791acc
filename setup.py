#!/usr/bin/env python

import os
from setuptools import setup

def read(fname):
    return open(os.path.join(os.path.dirname(__file__), fname)).read()


setup(
    name='bookgraph',
    version='0.1.0',
    description='GraphQL gateway over in-memory author and book records',
    long_description=read("README.rst"),
    packages=['bookgraph', 'bookgraph.graph', 'bookgraph.graphql'],
    package_data={
        'bookgraph': ['graphiql/index.html'],
    },
    keywords="graphql books authors",
    install_requires=[
        "flask>=2.2",
        "graphql-core>=3.2,<3.3",
        "pydantic>=2",
        "pydantic-settings>=2",
        "structlog>=22.1",
    ],
    extras_require={
        "test": ["precisely>=0.1.9", "pytest"],
    },
    entry_points={
        "console_scripts": [
            "bookgraph-server=bookgraph.server:main",
        ],
    },
    license="BSD-2-Clause",
    classifiers=[
        'Intended Audience :: Developers',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ],
)
