# -*- coding: utf-8 -*-
"""
(C) Rgc <2020956572@qq.com>
All rights reserved
create time '2026/10/16 10:12'

Usage:

"""

import os
from codecs import open

from setuptools import setup

here = os.path.abspath(os.path.dirname(__file__))

packages = ['consistent_hash_ring', 'consistent_hash_ring.utils']

requires = [
    'Flask>=2.0',
    'redis>=4.0',
]

extras_require = {
    'test': [
        'pytest>=6.0',
    ],
}

about = {}
with open(os.path.join(here, 'consistent_hash_ring', '__version__.py'), 'r', 'utf-8') as f:
    exec(f.read(), about)

with open(os.path.join(here, 'README.md'), 'r', 'utf-8') as f:
    readme = f.read()

setup(
    name=about['__title__'],
    version=about['__version__'],
    description=about['__description__'],
    long_description=readme,
    long_description_content_type='text/markdown',
    author=about['__author__'],
    author_email=about['__author_email__'],
    license=about['__license__'],
    packages=packages,
    include_package_data=True,
    python_requires=">=3.7",
    install_requires=requires,
    extras_require=extras_require,
    zip_safe=False,
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Natural Language :: English',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy'
    ],
)
