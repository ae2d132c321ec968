#!/usr/bin/env python
import re
from pathlib import Path
from setuptools import find_packages, setup

ROOT = Path(__file__).parent
VERSION_RE = re.compile(r'''__version__ = ['"]([0-9.]+)['"]''')

requires = [
    'botocore>=1.34.0,<2.0a.0',
]


def get_version():
    init = (ROOT / 'crc32combine' / '__init__.py').read_text()
    return VERSION_RE.search(init).group(1)


setup(
    name='crc32combine',
    version=get_version(),
    description='Combine CRC-32 checksums without rehashing the data',
    long_description=(ROOT / 'README.rst').read_text(),
    author='Amazon Web Services',
    url='https://github.com/boto/crc32combine',
    packages=find_packages(exclude=['tests*']),
    include_package_data=True,
    install_requires=requires,
    extras_require={
        'crt': 'botocore[crt]>=1.34.0,<2.0a.0',
        'tests': 'pytest',
    },
    license="Apache License 2.0",
    python_requires=">= 3.9",
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Natural Language :: English',
        'License :: OSI Approved :: Apache Software License',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: 3.13',
    ],
)
