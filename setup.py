#!/usr/bin/env python

from pathlib import Path
from setuptools import setup, find_packages

project_root = Path(__file__).resolve().parent
long_description = project_root.joinpath('readme.rst').read_text('utf-8')

about = {}
with project_root.joinpath('kogrammar', '__version__.py').open('r', encoding='utf-8') as f:
    exec(f.read(), about)

scripts = ['bin/romanize.py']

optional_dependencies = {
    'dev': [                                            # Development env requirements
        'coverage',
        'pytest',
    ],
}

requirements = [
    'cli_command_parser>=2022.9.11',                    # bin/romanize.py
    'tzlocal',                                          # kogrammar.logging
]


setup(
    name=about['__title__'],
    version=about['__version__'],
    author=about['__author__'],
    author_email=about['__author_email__'],
    description=about['__description__'],
    long_description=long_description,
    packages=find_packages(include=('kogrammar', 'kogrammar.*')),
    classifiers=[
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
    ],
    python_requires='>=3.9',
    install_requires=requirements,
    extras_require=optional_dependencies,
    scripts=scripts,
)
