#!/usr/bin/env python3
"""
Setup script для lconvert
"""

from setuptools import setup, find_packages
import os
import sys

# Импортируем версию
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))
from lconvert import __version__

# Читаем README для long_description
def read_file(filename):
    with open(os.path.join(os.path.dirname(__file__), filename), encoding='utf-8') as f:
        return f.read()

setup(
    name='lconvert',
    version=__version__,
    description='Keyboard layout text converter - перевод текста, набранного не в той раскладке',
    long_description=read_file('README.md'),
    long_description_content_type='text/markdown',
    author='Anton',
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.9',
    install_requires=[
        'fastapi',       # HTTP service (POST /api/convert)
        'pydantic>=2',   # Request schema
        'uvicorn',       # ASGI server for `lconvert serve`
    ],
    extras_require={
        'dev': [
            'pytest>=7.0',
            'pytest-cov',
            'pytest-timeout',
            'httpx',     # fastapi.testclient
        ],
    },
    entry_points={
        'console_scripts': [
            'lconvert=lconvert.cli:main',
        ],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Topic :: Text Processing',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: 3.13',
        'Framework :: FastAPI',
    ],
)
