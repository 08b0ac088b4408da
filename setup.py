#!/usr/bin/env python

from setuptools import setup
from pdfscribe import __version__ as version

with open('README.rst') as f:
    long_description = f.read()

setup(
    name='pdfscribe',
    version=version,
    description='Low-level streaming PDF object writer',
    long_description=long_description,
    platforms='Independent',
    packages=['pdfscribe', 'pdfscribe.objects', 'pdfscribe.pdfwriter'],
    python_requires='>=3.6',
    extras_require={'test': ['pytest']},
    license='MIT',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries',
        'Topic :: Text Processing',
        'Topic :: Printing',
    ],
    keywords='pdf writer fonts cmap',
)
