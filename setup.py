"""
Setup.py script for arraydeque
"""
from setuptools import setup, find_packages
# To use a consistent encoding
from codecs import open
import os

here = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(here, 'README.rst'), encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='arraydeque',
    version='0.1.0',
    description='Array-backed deque implementation',
    long_description=long_description,

    license='MIT',

    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Topic :: Software Development :: Libraries',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
    ],
    keywords='deque ring-buffer collections',

    packages=find_packages(include=['arraydeque', 'arraydeque.*']),
    python_requires='>=3.9',

    install_requires=['py'],
    extras_require={
        'test': ['pytest'],
    },
)
