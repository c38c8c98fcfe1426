# Python version 3.7 and up.
from setuptools import setup, find_packages
from codecs import open
from os import path


here = path.abspath(path.dirname(__file__))

# Get the long description from the README file
with open(path.join(here, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

install_reqs = []

setup(
    version='1.0.0',
    name='singly_linked_list',
    description='singly linked list with traversal-derived tail and size',
    keywords=('linked list', 'data structure'),
    long_description_content_type="text/markdown",
    long_description=long_description,
    license='public domain',
    package_dir={"": "."},
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.7",
    install_requires=install_reqs,
    classifiers=[
        'Intended Audience :: Developers',
        'Programming Language :: Python :: 3'
    ],
)
