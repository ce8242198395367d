# Python version 3.9 and up.
from setuptools import setup, find_packages
from codecs import open
from os import path


here = path.abspath(path.dirname(__file__))

# Get the long description from the README file
with open(path.join(here, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

install_reqs = ["pydantic>=2", "p2pd"]

setup(
    version='1.0.0',
    name='linked_container',
    description='generic container backed by a singly-linked list',
    keywords=('linked list container'),
    long_description_content_type="text/markdown",
    long_description=long_description,
    author='Matthew Roberts',
    author_email='matthew@roberts.pm',
    license='public domain',
    package_dir={"": "."},
    packages=find_packages(exclude=("tests",)),
    python_requires=">=3.9",
    install_requires=install_reqs,
    classifiers=[
        'Intended Audience :: Developers',
        'Programming Language :: Python :: 3'
    ],
)
