#!/usr/bin/env python
''' Setup script '''

from setuptools import find_packages, setup

with open('requirements.txt') as req_file:
    REQUIREMENTS = req_file.read()

with open('test-requirements.txt') as req_file:
    TEST_REQUIREMENTS = req_file.read()

setup(
    name="revspec",
    author="Bahtiar `kalkin-` Gadimov",
    author_email="bahtiar@gadimov.de",
    python_requires='>=3.10',
    classifiers=[
        "Operating System :: POSIX",
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'License :: OSI Approved :: GNU Affero General Public License v3 or later (AGPLv3+)',  # noqa: E501
        'Topic :: Software Development :: Version Control :: Git'
    ],
    description="git rev-parse: sort revisions, ranges, options and paths",
    keywords="git GitPython rev-parse revision",
    long_description=
    '''Interprets the arguments of git plumbing wrappers. Revisions and ranges are resolved to object ids, options and paths are passed through, optionally quoted for the shell.''',
    long_description_content_type='text/markdown',
    install_requires=REQUIREMENTS,
    extras_require={'test': TEST_REQUIREMENTS.splitlines()},
    entry_points={
        'console_scripts': [
            'revspec=revspec.main:cli',
        ],
    },
    packages=find_packages(exclude=['tests', 'tests.*']),
    version="1.0.0")
