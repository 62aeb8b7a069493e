import os
import re

from setuptools import setup, find_packages

# Utility function to read the README file.
# Used for the long_description.
def read(fname):
    with open(os.path.join(os.path.dirname(__file__), fname)) as f:
        return f.read()

# Read metadata from version file
metadata = dict(re.findall("__([a-z]+)__ = '([^']+)'", read(os.path.join('bilatspyr', '_version.py'))))

setup(
    name = 'bilatspyr',
    version = metadata['version'],
    description = ("Bilateral steerable pyramids: steerable pyramids of depth-extended images."),
    license = "BSD",
    keywords = "numpy, scipy, steerable pyramid, bilateral, depth",
    packages=find_packages(exclude=["*.tests", "*.tests.*", "tests.*", "tests"]),
    long_description=read('README.rst'),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Programming Language :: Python :: 3",
    ],

    install_requires=[ 'numpy', 'scipy', ],

    extras_require={
        'test': [ 'pytest', 'coverage', ],
        'examples': [ 'matplotlib', ],
    },
)

# vim:sw=4:sts=4:et
