"""
phpbcrypt setup script
"""
#=============================================================================
# init script env -- ensure cwd = root of source dir
#=============================================================================
import os
root_dir = os.path.abspath(os.path.join(__file__, ".."))
os.chdir(root_dir)

#=============================================================================
# imports
#=============================================================================
import re

from setuptools import setup, find_packages

#=============================================================================
# version string
#=============================================================================

# read version string from phpbcrypt, without importing its dependencies
with open(os.path.join(root_dir, "phpbcrypt", "__init__.py")) as fh:
    version = re.search(r'^__version__ = "([^"]+)"', fh.read(), re.M).group(1)

#=============================================================================
# static text
#=============================================================================
SUMMARY = "convert PHP bcrypt hashes ($2y$) to the $2b$ format used elsewhere"

DESCRIPTION = """\
phpbcrypt validates bcrypt hash strings produced by PHP's ``password_hash()``
and rewrites their ``$2y$`` version tag to ``$2b$``, so they can be verified
by bcrypt implementations that don't recognize ``$2y$``.
No hashing is performed; only the hash string format is checked and adapted.
"""

KEYWORDS = """\
bcrypt php password hash conversion
"""

CLASSIFIERS = """\
Intended Audience :: Developers
License :: OSI Approved :: MIT License
Natural Language :: English
Operating System :: OS Independent
Programming Language :: Python :: 3
Programming Language :: Python :: Implementation :: CPython
Programming Language :: Python :: Implementation :: PyPy
Topic :: Security :: Cryptography
Topic :: Software Development :: Libraries
""".splitlines()

if '.dev' in version:
    CLASSIFIERS.append("Development Status :: 3 - Alpha")
else:
    CLASSIFIERS.append("Development Status :: 5 - Production/Stable")

#=============================================================================
# run setup
#=============================================================================
setup(
    # package info
    packages=find_packages(root_dir, include=["phpbcrypt", "phpbcrypt.*"]),
    zip_safe=True,
    python_requires=">=3.9",

    # metadata
    name="php-bcrypt-converter",
    version=version,
    license="MIT",

    description=SUMMARY,
    long_description=DESCRIPTION,
    keywords=KEYWORDS,
    classifiers=CLASSIFIERS,

    install_requires=[
        "typing_extensions>=4.7",
    ],
    extras_require={
        "tests": [
            "pytest",
            "pytest-archon",
            "bcrypt>=3.1.0",
        ],
    },
)

#=============================================================================
# eof
#=============================================================================
