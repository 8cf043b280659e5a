import os

from setuptools import find_packages, setup


def read_file(filename):
    """Read a file in the package."""
    full_filename = os.path.join(
        os.path.abspath(os.path.dirname(__file__)), filename
    )
    with open(full_filename) as f:
        content = f.read()
    return content


name = "fastly-client"
description = "Client for the Fastly control-plane API"
long_description = read_file("README.rst")
url = "https://developer.fastly.com/reference/api/"
author = "fastly-client developers"
author_email = "fastly-client@example.com"
license = "MIT"
classifiers = [
    "Development Status :: 4 - Beta",
    "Programming Language :: Python :: 3",
    "License :: OSI Approved :: MIT License",
    "Intended Audience :: Developers",
    "Topic :: Internet :: WWW/HTTP",
]
keywords = "fastly cdn api"

# Installation (application runtime) requirements
install_requires = [
    "requests>=2.27",
    "structlog>=21.1",
    "pydantic>=2.0,<3",
    "python-dateutil>=2.8",
]

# Test dependencies
tests_require = [
    "pytest>=7.0",
    "responses>=0.21",
]

# Optional installation dependencies
extras_require = {
    # Recommended extra for development
    "dev": tests_require
}

setup(
    name=name,
    version="0.1.0",
    description=description,
    long_description=long_description,
    long_description_content_type="text/x-rst",
    url=url,
    author=author,
    author_email=author_email,
    license=license,
    classifiers=classifiers,
    keywords=keywords,
    packages=find_packages(exclude=("tests",)),
    python_requires=">=3.9",
    install_requires=install_requires,
    extras_require=extras_require,
)
