# mypy: disable-error-code="import-untyped, import-not-found"
#!/usr/bin/env python
"""Setup script for the project."""

import re

from setuptools import find_packages, setup

with open("README.md", "r", encoding="utf-8") as f:
    long_description: str = f.read()


with open("prof/requirements.txt", "r", encoding="utf-8") as f:
    requirements: list[str] = f.read().splitlines()


with open("prof/requirements-dev.txt", "r", encoding="utf-8") as f:
    requirements_dev: list[str] = f.read().splitlines()


with open("prof/__init__.py", "r", encoding="utf-8") as fh:
    version_re = re.search(r"^__version__ = \"([^\"]*)\"", fh.read(), re.MULTILINE)
assert version_re is not None, "Could not find version in prof/__init__.py"
version: str = version_re.group(1)


setup(
    name="prof-client",
    version=version,
    description="Async Python client for the prof profile service",
    long_description=long_description,
    long_description_content_type="text/markdown",
    python_requires=">=3.11",
    install_requires=requirements,
    tests_require=requirements_dev,
    zip_safe=False,
    extras_require={"dev": requirements_dev},
    include_package_data=True,
    package_data={"prof": ["requirements.txt", "requirements-dev.txt"]},
    packages=find_packages(include=["prof", "prof.*"]),
)
