from __future__ import annotations

import os

from setuptools import setup


def read_version() -> str:
    """Read the version, preferring the PKG_VERSION environment variable."""
    env_version = os.getenv("PKG_VERSION", "").strip()
    if env_version:
        return env_version.lstrip("v")
    return "1.0.0"


setup(
    name="cantor-point-set",
    version=read_version(),
    description="Compact set of 2D integer points backed by a single bitmap.",
    long_description="Compact set of 2D integer points backed by a single bitmap.",
    long_description_content_type="text/plain",
    packages=["point_set"],
    python_requires=">=3.10",
    install_requires=[],
)
