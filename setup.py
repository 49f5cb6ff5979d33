"""Installation information/metadata."""
import re
from pathlib import Path

import setuptools

ROOT = Path(__file__).resolve().parent

ontoshape_version = re.search(
    r'^__version__ = "(?P<version>[^"]+)"',
    (ROOT / "ontoshape" / "__init__.py").read_text(encoding="utf-8"),
    re.MULTILINE,
).group("version")
assert "." in ontoshape_version

long_description = (ROOT / "README.md").read_text(encoding="utf-8")

setuptools.setup(
    name="ontoshape",
    version=ontoshape_version,
    description="Derive SHACL shapes from OWL/RDFS ontologies",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=setuptools.find_packages(include=["ontoshape", "ontoshape.*"]),
    python_requires=">=3.9",
    install_requires=[
        "httpx>=0.24",
        "pydantic>=2.0",
        "PyYAML>=6.0",
        "rdflib>=7.0",
    ],
    extras_require={
        "testing": [
            "pytest>=7.0",
            "pytest-httpx>=0.21",
        ],
    },
    entry_points={
        "console_scripts": ["ontoshape = ontoshape.cli:main"],
    },
)
