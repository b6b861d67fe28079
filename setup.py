"""Setup configuration for clique_points."""

from setuptools import setup, find_packages

setup(
    name="clique_points",
    version="0.1.0",
    description="Per-period interaction points between chat users",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires=[
        "pydantic>=2.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "clique-points=clique_points.__main__:main",
        ],
    },
)
