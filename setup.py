# pylint: disable=missing-module-docstring
# ruff: noqa

from pathlib import Path

from setuptools import find_packages, setup


def read_long_description() -> str:
    """Return README contents for PyPI description."""
    readme_path = Path(__file__).with_name("README.md")
    return readme_path.read_text(encoding="utf-8") if readme_path.exists() else "TrendLens Engine"


setup(
    name="trendlens-engine",
    version="0.1.0",
    description="Growth, categorization, relatedness and forecasting for popularity trends",
    long_description=read_long_description(),
    long_description_content_type="text/markdown",
    python_requires=">=3.11",
    packages=find_packages(include=["trend_engine", "trend_engine.*"]),
    include_package_data=True,
    install_requires=[
        "pydantic>=2.0",
        "pandas>=2.0",
        "numpy>=1.24",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "trendlens-report = trend_engine.cli_entrypoints:report",
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
