"""Setup configuration for List Pages package."""

from setuptools import setup, find_namespace_packages

setup(
    name="list-pages",
    version="1.0.0",
    description="List pages with date facets over a DuckDB item index",
    author="Alex",
    author_email="",
    packages=find_namespace_packages(include=["api*", "config*", "src*"]),
    package_data={
        "config": ["*.yaml"],
        "api": ["static/*"],
    },
    python_requires=">=3.11",
    install_requires=[
        "duckdb>=1.0.0",
        "pandas>=2.1.0",
        "fastapi>=0.110.0",
        "uvicorn>=0.27.0",
        "pydantic>=2.6.0",
        "pydantic-settings>=2.2.0",
        "python-dotenv>=1.0.0",
        "pyyaml>=6.0",
        "tzdata>=2024.1",
    ],
    extras_require={
        "dev": [
            "pytest>=8.0.0",
            "pytest-cov>=4.1.0",
            "httpx>=0.26.0",
            "black>=24.1.0",
            "ruff>=0.2.0",
        ],
    },
)
