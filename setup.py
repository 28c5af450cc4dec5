from setuptools import find_packages, setup

setup(
    name="mdxref",
    version="0.1.0",
    description="Markdown cross-reference and link integrity checker for note collections",
    author="William Wieselquist",
    packages=find_packages(include=["mdxref", "mdxref.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Config and report models
        "typer>=0.12,<0.26",  # CLI (0.26+ vendors click; code catches click exceptions)
        "click>=8.2",  # CLI runtime (separate stdout/stderr in tests)
        "rich",  # Terminal formatting
        "jinja2",  # Template rendering for CLI outputs
        "PyYAML",  # YAML report output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
        "dev": [
            "pytest>=7.0",
            "pytest-timeout>=2.1",
            "pytest-xdist>=3.0",  # Parallel test execution
            "pre-commit",  # Git hook management
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "mdxref=mdxref.cli:main",
        ],
    },
)
