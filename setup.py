from setuptools import find_packages, setup

setup(
    name="initkit",
    version="0.3.0",
    description="initkit - install and drive long-running processes as native OS services",
    packages=find_packages(include=["initkit", "initkit.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2",  # Config and output schemas
        "jinja2",  # Unit file templates
        "typer<0.26",  # CLI (later releases vendor click; the CLI reads click.get_current_context())
        "click",  # Typer context and usage errors
        "rich",  # Terminal formatting
        "pyyaml",  # YAML display output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
    },
    entry_points={
        "console_scripts": [
            "initkit=initkit.cli:main",
        ],
    },
)
