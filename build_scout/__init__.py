# build_scout/__init__.py
"""
BuildScout package initializer.
Defines package version and exposes CLI.
"""
__version__ = "0.1.0"

# Expose CLI entry point; `build_scout.cli` stays the module
from build_scout.cli import cli as main_cli  # noqa: E402

__all__ = ["__version__", "main_cli"]
