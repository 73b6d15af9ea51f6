# setup.py
from setuptools import setup, find_packages

setup(
    name="build_scout",
    version="0.1.0",
    description="BuildScout: поиск изменённых страниц между двумя сборками Nuxt 2",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"build_scout": ["templates/*.j2"]},
    include_package_data=True,
    install_requires=[
        "click>=8.1",
        "pydantic>=2.0",
        "PyYAML>=6.0",
        "Jinja2>=3.1",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["build-scout=build_scout.cli:cli"],
    },
    python_requires=">=3.11",
)
