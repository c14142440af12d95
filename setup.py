from setuptools import setup

setup(
    name="digraph",
    version="0.1.0",
    description="Generic directed graph with traversal and path finding",
    license="MIT",
    packages=["digraph"],
    python_requires=">=3.7",
    install_requires=["PyYAML>=5.1"],
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["digraph = digraph.cli:main"]},
)
