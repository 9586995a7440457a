from setuptools import setup, find_namespace_packages

setup(
    name="percolation",
    version="0.1.0",
    packages=find_namespace_packages(include=["percolation", "percolation.*"], exclude=["percolation.tests"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "PyYAML",
        "matplotlib",
        "scikit-image",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "percolation_stats=percolation.scripts.run_stats:main",
        ]
    },
)
