from setuptools import setup, find_packages

setup(
    name="consensus",
    version="1.0.0",
    description="Generic RANSAC engine with pluggable model functions",
    packages=find_packages(include=["consensus", "consensus.*"]),
    install_requires=[
        "numpy>=1.24.0",
        "scipy>=1.10.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "consensus-fit=consensus.cli:main",
        ],
    },
    python_requires=">=3.9",
)
