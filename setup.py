import os
from setuptools import find_packages, setup


def read(fname):
    return open(os.path.join(os.path.dirname(__file__), fname)).read()


long_description = read("README.md") if os.path.isfile("README.md") else ""

setup(
    name="blockchain-reward",
    version="0.1.0",
    author="Delweng Zheng",
    author_email="delweng@gmail.com",
    description="Decompose the block reward of Ethereum-like blocks via JSON-RPC",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(
        exclude=[
            "tests",
        ]
    ),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
    python_requires=">=3.8,<4",
    install_requires=[
        "click>=8.0.3",
        "requests",
        "eth-utils",
        "web3>=6,<7",
        "pyyaml",
        "jsonlines",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "blockchain-reward=blockchainreward.cli:cli",
        ],
    },
)
