[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "semaphore_kit"
version = "0.1.0"
description = "Merkle tree building blocks: Poseidon, Keccak-256 and SHA3-256 node hashers, supported depth configuration and file-backed vector storage"
requires-python = ">=3.10"
dependencies = [
    "pycryptodome",
]
keywords = ["poseidon", "keccak", "sha3", "merkle", "semaphore", "bn254", "mmap"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["semaphore_kit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
