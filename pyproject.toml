[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "duplexsponge"
version = "0.1.0"
description = "Poseidon duplex sponge over prime fields, with Grain LFSR parameter generation and absorbable encodings"
requires-python = ">=3.10"
dependencies = []
keywords = ["poseidon", "sponge", "hash", "prime field", "cryptography", "grain lfsr"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["duplexsponge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
