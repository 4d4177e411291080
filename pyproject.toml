[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pebicoin"
version = "1.0.0"
description = "A small proof-of-work cryptocurrency: blockchain, miner, seed node, addresses, signing and a key wallet"
requires-python = ">=3.10"
keywords = [
    "cryptocurrency",
    "blockchain",
    "proof-of-work",
    "mining",
    "wallet",
    "base58",
    "secp256k1",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
    "Topic :: Security :: Cryptography",
]
dependencies = [
    "cryptography",
    "pycryptodome",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pebicoin = "pebicoin.cli:main"
pebiminer = "pebicoin.miner_cli:main"
pebicoin-keygen = "pebicoin.simple_wallet:main"

[tool.hatch.build.targets.wheel]
packages = ["pebicoin"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
