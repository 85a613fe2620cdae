[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nistdrbg"
version = "0.1.0"
description = "Deterministic random bit generators from NIST SP 800-90A Rev. 1: Hash_DRBG, HMAC_DRBG and CTR_DRBG"
requires-python = ">=3.10"
keywords = ["drbg", "csprng", "nist", "sp800-90a", "random"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]
dependencies = [
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["nistdrbg"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
