[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crylib"
version = "0.1.0"
description = "Pure-Python fixed-width unsigned big integers and the ChaCha20 stream cipher"
requires-python = ">=3.10"
dependencies = []
keywords = ["cryptography", "chacha20", "stream-cipher", "bigint", "multi-precision"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["crylib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
