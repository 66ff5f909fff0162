[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blockwire"
version = "0.1.0"
description = "Encoding and decoding of block-game network protocol packets"
requires-python = ">=3.10"
dependencies = []
keywords = ["protocol", "packets", "varint", "nbt", "game-server"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["blockwire"]

[tool.pytest.ini_options]
addopts = "-ra"
