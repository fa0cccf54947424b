[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chunkb64"
version = "0.1.0"
description = "Incremental, pull-based Base64 encoding and decoding in chunks of any size"
requires-python = ">=3.10"
dependencies = []
keywords = ["base64", "encoding", "decoding", "streaming", "incremental"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Utilities",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
chunkb64 = "chunkb64.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["chunkb64"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
