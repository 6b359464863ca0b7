[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ygzip"
version = "0.1.0"
description = "Huffman-coding file compressor and decompressor with SHA-256 verification"
requires-python = ">=3.10"
dependencies = []
keywords = ["huffman", "compression", "archive", "sha256", "entropy-coding"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving :: Compression",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ygzip = "ygzip.app:main"

[tool.hatch.build.targets.wheel]
packages = ["ygzip"]

[tool.pytest.ini_options]
addopts = "-ra"
