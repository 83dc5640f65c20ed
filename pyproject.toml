[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labkit"
version = "0.1.0"
description = "Small teaching programs: a backpropagation network, word-ladder search, suffix heapsort, an ELIZA chatbot and a dragon-curve renderer"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "neural-network",
    "backpropagation",
    "trie",
    "doublets",
    "word-ladder",
    "heapsort",
    "eliza",
    "chatbot",
    "dragon-curve",
    "pbm",
    "pgm",
    "ppm",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labkit-rdata = "labkit.rdata:main"
labkit-train = "labkit.train:main"
labkit-doublets = "labkit.doublets:main"
labkit-heapsort = "labkit.binaryheap:main"
labkit-unique = "labkit.unique:main"
labkit-eliza = "labkit.eliza:main"
labkit-dragon = "labkit.dragon:main"

[tool.hatch.build.targets.wheel]
packages = ["labkit"]

[tool.hatch.build.targets.sdist]
include = ["labkit", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
