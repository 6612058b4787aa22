[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "contestkit"
version = "0.1.0"
description = "Solutions to classic algorithmic problems: monotonic stacks, sliding windows, segment trees, tree queries and more."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "segment tree",
    "fenwick tree",
    "monotonic stack",
    "competitive programming",
    "data structures",
    "graphs",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["contestkit*"]

[tool.pytest.ini_options]
addopts = "-ra"
