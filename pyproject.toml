[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rankcore"
version = "0.1.0"
description = "Ranking criteria, typo-tolerant matching and query rewriting helpers for full-text search engines"
requires-python = ">=3.10"
dependencies = []
keywords = ["search", "ranking", "levenshtein", "full-text", "relevance"]
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
    "Topic :: Text Processing :: Indexing",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rankcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
