[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "notegraph"
version = "0.1.0"
description = "WikiLink extraction, link resolution and rule-based note classification for Markdown vaults"
requires-python = ">=3.10"
dependencies = []
keywords = ["markdown", "wikilink", "notes", "knowledge-graph", "vault", "links"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup :: Markdown",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["notegraph"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
