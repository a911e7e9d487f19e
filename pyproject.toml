[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "umd"
version = "0.1.0"
description = "Universal Markdown building blocks: frontmatter, sanitizing, plugin syntax and extended tables"
requires-python = ">=3.10"
dependencies = []
keywords = ["markdown", "wiki", "frontmatter", "sanitizer", "tables", "bootstrap", "plugins"]
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
    "Topic :: Text Processing :: Markup :: Markdown",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["umd"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
