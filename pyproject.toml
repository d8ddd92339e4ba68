[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "proxymtg"
version = "0.1.0"
description = "Build printable HTML and text proxies for Magic: The Gathering cards and decklists"
requires-python = ">=3.10"
dependencies = []
keywords = ["mtg", "magic-the-gathering", "proxy", "decklist", "html", "cards"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Text Processing :: Markup :: HTML",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
proxymtg = "proxymtg.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["proxymtg"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
