[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pokertable"
version = "0.1.0"
description = "Game logic for a Texas hold'em table: cards, dealing, seating and a menu-driven game state machine"
requires-python = ">=3.10"
dependencies = []
keywords = ["poker", "texas-holdem", "cards", "deck", "game"]
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pokertable"]

[tool.pytest.ini_options]
addopts = "-ra"
