[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tictacnet"
version = "0.1.0"
description = "Tic-Tac-Toe against a small neural network that learns from random play and from your games"
requires-python = ">=3.10"
dependencies = []
keywords = ["tic-tac-toe", "neural-network", "reinforcement-learning", "game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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

[project.scripts]
tictacnet = "tictacnet.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tictacnet"]

[tool.pytest.ini_options]
addopts = "-ra"
