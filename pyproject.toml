[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "dynalgo"
version = "0.1.0"
description = "Event-driven framework for algorithmic trading bots with candle-close scheduling and a start/pause/stop control panel"
requires-python = ">=3.10"
dependencies = []
keywords = ["trading", "algorithmic-trading", "bot", "candles", "events", "strategy"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dynalgo = "dynalgo.gui:main"

[tool.setuptools]
packages = ["dynalgo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
