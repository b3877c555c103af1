[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lldsystems"
version = "0.1.0"
description = "Small in-process systems: a publish/subscribe service and a tic-tac-toe game engine"
requires-python = ">=3.10"
dependencies = []
keywords = ["pubsub", "publish-subscribe", "tic-tac-toe", "game", "in-process"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lldsystems"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
