[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oxengine"
version = "0.1.0"
description = "A small game engine core: a pygame window, keyboard input tracking, coloured logging and assertions."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game engine", "window", "input", "logging", "pygame"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
oxengine = "oxengine.application:main"

[tool.hatch.build.targets.wheel]
packages = ["oxengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
