[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tunequeue"
version = "0.1.0"
description = "An interactive terminal playlist manager with ID search, a rating index, sorting, playback history and an artist blocklist"
requires-python = ">=3.10"
dependencies = []
keywords = ["playlist", "music", "songs", "cli", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Players",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tunequeue = "tunequeue.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tunequeue"]

[tool.pytest.ini_options]
addopts = "-ra"
