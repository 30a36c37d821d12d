[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spotifind"
version = "0.1.0"
description = "Interactive terminal browser for a CSV song catalogue: search by genre, artist or tempo."
requires-python = ">=3.10"
dependencies = []
keywords = ["music", "csv", "songs", "search", "terminal", "tempo"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
spotifind = "spotifind.app:main"

[tool.hatch.build.targets.wheel]
packages = ["spotifind"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
