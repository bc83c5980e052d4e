[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fittrack"
version = "0.1.0"
description = "Fitness tracker: parse step and training records, compute distance, speed and calories"
requires-python = ">=3.10"
dependencies = []
keywords = ["fitness", "tracker", "steps", "calories", "training"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fittrack = "fittrack.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fittrack"]

[tool.pytest.ini_options]
addopts = "-ra"
