[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shellpath"
version = "0.33.0"
description = "Contract and shorten working-directory paths for shell prompts."
requires-python = ">=3.10"
keywords = ["prompt", "shell", "path", "fish", "directory"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]
dependencies = [
    "regex",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["shellpath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
