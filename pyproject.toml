[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "taskmanager"
version = "0.1.0"
description = "Interactive shell and YAML configuration reader for managed services"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["process", "supervisor", "services", "yaml", "shell"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
taskmanager = "taskmanager.controller:main"

[tool.setuptools.packages.find]
include = ["taskmanager*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
