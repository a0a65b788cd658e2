[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "housekeeper"
version = "0.1.0"
description = "Plan directory clean-ups: find junk files, non-standard extensions and empty directories."
requires-python = ">=3.10"
dependencies = []
keywords = ["cleanup", "filesystem", "purge", "rename", "extensions", "empty directories"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["housekeeper"]

[tool.pytest.ini_options]
addopts = "-ra"
