[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ggcli"
version = "1.0.2"
description = "A command-line helper that streamlines everyday Git operations"
requires-python = ">=3.10"
dependencies = []
keywords = ["git", "cli", "version-control", "workflow", "interactive"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Version Control :: Git",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ggc = "ggcli.router:main"

[tool.hatch.build.targets.wheel]
packages = ["ggcli"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
