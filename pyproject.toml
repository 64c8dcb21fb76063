[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nettsuspend"
version = "0.1.0"
description = "A small blocking HTTP client with a bounded thread-backed suspend/wait helper for running work in the background."
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "client", "rest", "threads", "background", "suspend", "wait"]
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
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
nettsuspend = "nettsuspend.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["nettsuspend"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
