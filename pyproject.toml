[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "subsystem1"
version = "1.0.0"
description = "A command-driven TCP subsystem that keeps status windows, opened on request from a master system"
requires-python = ">=3.10"
dependencies = []
keywords = ["tcp", "server", "subsystem", "remote-control", "asyncio", "signals"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Framework :: AsyncIO",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
subsystem1 = "subsystem1.app:main"

[tool.hatch.build.targets.wheel]
packages = ["subsystem1"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
