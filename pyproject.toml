[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "asiokit"
version = "1.0.0"
description = "RFC 4122 UUID parsing and generation, and a configurable application logger"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["uuid", "rfc4122", "logging", "logger", "yaml"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: System :: Logging",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["asiokit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
