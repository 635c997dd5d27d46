[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "connectorcore"
version = "0.1.0"
description = "Building blocks for local inter-application connectors: messages, identifiers, a bounded integer queue, connection directories and loopback TCP endpoints"
requires-python = ">=3.10"
dependencies = []
keywords = ["ipc", "connector", "messaging", "queue", "tcp", "sockets"]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["connectorcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
