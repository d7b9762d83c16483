[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fxlife"
version = "0.1.0"
description = "Lifecycle event types, event loggers, cancellable contexts and call-stack helpers for application frameworks."
requires-python = ">=3.10"
dependencies = []
keywords = ["lifecycle", "events", "logging", "context", "call-stack"]
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
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fxlife"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
