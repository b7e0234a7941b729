[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quickfetch"
version = "0.1.0"
description = "Building blocks for HTTP requests: URL, method, ordered headers and body"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "https", "request", "headers", "body"]
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["quickfetch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
