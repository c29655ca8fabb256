[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "restwire"
version = "0.1.0"
description = "Fluent route building, path templates, parameter documentation and request/response wrappers for RESTful web services"
requires-python = ">=3.10"
dependencies = []
keywords = ["rest", "http", "routing", "web-service", "path-template"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["restwire"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
