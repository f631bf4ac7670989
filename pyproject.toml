[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wfrest"
version = "0.9.7"
description = "HTTP verbs, aspect hooks and URL, query, path, file and string helpers for HTTP services"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "rest", "url", "query-string", "utilities"]
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
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wfrest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
