[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tslibs"
version = "0.1.0"
description = "Thread-safe stack and queue containers, with demos of concurrent use"
requires-python = ">=3.10"
dependencies = []
keywords = ["thread-safe", "stack", "queue", "concurrency", "containers"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tslibs-demo = "tslibs.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["tslibs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
