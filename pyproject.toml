[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xtrlog"
version = "0.1.0"
description = "Helpers for an asynchronous logger: text sanitising, alignment, storage interface and a local command protocol"
requires-python = ">=3.10"
dependencies = []
keywords = ["logging", "sanitize", "ipc", "unix-socket", "protocol"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Logging",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xtrlog"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
