[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ebobo"
version = "0.1.0"
description = "An emoji arena game: fighter storage, request authentication, matchmaking and an HTTP API client."
requires-python = ">=3.10"
keywords = ["game", "arena", "matchmaking", "emoji", "sqlite"]
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
    "Topic :: Games/Entertainment",
]
dependencies = [
    "httpx",
]

[project.optional-dependencies]
test = [
    "pytest",
    "httpx",
    "starlette",
]

[project.scripts]
ebobo-migrate = "ebobo.migration:main"

[tool.hatch.build.targets.wheel]
packages = ["ebobo"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
