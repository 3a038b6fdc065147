[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stand"
version = "0.1.0"
description = "A CLI tool for explicit environment variable management"
requires-python = ">=3.11"
dependencies = [
    "pyyaml",
]
keywords = ["cli", "environment", "dotenv", "configuration", "toml"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
stand = "stand.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["stand"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
