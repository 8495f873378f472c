[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cisfun"
version = "0.1.0"
description = "A minimal command-line shell that runs programs found on PATH"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "command-line", "interpreter", "repl"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cisfun = "cisfun.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["cisfun"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
