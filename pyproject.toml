[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "comlayout"
version = "0.1.0"
description = "XML-described window layouts with vertical and horizontal box sizing, plus a key = value configuration file format that keeps comments."
requires-python = ">=3.10"
dependencies = []
keywords = ["layout", "gui", "xml", "markup", "configuration", "ini"]
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
    "Topic :: Software Development :: User Interfaces",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["comlayout"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
