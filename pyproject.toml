[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crumbs"
version = "0.1.0"
description = "Work-item coordination model: crumbs, trails, properties, metadata, links and stashes"
requires-python = ">=3.11"
dependencies = []
keywords = ["tasks", "work items", "coordination", "trails", "stash", "scheduling"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["crumbs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"
