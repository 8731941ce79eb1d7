[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dslabs"
version = "0.1.0"
description = "Small data-structure and image exercises: PNG filters, stacks and queues, linked lists, a deque and binary trees"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = [
    "data structures",
    "binary tree",
    "linked list",
    "deque",
    "stack",
    "queue",
    "image filters",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
dslabs-filters = "dslabs.filters:main"
dslabs-treefun = "dslabs.treefun:main"
dslabs-deque = "dslabs.deque:main"

[tool.hatch.build.targets.wheel]
packages = ["dslabs"]

[tool.pytest.ini_options]
addopts = "-ra"
