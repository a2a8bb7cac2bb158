[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labtrees"
version = "0.1.0"
description = "Tree exercises: an aging-priority task scheduler with AVL history, a serializable binary search tree, and subtree sizes of a rooted tree"
requires-python = ">=3.10"
dependencies = []
keywords = ["avl", "binary-search-tree", "heap", "scheduling", "tree", "subtree"]
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
test = ["pytest"]

[project.scripts]
labtrees-schedule = "labtrees.scheduler:main"
labtrees-bst = "labtrees.bst:main"
labtrees-subtree = "labtrees.subtree:main"

[tool.hatch.build.targets.wheel]
packages = ["labtrees"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
