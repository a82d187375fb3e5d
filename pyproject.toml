[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ntree"
version = "0.1.0"
description = "A generic N-ary tree with subtree deletion, compression, level-order traversal and vertical text rendering"
requires-python = ">=3.10"
dependencies = []
keywords = ["tree", "n-ary", "data-structures", "traversal", "level-order"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ntree-demo = "ntree.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ntree"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
