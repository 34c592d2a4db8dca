[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cpalgos"
version = "0.1.0"
description = "Classic competitive-programming algorithms: KMP string matching, MEX queries, tree path queries and a collection of sorting algorithms."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "competitive-programming",
    "kmp",
    "string-matching",
    "mex",
    "segment-tree",
    "lca",
    "binary-lifting",
    "sorting",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
cpalgos-kmp = "cpalgos.kmp:main"
cpalgos-mex = "cpalgos.mex:main"
cpalgos-lca = "cpalgos.lca:main"
cpalgos-sort = "cpalgos.sorting:main"

[tool.hatch.build.targets.wheel]
packages = ["cpalgos"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
