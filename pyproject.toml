[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsexercises"
version = "0.1.0"
description = "Small data-structure exercises: complex-number vectors and sorting, an infix expression evaluator, and the largest rectangle in a histogram"
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "sorting", "stack", "expression evaluation", "histogram", "education"]
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
dsexercises-complex = "dsexercises.complexvec:main"
dsexercises-calc = "dsexercises.expression:main"
dsexercises-histogram = "dsexercises.histogram:main"

[tool.hatch.build.targets.wheel]
packages = ["dsexercises"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
