[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "interviewkit"
version = "0.1.0"
description = "Classic interview data structures and algorithms: linked lists, stacks, trees, graphs, bits, recursion and small designs."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data-structures", "interview", "recursion", "graphs", "linked-list"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["interviewkit"]

[tool.pytest.ini_options]
addopts = "-ra"
