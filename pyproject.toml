[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "listkit"
version = "0.1.0"
description = "Small list containers: a linked chain, a growable array list, a singly linked list and a stack."
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "array list", "stack", "queue", "data structures"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
listkit-demo = "listkit.demos:main"

[tool.hatch.build.targets.wheel]
packages = ["listkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
