[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dslabs"
version = "0.1.0"
description = "Long-number arithmetic, a phone book table, sparse matrices and expression stacks, with interactive shells"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "long arithmetic",
    "sorting",
    "key table",
    "sparse matrix",
    "stack",
    "expression evaluation",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
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
dslabs-realmul = "dslabs.realmul_cli:main"
dslabs-phonebook = "dslabs.phonebook_cli:main"
dslabs-matrix = "dslabs.matrix_cli:main"
dslabs-stack = "dslabs.stack_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dslabs"]

[tool.pytest.ini_options]
addopts = "-ra"
