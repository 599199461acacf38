[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "parquepollitos"
version = "0.1.0"
description = "A small terminal text adventure: explore the park, beat its bullies and rescue the lost chicks."
requires-python = ">=3.10"
dependencies = []
keywords = ["text adventure", "game", "console", "interactive fiction"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
parquepollitos = "parquepollitos.game:main"

[tool.setuptools.packages.find]
include = ["parquepollitos*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
