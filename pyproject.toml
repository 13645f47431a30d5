[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "studycards"
version = "0.1.0"
description = "A terminal flashcard library for creating, storing and practising question/answer cards"
requires-python = ">=3.10"
dependencies = []
keywords = ["flashcards", "study", "practice", "terminal", "quiz"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
studycards = "studycards.menus:main"

[tool.hatch.build.targets.wheel]
packages = ["studycards"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
