[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mlearnkit"
version = "0.1.0"
description = "Editors, XML bundles and simulators for flash card, spelling and basic mLearning collections"
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "flashcards", "spelling", "mlearning", "quiz", "bundle"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mlearnkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
