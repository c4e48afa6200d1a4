[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sortvis"
version = "0.1.0"
description = "Animated side-by-side visualisation of bubble, selection and merge sort"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["sorting", "algorithms", "visualization", "education", "pygame", "linked-list"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
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
test = [
    "pytest",
]

[project.scripts]
sortvis = "sortvis.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sortvis"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
