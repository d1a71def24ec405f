[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rustlings"
version = "5.5.1"
description = "Worked solutions to small programming exercises, with coloured status lines and a rust-analyzer project file generator"
requires-python = ">=3.11"
dependencies = [
    "rich",
]
keywords = ["exercises", "learning", "teaching", "rust-analyzer", "solutions"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Computer Aided Instruction (CAI)",
    "Topic :: Software Development",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["rustlings"]

[tool.hatch.build.targets.sdist]
include = [
    "rustlings",
    "tests",
    "README.md",
]

[tool.pytest.ini_options]
addopts = "-ra"
