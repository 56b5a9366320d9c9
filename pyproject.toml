[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "watchsim"
version = "0.1.0"
description = "Simulated smartwatch controllers, weather and navigation data, and display driver logic"
requires-python = ">=3.10"
dependencies = []
keywords = ["smartwatch", "simulator", "emulator", "weather", "display", "motion"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["watchsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
