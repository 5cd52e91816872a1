[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kidsmath"
version = "1.0.0"
description = "Step-by-step arithmetic, geometry and calculator lessons for young learners, narrated through logging"
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "arithmetic", "math", "lessons", "calculator", "geometry"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Thai",
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
kidsmath-addition = "kidsmath.addition:main"
kidsmath-subtraction = "kidsmath.subtraction:main"
kidsmath-multiplication = "kidsmath.multiplication:main"
kidsmath-division = "kidsmath.division:main"
kidsmath-shopping = "kidsmath.shopping:main"
kidsmath-geometry = "kidsmath.geometry:main"
kidsmath-safecalc = "kidsmath.safecalc:main"
kidsmath-calculator = "kidsmath.calculator:main"

[tool.hatch.build.targets.wheel]
packages = ["kidsmath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
