[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stringart"
version = "0.1.0"
description = "Prepare images for string art: frame fitting, printable colour separation and Radon transforms."
requires-python = ">=3.10"
keywords = ["string art", "radon transform", "image processing", "cmyk", "jpeg"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Scientific/Engineering :: Image Processing",
]
dependencies = [
    "pillow",
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
stringart = "stringart.app:main"

[tool.hatch.build.targets.wheel]
packages = ["stringart"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
