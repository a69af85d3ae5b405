[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "imgconv"
version = "0.1.0"
description = "Convert images between PPM, BMP and JPEG formats"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["image", "conversion", "ppm", "bmp", "jpeg"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pillow",
]

[project.scripts]
imgconv = "imgconv.cli:main"
jpeg2ppm = "imgconv.jpeg2ppm:main"

[tool.hatch.build.targets.wheel]
packages = ["imgconv"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
