[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "psdexport"
version = "0.1.0"
description = "Building blocks for writing Photoshop (.psd) data: PackBits, channel encoding and pixel layout helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["psd", "photoshop", "image", "packbits", "rle", "channels", "planar"]
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
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["psdexport"]

[tool.pytest.ini_options]
addopts = "-ra"
