[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "doxabin"
version = "0.1.0"
description = "Document image binarization (Bernsen, Wan, Wolf), grayscale morphology, the DRD metric and binary PNM image I/O"
requires-python = ">=3.10"
keywords = ["binarization", "thresholding", "document-image", "pnm", "morphology", "drdm"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Image Processing",
]
dependencies = [
    "sortedcontainers",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["doxabin"]

[tool.pytest.ini_options]
addopts = "-ra"
