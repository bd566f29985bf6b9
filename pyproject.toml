[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hopfieldnet"
version = "0.1.0"
description = "Hopfield network that learns black-and-white images and restores noisy ones"
requires-python = ">=3.10"
dependencies = [
    "numpy",
    "pillow",
]
keywords = [
    "hopfield",
    "neural-network",
    "associative-memory",
    "pattern-recognition",
    "image",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Recognition",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
hopfieldnet = "hopfieldnet.app:main"

[tool.hatch.build.targets.wheel]
packages = ["hopfieldnet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
