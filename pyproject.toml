[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "loadertools"
version = "0.1.0"
description = "Pure-Python MD5 and SHA-256 hashers and CPIO metadata stripping for reproducible boot images"
requires-python = ">=3.10"
dependencies = []
keywords = ["cpio", "md5", "sha256", "reproducible-builds", "bootloader"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
    "Topic :: System :: Archiving",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
cpio-strip = "loadertools.cpio_strip:main"

[tool.hatch.build.targets.wheel]
packages = ["loadertools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
