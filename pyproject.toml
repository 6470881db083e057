[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fehcore"
version = "0.1.0"
description = "Display-independent image viewer and wallpaper logic: placement geometry, background scripts, Enlightenment IPC framing and viewport maths"
requires-python = ">=3.10"
dependencies = []
keywords = ["image viewer", "wallpaper", "background", "zoom", "viewport", "enlightenment"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Viewers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fehcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
