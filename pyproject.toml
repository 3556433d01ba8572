[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wiringcore"
version = "0.1.0"
description = "Hardware-independent microcontroller core helpers: bit math, SPI settings, CAN frames, ring buffers and IP addresses"
requires-python = ">=3.10"
dependencies = []
keywords = ["embedded", "can", "spi", "ring-buffer", "ip-address", "microcontroller"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Software Development :: Embedded Systems",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wiringcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
