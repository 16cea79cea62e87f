[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ancsnotify"
version = "0.1.0"
description = "Apple Notification Center Service (ANCS) client logic: notification queue, protocol encoding and event handling"
requires-python = ">=3.10"
dependencies = []
keywords = ["ancs", "ble", "bluetooth", "notifications", "ios", "gatt"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ancsnotify"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
