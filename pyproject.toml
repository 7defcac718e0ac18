[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zbplugins"
version = "1.6.1"
description = "Chat-bot plugin toolkit: message segments, start-up configuration, text transforms, settings codecs and SQLite stores"
requires-python = ">=3.10"
dependencies = [
    "psutil",
]
keywords = ["chatbot", "onebot", "plugins", "qq", "bot"]
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
    "Topic :: Communications :: Chat",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
zbplugins = "zbplugins.config:main"

[tool.hatch.build.targets.wheel]
packages = ["zbplugins"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
