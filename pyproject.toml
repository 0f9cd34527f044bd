[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "krauler"
version = "0.1.0"
description = "A simple web crawler that follows links within a site, honours robots.txt and saves pages as HTML files"
requires-python = ">=3.10"
dependencies = []
keywords = ["crawler", "spider", "robots.txt", "web", "html"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Indexing/Search",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
krauler = "krauler.crawler:main"

[tool.hatch.build.targets.wheel]
packages = ["krauler"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
