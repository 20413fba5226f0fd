[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mlsport"
version = "1.0.0"
description = "Product model, service layer and JSON request handlers for a sporting goods catalogue stored in MongoDB."
requires-python = ">=3.10"
keywords = ["rest", "api", "products", "catalogue", "mongodb"]
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
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
]
dependencies = [
    "pymongo",
    "python-dotenv",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["mlsport"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
