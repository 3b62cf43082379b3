[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bahai-translit"
version = "0.1.0"
description = "Dictionary-first transliteration of Arabic and Persian text into Latin script"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "transliteration",
    "arabic",
    "persian",
    "farsi",
    "romanization",
    "linguistics",
    "dolt",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Religion",
    "Natural Language :: Arabic",
    "Natural Language :: Persian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bahai-translit = "bahai_translit.cli:main"
bahai-translit-samples = "bahai_translit.database_samples:main"
bahai-translit-update-db = "bahai_translit.update_database:main"
bahai-translit-fix-mixed = "bahai_translit.mixed_chars:main"

[tool.hatch.build.targets.wheel]
packages = ["bahai_translit"]

[tool.hatch.build.targets.sdist]
include = ["bahai_translit", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
