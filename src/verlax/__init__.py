"""
Verlax - loose version parsing and ordering

Parses human-written version identifiers (release tags, build labels) into a
comparable form and orders them the way people read "newer" and "older".

Main modules:
- version: Tokenizer, parser, Version record, comparator and sorting helpers
- codecs: JSON, YAML and XML adapters around Version
- config: Configuration loading and validation
- cli: Command line interface
- utils: Utility functions

Quick start example:
```python
from verlax import parse, sort_versions

parse("1.0-rc1") < parse("1.0")        # True
parse("1.0") == parse("1.0.0")         # True
sort_versions(["1.10", "1.9", "1.9-beta2"])
```
"""

__version__ = "0.3.0"

from .version import (
    Version,
    VersionParser,
    Qualifier,
    parse,
    compare,
    sort_versions,
    latest,
    earliest,
)
from .config import Config, ConfigModel
from .exceptions import (
    VerlaxError,
    ConfigurationError,
    ConfigValidationError,
    CodecError,
    VersionDecodeError,
)

__all__ = [
    # Version
    '__version__',
    # Core
    'Version',
    'VersionParser',
    'Qualifier',
    'parse',
    'compare',
    'sort_versions',
    'latest',
    'earliest',
    # Config
    'Config',
    'ConfigModel',
    # Exceptions
    'VerlaxError',
    'ConfigurationError',
    'ConfigValidationError',
    'CodecError',
    'VersionDecodeError',
]
