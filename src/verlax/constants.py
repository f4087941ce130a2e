import re
from types import MappingProxyType

# --- Log and Debug ---
# Short aliases for module names to keep CLI/env concise
LOG_ALIAS_MAP = {
    "tok": "verlax.version.tokens",
    "tokens": "verlax.version.tokens",
    "parser": "verlax.version.parser",
    "prs": "verlax.version.parser",
    "qual": "verlax.version.qualifier",
    "sort": "verlax.version.sorting",
    "codecs": "verlax.codecs",
    "codec": "verlax.codecs",
    "conf": "verlax.config",
    "cli": "verlax.cli",
}

# Top-level modules within verlax for auto-prefixing
KNOWN_TOP_MODULES = {
    "version",
    "codecs",
    "config",
    "cli",
    "utils",
    "exceptions",
}

LOG_LEVELS_ENV = "VERLAX_LOG_LEVELS"

# --- Tokens ---
# "_" and "-" survive tokenization as markers, any other separator is dropped
MARKERS = frozenset({"_", "-"})

# --- Dates ---
# 2010-2029, month, day, then up to three of hour/minute/second
DATE_PATTERN = re.compile(
    r"\A20[12]\d"
    r"(0[1-9]|1[012])"
    r"(0[1-9]|[12]\d|3[01])"
    r"(\d{2}){0,3}\Z"
)
DATE_WIDTH = 14

# --- Qualifiers ---
QUALIFIER_ALIASES = MappingProxyType({
    "dev": "dev",
    "develop": "dev",
    "snapshot": "snapshot",
    "a": "alpha",
    "alpha": "alpha",
    "b": "beta",
    "beta": "beta",
    "stable": "stable",
    "final": "final",
    "fixed": "fixed",
    "m": "milestone",
    "c": "rc",
    "rc": "rc",
    "ga": "ga",
    "r": "release",
    "release": "release",
})

# Rank strings, compared lexicographically
QUALIFIER_WEIGHTS = MappingProxyType({
    "dev": "00",
    "snapshot": "01",
    "alpha": "02",
    "beta": "03",
    "stable": "04",
    "final": "05",
    "fixed": "06",
    "milestone": "07",
    "rc": "08",
    "ga": "09",
    "release": "10",
})

# Stands in for a missing qualifier when pre-lists differ in length
RELEASE_QUALIFIER = "release"

# --- Config ---
DEFAULT_CONFIG_FILENAME = "verlax.yml"
