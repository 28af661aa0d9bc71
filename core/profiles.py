"""
Project configuration profiles.

Profiles live in a single YAML file in the user's home directory
(`~/.unused.yml`), as a list of named rule sets:

    - name: Rails
      testPaths: [spec/, test/]
      autoLowLikelihood:
        - name: Controllers
          pathStartsWith: app/controllers
          classOrModule: true

One profile name is looked up per run. Selecting it is a chain of steps that
can each come up empty (no home directory, no file, unreadable file, invalid
YAML, no such profile); any empty step means the default profile is used.
"""

from pathlib import Path
from typing import Any

import yaml

from constants import PROFILE_FILE_NAME, PROFILE_NAME
from core.exceptions import FileReadError
from core.file_io import FileReader, FilesystemFileReader
from core.models import LowLikelihoodRule, ProjectConfiguration

# YAML key -> LowLikelihoodRule attribute, for the string matchers
_RULE_STRING_KEYS = {
    "pathStartsWith": "path_starts_with",
    "pathEndsWith": "path_ends_with",
    "tokenStartsWith": "token_starts_with",
    "tokenEndsWith": "token_ends_with",
}


def select_profile(
    home: Path | None = None,
    name: str = PROFILE_NAME,
    file_reader: FileReader | None = None,
) -> ProjectConfiguration:
    """
    Select the profile to classify with, falling back to the default.

    Args:
        home: Home directory to look in. Defaults to the current user's.
        name: Profile name to select.
        file_reader: Optional reader for the profile store.

    Returns:
        ProjectConfiguration: The named profile, or the default profile if it
            could not be found for any reason.
    """
    profile = find_profile(home=home, name=name, file_reader=file_reader)
    return profile if profile is not None else ProjectConfiguration.default()


def find_profile(
    home: Path | None = None,
    name: str = PROFILE_NAME,
    file_reader: FileReader | None = None,
) -> ProjectConfiguration | None:
    config_path = _config_path(home)
    contents = _read_store(config_path, file_reader) if config_path else None
    document = _parse_document(contents) if contents is not None else None
    profiles = load_profiles(document) if document is not None else {}
    return profiles.get(name)


def load_profiles(document: Any) -> dict[str, ProjectConfiguration]:
    """
    Build profiles from a parsed YAML document.

    Entries that are not mappings with a string "name" are skipped, as are
    malformed rules inside a profile. A later profile with the same name
    replaces an earlier one.
    """
    if not isinstance(document, list):
        return {}

    profiles: dict[str, ProjectConfiguration] = {}
    for item in document:
        profile = _parse_profile(item)
        if profile is not None:
            profiles[profile.name] = profile
    return profiles


def _home_dir() -> Path | None:
    try:
        return Path.home()
    except (RuntimeError, KeyError):
        return None


def _config_path(home: Path | None) -> Path | None:
    base = home if home is not None else _home_dir()
    return base / PROFILE_FILE_NAME if base is not None else None


def _read_store(path: Path, file_reader: FileReader | None) -> str | None:
    reader = file_reader if file_reader is not None else FilesystemFileReader()
    try:
        contents = reader.read_file(path)
    except (FileReadError, OSError):
        return None
    return contents or None


def _parse_document(contents: str) -> Any:
    try:
        return yaml.safe_load(contents)
    except (yaml.YAMLError, ValueError):
        return None


def _parse_profile(item: Any) -> ProjectConfiguration | None:
    if not isinstance(item, dict):
        return None
    name = item.get("name")
    if not isinstance(name, str) or not name:
        return None

    rules = item.get("autoLowLikelihood")
    if not isinstance(rules, list):
        rules = []
    parsed_rules = tuple(
        rule for rule in (_parse_rule(r) for r in rules) if rule is not None
    )

    test_paths = _string_list(item.get("testPaths"))
    if test_paths:
        return ProjectConfiguration(
            name=name,
            test_path_prefixes=tuple(test_paths),
            low_likelihood=parsed_rules,
        )
    return ProjectConfiguration(name=name, low_likelihood=parsed_rules)


def _parse_rule(item: Any) -> LowLikelihoodRule | None:
    if not isinstance(item, dict):
        return None
    name = item.get("name")
    if not isinstance(name, str) or not name:
        return None

    matchers: dict[str, Any] = {}
    for key, attribute in _RULE_STRING_KEYS.items():
        value = item.get(key)
        if value is None:
            continue
        if not isinstance(value, str):
            return None
        matchers[attribute] = value

    token_equals = item.get("tokenEquals")
    if isinstance(token_equals, str):
        matchers["token_equals"] = (token_equals,)
    elif token_equals is not None:
        values = _string_list(token_equals)
        if not values:
            return None
        matchers["token_equals"] = tuple(values)

    matchers["class_or_module"] = item.get("classOrModule") is True
    return LowLikelihoodRule(name=name, **matchers)


def _string_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [v for v in value if isinstance(v, str) and v]
