# profile_factory.py
# Builds Profile objects from the dictionaries in config.py and caches them by
# name. Profiles can be looked up by name or by a file's extension.

import os

from config import EXTENSION_MAPPING, PROFILE_CONFIG
from highlight_profile import (
    BlockKind, BlockRule, EscapeRule, KeywordGroup, Profile, ProfileError, TokenGroup, TokenRule
)


def _convert_escape(config):
    if config is None:
        return None
    return EscapeRule(prefix=config.get("prefix") or "", items=tuple(config.get("items", ())))


def _convert_block(config, kind):
    try:
        return BlockRule(
            name=config.get("name", ""),
            style=config["style"],
            start=config.get("start", ""),
            end=config.get("end") or "",
            kind=kind,
            wrapper_style=config.get("wrapper_style"),
            escape=_convert_escape(config.get("escape")),
        )
    except KeyError as e:
        raise ProfileError(f"Block '{config.get('name', '?')}' is missing key {e}.") from e


def _convert_token(config, ignore_case):
    try:
        groups = tuple(TokenGroup(name=g["name"], style=g["style"]) for g in config.get("groups", ()))
        return TokenRule.compile(
            name=config.get("name", ""),
            style=config["style"],
            pattern=config["pattern"],
            groups=groups,
            ignore_case=ignore_case,
        )
    except KeyError as e:
        raise ProfileError(f"Token '{config.get('name', '?')}' is missing key {e}.") from e


def _convert_keywords(config, ignore_case):
    try:
        return KeywordGroup(
            name=config.get("name", ""),
            style=config["style"],
            keywords=tuple(config.get("words", ())),
            ignore_case=ignore_case,
        )
    except KeyError as e:
        raise ProfileError(f"Keyword group '{config.get('name', '?')}' is missing key {e}.") from e


def build_profile(config: dict, name: str = "") -> Profile:
    """
    Converts one profile configuration dictionary (see config.py) into a Profile.
    Optional keys default to empty; anything malformed raises ProfileError.
    """
    if not isinstance(config, dict):
        raise ProfileError(f"Profile '{name}' configuration must be a dict, got {type(config).__name__}.")

    ignore_case = bool(config.get("ignore_case", False))
    return Profile(
        name=name,
        delimiters=tuple(config.get("delimiters", "")),
        back_delimiters=tuple(config.get("back_delimiters", "")),
        ignore_case=ignore_case,
        keyword_groups=tuple(_convert_keywords(k, ignore_case) for k in config.get("keywords", ())),
        single_line_blocks=tuple(
            _convert_block(b, BlockKind.SINGLE_LINE) for b in config.get("single_line_blocks", ())
        ),
        multi_line_blocks=tuple(
            _convert_block(b, BlockKind.MULTI_LINE) for b in config.get("multi_line_blocks", ())
        ),
        token_rules=tuple(_convert_token(t, ignore_case) for t in config.get("tokens", ())),
    )


def _normalize_extension(extension: str) -> str:
    extension = extension.strip().lower()
    if extension and not extension.startswith("."):
        extension = "." + extension
    return extension


class ProfileFactory:
    """
    Loads and caches highlight profiles.
    A profile is built the first time it is asked for and reused afterwards.
    """
    def __init__(self, profile_config=None, extension_mapping=None):
        self.profile_config = PROFILE_CONFIG if profile_config is None else profile_config
        mapping = EXTENSION_MAPPING if extension_mapping is None else extension_mapping
        self.extension_mapping = {_normalize_extension(ext): name for ext, name in mapping.items()}
        self._profiles = {}

    def profile_names(self) -> list:
        return sorted(self.profile_config)

    def get_profile_by_name(self, profile_name: str) -> Profile:
        profile = self._profiles.get(profile_name)
        if profile is None:
            if profile_name not in self.profile_config:
                raise ProfileError(f"Unknown highlight profile: {profile_name}")
            profile = build_profile(self.profile_config[profile_name], profile_name)
            self._profiles[profile_name] = profile
        return profile

    def get_profile_by_extension(self, extension: str) -> Profile | None:
        """Returns the profile mapped to `extension` (".py", "PY"...), or None if unmapped."""
        profile_name = self.extension_mapping.get(_normalize_extension(extension))
        if profile_name is None:
            return None
        return self.get_profile_by_name(profile_name)

    def get_profile_for_file(self, file_path: str) -> Profile | None:
        _, extension = os.path.splitext(file_path)
        if not extension:
            return None
        return self.get_profile_by_extension(extension)


default_factory = ProfileFactory()


def get_profile_by_name(profile_name: str) -> Profile:
    return default_factory.get_profile_by_name(profile_name)


def get_profile_by_extension(extension: str) -> Profile | None:
    return default_factory.get_profile_by_extension(extension)
