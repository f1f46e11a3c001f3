from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any

from wexample_filestate_csharp.common.member_order_policy import MemberOrderPolicy

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".sa1201ierrc"

# Strings are matched first so comment markers inside them survive.
_JSON_COMMENT_RE = re.compile(r'("(?:\\.|[^"\\])*")|//[^\n]*|/\*.*?\*/', re.DOTALL)
_JSON_TRAILING_COMMA_RE = re.compile(r'("(?:\\.|[^"\\])*")|,(\s*[}\]])')


def config_find_files(path: str | Path) -> list[Path]:
    """
    Return every config file that applies to ``path``, root directory first.
    ``path`` may be a file or a directory.
    """
    current = Path(path).resolve()
    if not current.is_dir():
        current = current.parent

    found: list[Path] = []
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILE_NAME
        if candidate.is_file():
            found.append(candidate)
    found.reverse()
    return found


def config_load_file(path: str | Path) -> dict[str, Any] | None:
    """
    Read one config file. Comments and trailing commas are tolerated.
    Unreadable or invalid files are reported as a warning and return None.
    """
    try:
        content = Path(path).read_text(encoding="utf-8-sig")
        data = json.loads(config_strip_json_extensions(content))
    except (OSError, UnicodeDecodeError, ValueError) as e:
        logger.warning("Failed to load config file '%s': %s", path, e)
        return None

    if not isinstance(data, dict):
        logger.warning("Config file '%s' must contain a JSON object", path)
        return None
    return data


def config_load_for_path(
    path: str | Path, base: MemberOrderPolicy | None = None
) -> MemberOrderPolicy:
    """
    Merge every applicable config file over ``base``, deepest file last.
    A file only overrides the options it sets.
    """
    policy = base or MemberOrderPolicy()
    for config_path in config_find_files(path):
        values = config_load_file(config_path)
        if values is None:
            continue
        try:
            policy = policy.merged_with(values)
        except ValueError as e:
            logger.warning("Ignoring config file '%s': %s", config_path, e)
    return policy


def config_create_sample(directory: str | Path) -> Path:
    config_path = Path(directory) / CONFIG_FILE_NAME
    if config_path.exists():
        raise FileExistsError(f"Config file already exists at: {config_path}")

    sample = {
        **MemberOrderPolicy().to_mapping(),
        "_comment": "SA1201ier configuration file. See documentation for available options.",
    }
    config_path.write_text(json.dumps(sample, indent=2) + "\n", encoding="utf-8")
    return config_path


def config_strip_json_extensions(content: str) -> str:
    without_comments = _JSON_COMMENT_RE.sub(
        lambda match: match.group(1) or "", content
    )
    return _JSON_TRAILING_COMMA_RE.sub(
        lambda match: match.group(1) or match.group(2), without_comments
    )
