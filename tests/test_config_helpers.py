from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from wexample_filestate_csharp.common.member_order_policy import MemberOrderPolicy
from wexample_filestate_csharp.enum.member_kind import MemberKind
from wexample_filestate_csharp.helpers.config import (
    CONFIG_FILE_NAME,
    config_create_sample,
    config_find_files,
    config_load_file,
    config_load_for_path,
    config_strip_json_extensions,
)


def _write_config(directory: Path, content: str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / CONFIG_FILE_NAME
    path.write_text(content, encoding="utf-8")
    return path


def test_files_are_found_root_first(tmp_path: Path) -> None:
    root = _write_config(tmp_path, "{}")
    nested = _write_config(tmp_path / "src" / "App", "{}")

    assert config_find_files(tmp_path / "src" / "App" / "Missing.cs") == [
        root.resolve(),
        nested.resolve(),
    ]
    assert config_find_files(tmp_path / "src") == [root.resolve()]


def test_deeper_files_override_only_what_they_set(tmp_path: Path) -> None:
    _write_config(
        tmp_path, '{"alphabeticalSort": true, "staticMembersFirst": false}'
    )
    _write_config(tmp_path / "src", '{"staticMembersFirst": true}')

    policy = config_load_for_path(tmp_path / "src" / "Service.cs")

    assert policy.alphabetical_sort
    assert policy.static_members_first
    assert config_load_for_path(tmp_path / "Service.cs") == MemberOrderPolicy(
        alphabetical_sort=True, static_members_first=False
    )


def test_comments_and_trailing_commas_are_tolerated(tmp_path: Path) -> None:
    _write_config(
        tmp_path,
        """
        {
            // Methods before fields
            "memberTypeOrder": ["Method", "Field",], /* inline */
            "_comment": "see https://example.com/*docs*/",
        }
        """,
    )

    values = config_load_file(tmp_path / CONFIG_FILE_NAME)

    assert values == {
        "memberTypeOrder": ["Method", "Field"],
        "_comment": "see https://example.com/*docs*/",
    }
    assert config_load_for_path(tmp_path).member_kind_order == (
        MemberKind.METHOD,
        MemberKind.FIELD,
    )


def test_strings_keep_comment_markers() -> None:
    assert config_strip_json_extensions('{"a": "//,}"}') == '{"a": "//,}"}'


def test_invalid_file_is_skipped_with_warning(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    _write_config(tmp_path, '{"alphabeticalSort": true')

    with caplog.at_level(logging.WARNING):
        policy = config_load_for_path(tmp_path)

    assert policy == MemberOrderPolicy()
    assert "Failed to load config file" in caplog.text


def test_non_object_file_is_rejected(tmp_path: Path) -> None:
    _write_config(tmp_path, '["alphabeticalSort"]')

    assert config_load_file(tmp_path / CONFIG_FILE_NAME) is None


def test_wrongly_typed_option_ignores_the_file(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    _write_config(tmp_path, '{"alphabeticalSort": true}')
    _write_config(tmp_path / "src", '{"sortTopLevelTypes": "yes"}')

    with caplog.at_level(logging.WARNING):
        policy = config_load_for_path(tmp_path / "src")

    assert policy == MemberOrderPolicy(alphabetical_sort=True)
    assert "Ignoring config file" in caplog.text


def test_sample_config_is_created_once(tmp_path: Path) -> None:
    path = config_create_sample(tmp_path)

    assert path == tmp_path / CONFIG_FILE_NAME
    sample = json.loads(path.read_text(encoding="utf-8"))
    assert sample["alphabeticalSort"] is False
    assert sample["memberTypeOrder"] is None
    assert config_load_for_path(tmp_path) == MemberOrderPolicy()

    with pytest.raises(FileExistsError):
        config_create_sample(tmp_path)
