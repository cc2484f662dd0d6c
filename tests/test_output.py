import os
from pathlib import Path

import pytest

from bratconv.core.errors import ResourceError
from bratconv.storage.output import write_output


def test_write_new_file(tmp_path: Path):
    out = write_output(tmp_path / "out" / "acharya.jsonl", '{"id":"a"}')
    assert out.read_text(encoding="utf-8") == '{"id":"a"}'


@pytest.mark.skipif(os.name != "posix", reason="file modes are posix only")
def test_output_is_private(tmp_path: Path):
    out = write_output(tmp_path / "acharya.jsonl", "x")
    assert out.stat().st_mode & 0o777 == 0o600


def test_existing_file_is_not_overwritten(tmp_path: Path):
    target = tmp_path / "acharya.jsonl"
    target.write_text("previous run", encoding="utf-8")

    with pytest.raises(ResourceError, match="--force"):
        write_output(target, "new content")

    assert target.read_text(encoding="utf-8") == "previous run"
    assert list(tmp_path.iterdir()) == [target]


def test_overwrite_replaces_whole_file(tmp_path: Path):
    target = tmp_path / "acharya.jsonl"
    target.write_text("a much longer previous run", encoding="utf-8")

    write_output(target, "short", overwrite=True)

    assert target.read_text(encoding="utf-8") == "short"
    # no temp files left behind
    assert list(tmp_path.iterdir()) == [target]


def test_parent_is_a_file(tmp_path: Path):
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")

    with pytest.raises(ResourceError, match="could not write"):
        write_output(blocker / "acharya.jsonl", "content")


@pytest.mark.parametrize("raw", ["600", "0600", "0o600"])
def test_output_mode_from_env_is_octal(raw, monkeypatch):
    from bratconv.core.config import Settings

    monkeypatch.setenv("OUTPUT_FILE_MODE", raw)
    assert Settings().OUTPUT_FILE_MODE == 0o600
