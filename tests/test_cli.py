import json
from pathlib import Path

import pytest

from bratconv.cli import main, validate_flags
from bratconv.core.errors import ConfigurationError, ResourceError


def test_prints_acharya_to_stdout(collection_dir: Path, capsys):
    assert main(["-p", str(collection_dir)]) == 0

    out = capsys.readouterr().out
    lines = out.rstrip("\n").split("\n")
    assert [json.loads(line)["id"] for line in lines] == ["doc1", "t_doc2"]


def test_writes_output_file(collection_dir: Path, tmp_path: Path):
    out = tmp_path / "out.jsonl"
    assert main(["--folderPath", str(collection_dir), "--output", str(out)]) == 0

    content = out.read_text(encoding="utf-8")
    assert len(content.split("\n")) == 2
    assert not content.endswith("\n")


def test_refuses_to_overwrite_without_force(collection_dir: Path, tmp_path: Path):
    out = tmp_path / "out.jsonl"
    out.write_text("keep me", encoding="utf-8")

    assert main(["-p", str(collection_dir), "-o", str(out)]) == 1
    assert out.read_text(encoding="utf-8") == "keep me"

    assert main(["-p", str(collection_dir), "-o", str(out), "-f"]) == 0
    assert out.read_text(encoding="utf-8").startswith('{"id":"doc1"')


def test_explicit_files(collection_dir: Path, capsys):
    code = main(
        [
            "-a", str(collection_dir / "doc1.ann"),
            "-t", str(collection_dir / "doc1.txt"),
            "-c", str(collection_dir / "annotation.conf"),
        ]
    )
    assert code == 0
    record = json.loads(capsys.readouterr().out)
    assert record["id"] == "doc1"


def test_conversion_error_exits_non_zero(collection_dir: Path, write_file, capsys):
    write_file(collection_dir / "doc1.ann", "T1\tPERSON 0 4;6 9\tJohn\n")

    assert main(["-p", str(collection_dir)]) == 1
    # nothing partial on stdout
    assert capsys.readouterr().out == ""


def test_no_input_exits_non_zero():
    assert main([]) == 1


@pytest.mark.parametrize(
    "kwargs,message",
    [
        (dict(ann_files=None, txt_files="a.txt", conf_file="c"), "no annotation files"),
        (dict(ann_files="a.ann", txt_files=" ", conf_file="c"), "no txt files"),
        (dict(ann_files="a.ann", txt_files="a.txt", conf_file=""), "no conf file"),
    ],
)
def test_validate_explicit_flags(kwargs, message):
    with pytest.raises(ConfigurationError, match=message):
        validate_flags(None, output=None, force=False, **kwargs)


def test_validate_folder_and_force():
    with pytest.raises(ConfigurationError, match="empty folder"):
        validate_flags("  ", None, None, None, None, False)
    with pytest.raises(ConfigurationError, match="force flag"):
        validate_flags("data", None, None, None, None, True)

    validate_flags("data", None, None, None, "out.jsonl", True)


def test_validate_mismatched_lists():
    with pytest.raises(ResourceError):
        validate_flags(None, "a.ann,b.ann", "a.txt", "annotation.conf", None, False)


def test_version(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--version"])
    assert exc.value.code == 0
    assert "bratconverter version" in capsys.readouterr().out


def test_unwritable_output_path_exits_non_zero(collection_dir: Path, tmp_path: Path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")

    assert main(["-p", str(collection_dir), "-o", str(blocker / "out.jsonl")]) == 1
    assert blocker.read_text(encoding="utf-8") == "not a directory"
