from pathlib import Path

import pytest

from bratconv.core.config import settings

CONF = (
    "[entities]\n"
    "PERSON\n"
    "ORG\n"
    "\n"
    "# locations are not exported\n"
    "[relations]\n"
    "works_for Arg1:PERSON, Arg2:ORG\n"
    "\n"
    "[events]\n"
    "\n"
    "[attributes]\n"
)

TEXT = "John works for IBM"

ANN = "T1\tPERSON 0 4\tJohn\nT2\tORG 15 18\tIBM\nR1\tworks_for Arg1:T1 Arg2:T2\n"


@pytest.fixture()
def write_file():
    """
    Write a file byte-exact (no newline translation) and return its path.
    """

    def _write(path: Path, content: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8", newline="")
        return path

    return _write


@pytest.fixture()
def collection_dir(tmp_path: Path, write_file) -> Path:
    """
    Small BRAT collection:
        annotation.conf
        doc1.ann / doc1.txt
        t_doc2.ann / t_doc2.txt
    """
    root = tmp_path / "collection"
    write_file(root / "annotation.conf", CONF)
    write_file(root / "doc1.txt", TEXT)
    write_file(root / "doc1.ann", ANN)
    write_file(root / "t_doc2.txt", "Mary left.")
    write_file(root / "t_doc2.ann", "T1\tPERSON 0 4\tMary\n")
    return root


@pytest.fixture()
def strict_relations():
    """
    Enables strict relation resolution and restores the original value.
    """
    old = settings.STRICT_RELATIONS
    settings.STRICT_RELATIONS = True
    yield
    settings.STRICT_RELATIONS = old


@pytest.fixture()
def conf_text() -> str:
    return CONF


@pytest.fixture()
def sample_text() -> str:
    return TEXT


@pytest.fixture()
def sample_ann() -> str:
    return ANN
