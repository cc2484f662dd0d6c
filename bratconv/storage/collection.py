from __future__ import annotations

from pathlib import Path

from bratconv.core.config import settings
from bratconv.core.errors import (
    ERR_FILE_NOT_EXIST,
    ERR_MULTIPLE_CONF_FILES,
    ConfigurationError,
    ResourceError,
)
from bratconv.models.annotation import DocumentPair


def read_text(path: Path) -> str:
    """
    Read a UTF-8 file as is.
    newline="" keeps "\r" in place, offsets are resolved against the raw text.
    """
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()
    except FileNotFoundError as e:
        raise ResourceError(ERR_FILE_NOT_EXIST.format(path=path)) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ResourceError(f"could not read {path}: {e}") from e


def doc_id_for(path: Path) -> str:
    # data/t_doc1.ann -> t_doc1
    return path.stem


def _make_pair(ann_path: Path, txt_path: Path) -> DocumentPair:
    doc_id = doc_id_for(ann_path)
    return DocumentPair(
        doc_id=doc_id,
        ann_path=ann_path,
        txt_path=txt_path,
        is_test=doc_id.startswith(settings.TEST_DOC_PREFIX),
    )


def conf_path_for(folder: Path) -> Path:
    """
    In folder mode annotation.conf has to sit at the collection root.
    """
    return Path(folder) / settings.CONF_FILENAME


def discover_pairs(folder: Path) -> list[DocumentPair]:
    """
    Walk folder recursively (lexical order) and pair every .ann with its .txt.

    Raises:
        - ResourceError: a .ann without .txt or a .txt without .ann
        - ConfigurationError: more than one annotation.conf under folder
    """
    root = Path(folder)
    if not root.is_dir():
        raise ResourceError(ERR_FILE_NOT_EXIST.format(path=root))

    ann_suffix = settings.ANN_SUFFIX
    txt_suffix = settings.TXT_SUFFIX

    pairs: list[DocumentPair] = []
    conf_count = 0

    for path in sorted(root.rglob("*")):
        if not path.is_file():
            continue

        name = path.name
        if name.endswith(ann_suffix):
            txt_path = path.with_name(name[: -len(ann_suffix)] + txt_suffix)
            if not txt_path.exists():
                raise ResourceError(ERR_FILE_NOT_EXIST.format(path=txt_path))
            pairs.append(_make_pair(path, txt_path))
        elif name.endswith(txt_suffix):
            ann_path = path.with_name(name[: -len(txt_suffix)] + ann_suffix)
            if not ann_path.exists():
                raise ResourceError(ERR_FILE_NOT_EXIST.format(path=ann_path))
        elif name.endswith(settings.CONF_FILENAME):
            conf_count += 1
            if conf_count > 1:
                raise ConfigurationError(ERR_MULTIPLE_CONF_FILES)

    return pairs


def split_file_list(value: str) -> list[str]:
    """
    "a.ann, b.ann" -> ["a.ann", "b.ann"]
    """
    return [item.strip() for item in value.split(",")]


def pair_files(ann_files: list[str], txt_files: list[str]) -> list[DocumentPair]:
    """
    Explicit mode: ann_files[i] must belong to txt_files[i] (same stem).
    """
    if len(ann_files) != len(txt_files):
        raise ResourceError(
            "the number of annotation files should be equal to the number of txt files, "
            f"Received Annotation Files: {ann_files} Length: {len(ann_files)}, "
            f"Txt Files: {txt_files} Length: {len(txt_files)}"
        )

    pairs: list[DocumentPair] = []
    for ann, txt in zip(ann_files, txt_files):
        ann_path = Path(ann.strip())
        txt_path = Path(txt.strip())

        expected = ann_path.stem + settings.TXT_SUFFIX
        if txt_path.name != expected:
            raise ResourceError(
                f"expected annotation file: {ann_path} to correspond to: {expected} "
                f"Received: {txt_path}"
            )

        pairs.append(_make_pair(ann_path, txt_path))

    return pairs
