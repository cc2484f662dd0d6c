from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from bratconv.models.annotation import (
    ConversionResult,
    ConvertedDocument,
    DocumentPair,
    Schema,
)
from bratconv.services.annotation.ann_parser import parse_annotations
from bratconv.services.formatting.acharya import format_document, is_test_document
from bratconv.services.schema.conf_parser import load_schema, schema_from_text
from bratconv.storage.collection import conf_path_for, discover_pairs, pair_files, read_text

logger = logging.getLogger(__name__)


@dataclass
class _Accumulator:
    """Running output of a batch, folded document by document."""

    records: list[str] = field(default_factory=list)
    documents: list[ConvertedDocument] = field(default_factory=list)

    def add(self, doc: ConvertedDocument) -> "_Accumulator":
        self.records.append(doc.acharya)
        self.documents.append(doc)
        return self

    def result(self) -> ConversionResult:
        # one record per line, no blank line at the end
        acharya = "".join(self.records)
        if acharya.endswith("\n"):
            acharya = acharya[:-1]
        return ConversionResult(acharya=acharya, documents=self.documents)


def convert_text(
    doc_id: str,
    ann_text: str,
    txt_text: str,
    schema: Schema,
    is_test: bool,
) -> ConvertedDocument:
    parsed = parse_annotations(ann_text, schema.entity_types, schema.relation_types)
    acharya, standoff = format_document(
        txt_text, parsed.entities, parsed.relations, doc_id, is_test
    )

    return ConvertedDocument(
        doc_id=doc_id,
        is_test=is_test,
        acharya=acharya,
        standoff=standoff,
        entity_count=len(parsed.entities),
        relation_count=len(parsed.relations),
    )


def convert_document(pair: DocumentPair, schema: Schema) -> ConvertedDocument:
    ann_text = read_text(pair.ann_path)
    txt_text = read_text(pair.txt_path)

    doc = convert_text(pair.doc_id, ann_text, txt_text, schema, pair.is_test)
    logger.debug(
        "Converted %s: %d entities, %d relations",
        pair.doc_id,
        doc.entity_count,
        doc.relation_count,
    )
    return doc


def convert_documents(pairs: Iterable[DocumentPair], schema: Schema) -> ConversionResult:
    """
    Convert every pair in order. The first error aborts the whole batch,
    nothing partial is returned.
    """
    acc = _Accumulator()
    for pair in pairs:
        acc = acc.add(convert_document(pair, schema))

    logger.info("Converted %d document(s)", len(acc.documents))
    return acc.result()


def convert_collection(folder: Path) -> ConversionResult:
    """
    Folder mode: <folder>/annotation.conf plus every .ann/.txt pair below folder.
    """
    pairs = discover_pairs(Path(folder))
    schema = load_schema(conf_path_for(Path(folder)))
    return convert_documents(pairs, schema)


def convert_files(ann_files: list[str], txt_files: list[str], conf_file: str) -> ConversionResult:
    pairs = pair_files(ann_files, txt_files)
    schema = load_schema(Path(conf_file.strip()))
    return convert_documents(pairs, schema)


def convert_texts(
    conf_text: str,
    documents: Iterable[tuple[str, str, str, bool | None]],
) -> ConversionResult:
    """
    In-memory variant of convert_documents.
    documents: (doc_id, ann_text, txt_text, is_test); is_test None -> name prefix rule
    """
    schema = schema_from_text(conf_text)

    acc = _Accumulator()
    for doc_id, ann_text, txt_text, is_test in documents:
        if is_test is None:
            is_test = is_test_document(doc_id)
        acc = acc.add(convert_text(doc_id, ann_text, txt_text, schema, is_test))

    return acc.result()
