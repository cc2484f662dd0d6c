from __future__ import annotations

import logging
from pathlib import Path

from bratconv.core.errors import ERR_NO_ENTITIES, ConfigurationError, ResourceError
from bratconv.models.annotation import Schema
from bratconv.services.text.lines import iter_lines
from bratconv.storage.collection import read_text

logger = logging.getLogger(__name__)

ENTITIES_SECTION = "[entities]"
RELATIONS_SECTION = "[relations]"


def _section_lines(conf_text: str, marker: str) -> list[str]:
    """
    Lines of the section opened by marker, without blanks and comments.
    The marker only has to appear somewhere in the line, the next line
    starting with "[" closes the section.
    """
    out: list[str] = []
    inside = False

    for line in iter_lines(conf_text):
        # a repeated marker line is never an entry
        if marker in line:
            inside = True
            continue
        if not inside:
            continue

        if not line.strip():
            continue
        if line.startswith("["):
            break
        if line.startswith("#"):
            continue

        out.append(line)

    return out


def extract_entity_types(conf_text: str) -> set[str]:
    return {line.strip() for line in _section_lines(conf_text, ENTITIES_SECTION)}


def extract_relation_types(conf_text: str) -> set[str]:
    """
    Relation lines look like "works_for Arg1:PERSON, Arg2:ORG".
    Only the leading name is kept, argument roles are not needed downstream.
    """
    return {line.split()[0] for line in _section_lines(conf_text, RELATIONS_SECTION)}


def schema_from_text(conf_text: str) -> Schema:
    entity_types = extract_entity_types(conf_text)
    if not entity_types:
        raise ConfigurationError(ERR_NO_ENTITIES)

    relation_types = extract_relation_types(conf_text)
    logger.debug(
        "Schema loaded: %d entity types, %d relation types",
        len(entity_types),
        len(relation_types),
    )

    return Schema(entity_types=frozenset(entity_types), relation_types=frozenset(relation_types))


def load_schema(conf_path: Path) -> Schema:
    try:
        conf_text = read_text(conf_path)
    except ResourceError as e:
        raise ConfigurationError(str(e)) from e

    return schema_from_text(conf_text)
