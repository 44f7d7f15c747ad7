"""Read SObject definitions from Salesforce metadata files.

Both the metadata API layout (``objects/Account.object``) and the source
format file name (``Account.object-meta.xml``) are understood. Only the
top-level ``<fields>`` elements matter here; every other element of the
object definition is ignored.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterable, Sequence

from sf_delete_order.exceptions import MetadataParseError

from .models import (
    PLATFORM_EVENT_SUFFIX,
    DeleteConstraint,
    LookupField,
    LookupType,
    SObject,
    is_sobject,
)

logger = logging.getLogger(__name__)

METADATA_SUFFIXES: tuple[str, ...] = (".object-meta.xml", ".object")
DEFAULT_EXCLUDE_SUFFIXES: tuple[str, ...] = (PLATFORM_EVENT_SUFFIX,)

# Constraint used when a relationship field omits <deleteConstraint>
_DEFAULT_CONSTRAINTS: dict[LookupType, DeleteConstraint] = {
    LookupType.LOOKUP: DeleteConstraint.SET_NULL,
    LookupType.MASTER_DETAIL: DeleteConstraint.CASCADE,
}


def sobject_name_for(path: Path) -> str:
    """SObject name for a metadata file: the file name minus its metadata suffix."""
    for suffix in METADATA_SUFFIXES:
        if path.name.endswith(suffix) and len(path.name) > len(suffix):
            return path.name[: -len(suffix)]
    return path.stem


def _local_name(tag: str) -> str:
    # "{http://soap.sforce.com/2006/04/metadata}fields" -> "fields"
    return tag.rsplit("}", 1)[-1]


def _child_text(element: ET.Element, name: str) -> str | None:
    for child in element:
        if _local_name(child.tag) == name:
            return (child.text or "").strip()
    return None


def _parse_field(path: Path, element: ET.Element) -> LookupField | None:
    field_type = _child_text(element, "type") or ""
    try:
        lookup_type = LookupType(field_type)
    except ValueError:
        return None

    full_name = _child_text(element, "fullName") or ""
    target = _child_text(element, "referenceTo")
    if not target:
        raise MetadataParseError(path, f"{lookup_type} field '{full_name}' has no referenceTo")

    constraint_text = _child_text(element, "deleteConstraint")
    if constraint_text:
        try:
            delete_constraint = DeleteConstraint(constraint_text)
        except ValueError as exc:
            valid = ", ".join(c.value for c in DeleteConstraint)
            raise MetadataParseError(
                path,
                f"field '{full_name}' has unknown deleteConstraint '{constraint_text}' "
                f"(expected one of: {valid})",
            ) from exc
    else:
        delete_constraint = _DEFAULT_CONSTRAINTS[lookup_type]

    return LookupField(
        full_name=full_name,
        target_sobject=target,
        lookup_type=lookup_type,
        delete_constraint=delete_constraint,
    )


def parse_sobject_file(file_path: Path) -> SObject:
    """Parse one SObject metadata file.

    Raises:
        MetadataParseError: If the file cannot be read, is not well-formed
            XML, or holds an invalid relationship field.
    """
    try:
        root = ET.parse(file_path).getroot()
    except ET.ParseError as exc:
        raise MetadataParseError(file_path, f"invalid XML: {exc}") from exc
    except OSError as exc:
        raise MetadataParseError(file_path, str(exc)) from exc

    lookup_fields: list[LookupField] = []
    for element in root:
        if _local_name(element.tag) != "fields":
            continue
        lookup_field = _parse_field(file_path, element)
        if lookup_field is not None:
            lookup_fields.append(lookup_field)

    logger.debug("Finished reading %s", file_path.name)
    return SObject(name=sobject_name_for(file_path), lookup_fields=tuple(lookup_fields))


def _is_metadata_file(path: Path) -> bool:
    return path.is_file() and path.name.endswith(METADATA_SUFFIXES)


def parse_path(
    path: Path,
    exclude_suffixes: Sequence[str] = DEFAULT_EXCLUDE_SUFFIXES,
) -> list[SObject]:
    """Parse a metadata file, or every metadata file directly inside a directory.

    Directory entries are read in file-name order. Files whose SObject name
    ends with one of ``exclude_suffixes`` (platform events by default) are
    skipped. A path that names a file is always parsed.

    Raises:
        MetadataParseError: If ``path`` does not exist or a file fails to parse.
    """
    if not path.exists():
        raise MetadataParseError(path, "no such file or directory")

    if not path.is_dir():
        return [parse_sobject_file(path)]

    sobjects: list[SObject] = []
    for entry in sorted(path.iterdir()):
        if not _is_metadata_file(entry):
            logger.debug("Skipping non-metadata entry %s", entry.name)
            continue
        name = sobject_name_for(entry)
        if not is_sobject(name, exclude_suffixes):
            logger.debug("Skipping excluded SObject %s", name)
            continue
        sobjects.append(parse_sobject_file(entry))
    return sobjects


def parse_paths(
    paths: Iterable[Path],
    exclude_suffixes: Sequence[str] = DEFAULT_EXCLUDE_SUFFIXES,
) -> list[SObject]:
    """Parse several paths, keeping argument order."""
    sobjects: list[SObject] = []
    for path in paths:
        sobjects.extend(parse_path(path, exclude_suffixes))
    return sobjects


__all__ = [
    "METADATA_SUFFIXES",
    "DEFAULT_EXCLUDE_SUFFIXES",
    "sobject_name_for",
    "parse_sobject_file",
    "parse_path",
    "parse_paths",
]
