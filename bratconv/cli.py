"""
Convert a BRAT collection into Acharya JSON lines.

USAGE
-----
# whole collection (annotation.conf at the folder root)
bratconverter -p path/to/collection -o out.jsonl

# explicit files, same order in both lists
bratconverter -a a.ann,b.ann -t a.txt,b.txt -c annotation.conf

Without --output the records are printed to stdout.
"""
from __future__ import annotations

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version

from bratconv.core.errors import ConfigurationError, ConversionError
from bratconv.core.logging import setup_logging
from bratconv.services.conversion.pipeline import convert_collection, convert_files
from bratconv.storage.collection import pair_files, split_file_list
from bratconv.storage.output import write_output

logger = logging.getLogger(__name__)

INFO_GENERATED = "successfully generated file: %s"


def get_version() -> str:
    try:
        return version("bratconv")
    except PackageNotFoundError:
        return "development"


def _is_blank(value: str | None) -> bool:
    return value is None or value.strip() == ""


def validate_flags(
    folder_path: str | None,
    ann_files: str | None,
    txt_files: str | None,
    conf_file: str | None,
    output: str | None,
    force: bool,
) -> None:
    """
    Reject flag combinations before any file is opened.
    """
    if folder_path is None:
        if _is_blank(ann_files):
            raise ConfigurationError("no annotation files specified in the input")
        if _is_blank(txt_files):
            raise ConfigurationError("no txt files specified in the input")
        if _is_blank(conf_file):
            raise ConfigurationError("no conf file specified in the input")

        # raises ResourceError on count or name mismatch
        pair_files(split_file_list(ann_files), split_file_list(txt_files))
    elif _is_blank(folder_path):
        raise ConfigurationError("received empty folder path")

    if force and _is_blank(output):
        raise ConfigurationError("force flag is provided but output file is not specified")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="bratconverter",
        description="Convert BRAT stand-off annotations into Acharya JSON lines",
    )
    p.add_argument(
        "--folderPath", "-p", dest="folder_path", default=None,
        help="Path to the folder containing the collection",
    )
    p.add_argument(
        "--ann", "-a", dest="ann_files", default=None,
        help="Comma separated locations of the annotation files (.ann) in correct order",
    )
    p.add_argument(
        "--txt", "-t", dest="txt_files", default=None,
        help="Comma separated locations of the text files (.txt) in correct order",
    )
    p.add_argument(
        "--conf", "-c", dest="conf_file", default=None,
        help="Location of the annotation configuration file (annotation.conf)",
    )
    p.add_argument(
        "--output", "-o", default=None,
        help="Name of the output file to be generated",
    )
    p.add_argument(
        "--force", "-f", action="store_true",
        help="Overwrite the output file if it already exists",
    )
    p.add_argument(
        "--version", "-v", action="version",
        version=f"bratconverter version: {get_version()}",
    )
    return p


def run(args: argparse.Namespace) -> None:
    validate_flags(
        args.folder_path, args.ann_files, args.txt_files, args.conf_file, args.output, args.force
    )

    if args.folder_path is not None:
        result = convert_collection(args.folder_path)
    else:
        result = convert_files(
            split_file_list(args.ann_files),
            split_file_list(args.txt_files),
            args.conf_file,
        )

    if _is_blank(args.output):
        print(result.acharya)
        return

    out_path = write_output(args.output, result.acharya, overwrite=args.force)
    logger.info(INFO_GENERATED, out_path)


def main(argv: list[str] | None = None) -> int:
    setup_logging()
    args = build_parser().parse_args(argv)

    try:
        run(args)
    except ConversionError as e:
        logger.error("%s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
