from collections.abc import Iterator


def iter_lines(text: str) -> Iterator[str]:
    """
    Yield lines without their terminator.
    Only "\n" separates lines, a trailing "\r" is dropped, so CRLF and LF
    files scan the same. Unlike str.splitlines(), form feeds, unicode line
    separators etc. stay inside the line.
    """
    if not text:
        return

    parts = text.split("\n")
    # "a\nb\n" -> last part is "", not a line
    if parts[-1] == "":
        parts.pop()

    for line in parts:
        if line.endswith("\r"):
            line = line[:-1]
        yield line
