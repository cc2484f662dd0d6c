from bratconv.core.errors import (
    ERR_SUBSTR_END_AFTER_DATA,
    ERR_SUBSTR_END_BEFORE_START,
    ERR_SUBSTR_NEGATIVE_START,
    RangeError,
)

CARRIAGE_RETURN = "\r"


def substring(text: str, start: int, end: int) -> str:
    """
    Return the characters of text in the half-open range [start, end).

    Positions count code points, but carriage returns are skipped without
    advancing the position, so offsets written against LF text resolve the
    same way on a CRLF copy of the document.
    """
    if start < 0:
        raise RangeError(ERR_SUBSTR_NEGATIVE_START.format(start=start))
    if end < start:
        raise RangeError(ERR_SUBSTR_END_BEFORE_START.format(end=end))
    if end > len(text):
        raise RangeError(ERR_SUBSTR_END_AFTER_DATA.format(length=len(text), end=end))

    out: list[str] = []
    pos = 0
    for ch in text:
        if ch == CARRIAGE_RETURN:
            continue
        if pos >= end:
            break
        if pos >= start:
            out.append(ch)
        pos += 1

    return "".join(out)
