"""
Parser for ``aws s3 sync`` transcripts.

Change lines look like::

    upload: build/index.html to s3://bucket/index.html
    (dryrun) delete: s3://bucket/old.css
    copy: s3://other/a.js to s3://bucket/a.js

Progress lines ("Completed 1.2 KiB/4.0 KiB ...") are separated by bare
carriage returns and are dropped along with every other line that is not
a change, including "upload failed:" diagnostics.
"""
from __future__ import annotations

import logging
import re
from typing import List, Optional

from .models import ChangeKind, ChangeRecord
from .storage.uri import parse_s3_uri

logger = logging.getLogger(__name__)

__all__ = ["parse_sync_output", "parse_sync_line"]

_VERB_KINDS = {
    "create": ChangeKind.ADDED,
    "upload": ChangeKind.UPDATED,
    "copy": ChangeKind.UPDATED,
    "move": ChangeKind.UPDATED,
    "delete": ChangeKind.DELETED,
}

# The destination is the first "s3://" URI following " to ", or the only one
# for deletes.
_CHANGE_LINE = re.compile(
    r"^(?:\(dryrun\)\s+)?(?P<verb>[a-z]+):\s+(?:.*?\s+to\s+)?(?P<uri>s3://.+)$"
)


def parse_sync_line(line: str) -> Optional[ChangeRecord]:
    """
    Parse a single transcript line.

    Returns:
        ChangeRecord for a change line, None for anything else
    """
    line = line.strip()
    if not line:
        return None

    match = _CHANGE_LINE.match(line)
    if not match:
        return None

    kind = _VERB_KINDS.get(match.group("verb"))
    if kind is None:
        return None

    try:
        parsed = parse_s3_uri(match.group("uri"))
    except ValueError:
        logger.debug(f"Ignoring change line with unparseable URI: {line!r}")
        return None

    if not parsed.key:
        return None

    return ChangeRecord(path=parsed.cdn_path, kind=kind)


def parse_sync_output(text: str) -> List[ChangeRecord]:
    """
    Extract change records from a sync transcript.

    Order follows the transcript. An empty or change-free transcript yields
    an empty list; that is the normal "nothing changed" outcome.

    Args:
        text: Captured standard output of the sync

    Returns:
        One ChangeRecord per change line
    """
    changes = []
    # splitlines() also breaks on the bare '\r' used by progress output
    for line in text.splitlines():
        record = parse_sync_line(line)
        if record is not None:
            changes.append(record)

    logger.debug(f"Parsed {len(changes)} change(s) from sync output")
    return changes
