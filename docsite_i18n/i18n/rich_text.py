"""Inline emphasis segmentation for resolved messages.

Splits ``**bold**`` markup into plain and emphasized segments so the UI layer
can render emphasized runs as bold inline text. Malformed markup never raises;
unmatched markers stay in the text as literal characters.
"""

import re
from typing import Iterable, List

from docsite_i18n.i18n.models import Segment

DELIMITER = "**"

# A pair closes at the nearest following marker and cannot span a newline.
_EMPHASIS_PATTERN = re.compile(r"\*\*(.*?)\*\*")


def segment(text: str) -> List[Segment]:
    """Split ``text`` into alternating plain and emphasized segments.

    Zero-length segments are dropped and adjacent runs with the same emphasis
    are merged, so no two neighbours share ``emphasized``. Text without any
    complete pair yields exactly one plain segment equal to ``text``.

    Args:
        text: Resolved message, possibly containing ``**...**`` pairs.

    Returns:
        Segments in input order.

    Example:
        >>> segment("**Official** docs note")
        [Segment(text='Official', emphasized=True), Segment(text=' docs note', emphasized=False)]
    """
    matches = list(_EMPHASIS_PATTERN.finditer(text))
    if not matches:
        return [Segment(text=text, emphasized=False)]

    runs = []
    position = 0
    for match in matches:
        runs.append(Segment(text=text[position : match.start()], emphasized=False))
        runs.append(Segment(text=match.group(1), emphasized=True))
        position = match.end()
    runs.append(Segment(text=text[position:], emphasized=False))

    return _merge(run for run in runs if run.text)


def _merge(runs: Iterable[Segment]) -> List[Segment]:
    merged: List[Segment] = []
    for run in runs:
        if merged and merged[-1].emphasized == run.emphasized:
            merged[-1] = Segment(
                text=merged[-1].text + run.text, emphasized=run.emphasized
            )
        else:
            merged.append(run)
    return merged


def plain_text(segments: Iterable[Segment]) -> str:
    """Concatenate segment texts, i.e. the input with paired markers removed."""
    return "".join(part.text for part in segments)
