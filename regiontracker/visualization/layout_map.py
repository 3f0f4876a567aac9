from typing import Mapping

from regiontracker.region_lib.region import Region


def _id_char(id: int) -> str:
    # Display only the last digit of the id
    return str(id % 10)


def render_layout(metadata: Mapping[int, Region], capacity: int) -> str:
    """
    Full-resolution text dump, one column per unit:

        Metadata: {1: (start=0, length=5), 2: (start=5, length=3)}
        1----2--
        01234567
        0

    Each region starts with the last digit of its id and continues with '-'.
    The two ruler rows give the index of every column and mark each tenth one.
    """
    entries = ", ".join(f"{id}: (start={region.start}, length={region.length})"
                        for id, region in metadata.items())

    representation = [" "] * capacity
    for id, region in metadata.items():
        if region.length > 0:
            representation[region.start] = _id_char(id)
            for i in range(region.start + 1, region.end):
                representation[i] = "-"

    digits = "".join(str(i % 10) for i in range(capacity))

    markers = [" "] * capacity
    for i in range(0, capacity, 10):
        for offset, char in enumerate(str(i)):
            if i + offset < capacity:
                markers[i + offset] = char

    return "\n".join([
        f"Metadata: {{{entries}}}",
        "".join(representation),
        digits,
        "".join(markers).rstrip(),
    ])


def render_map(metadata: Mapping[int, Region], capacity: int, width: int = 80) -> str:
    """One scaled row: '.' for free cells, the id's last digit for occupied ones"""
    buf = ["."] * width
    for id, region in metadata.items():
        s = int((region.start / capacity) * width)
        e = int((region.end / capacity) * width)
        for i in range(max(0, s), min(width, max(s + 1, e))):
            buf[i] = _id_char(id)
    return "".join(buf)
