from typing import Callable, List, Sequence
import os
import random
import time

# Characters trimmed from the end of a common filename prefix
SUBJECT_SEPARATORS = "-_ \t"
FALLBACK_SUBJECT = "General"

# Chooses the processing order of the discovered files
OrderStrategy = Callable[[Sequence[str]], List[str]]


def common_prefix_length(a: str, b: str) -> int:
    i = 0
    while i < len(a) and i < len(b) and a[i] == b[i]:
        i += 1
    return i


# Subject label from the longest common prefix of the batch's file names
def determine_subject(files: Sequence[str]) -> str:

    if not files:
        return FALLBACK_SUBJECT

    names = [os.path.basename(f) for f in files]
    prefix = names[0]
    for name in names[1:]:
        prefix = prefix[:common_prefix_length(prefix, name)]

    # All trailing separators are trimmed, not just one
    subject = prefix.rstrip(SUBJECT_SEPARATORS)
    return subject or FALLBACK_SUBJECT


# Consecutive batches of `size`; the last one may be smaller
def partition(files: Sequence[str], size: int) -> List[List[str]]:
    if size < 1:
        raise ValueError(f"batch size must be at least 1, got {size}")
    return [list(files[i:i + size]) for i in range(0, len(files), size)]


def identity_order(files: Sequence[str]) -> List[str]:
    return list(files)


# Uniform shuffle; seeded from the clock unless a seed is given
def shuffle_order(seed: int | None = None) -> OrderStrategy:
    rng = random.Random(time.time_ns() if seed is None else seed)

    def _order(files: Sequence[str]) -> List[str]:
        shuffled = list(files)
        rng.shuffle(shuffled)
        return shuffled

    return _order
