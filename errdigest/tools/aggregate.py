from dataclasses import replace
from itertools import chain
from typing import Iterable, List, Sequence
from errdigest.models import MatchRecord


def assign_indices(batches: Iterable[Sequence[MatchRecord]]) -> List[MatchRecord]:
    """Flatten per-file batches and number the records from 1.

    Batches keep the order they were supplied in and records keep their
    order within a batch. The inputs are left untouched.
    """
    return [
        replace(record, index=position)
        for position, record in enumerate(chain.from_iterable(batches), 1)
    ]
