# SPDX-FileCopyrightText: Copyright (c) 2024 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: LicenseRef-Apache2
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""In-memory reference genome with random-access slicing by contig name."""

from __future__ import annotations

import logging
import operator
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple, Union

from bionemo.refgenome.errors import DuplicateContigError, InvalidSequenceError, NotFoundError, OutOfRangeError
from bionemo.refgenome.fasta import open_fasta, parse_fasta


logger = logging.getLogger(__name__)

SequenceLike = Union[str, bytes, bytearray, memoryview]


def _as_bytes(name: str, sequence: SequenceLike) -> bytes:
    if isinstance(sequence, str):
        try:
            return sequence.encode("ascii")
        except UnicodeEncodeError as e:
            raise InvalidSequenceError(name, str(e)) from e
    return bytes(sequence)


class SequenceAccessor:
    """String view over one contig, indexed like a Python sequence.

    Positions are decoded as latin-1 so every byte maps to exactly one character and
    offsets line up with ``ReferenceGenome.get_slice``.
    """

    def __init__(self, genome, seqid, length):
        self.genome = genome
        self.seqid = seqid
        self.length = length

    def __len__(self):
        return self.length

    def __getitem__(self, key):
        if isinstance(key, slice):
            if key.step not in (None, 1):
                raise ValueError(f"Slices of '{self.seqid}' must be contiguous, got step {key.step}.")

            # Provide defaults for missing arguments in the slice.
            start = key.start if key.start is not None else 0
            stop = key.stop if key.stop is not None else self.length

            # Negative positions count back from the end, same as for str.
            if start < 0:
                start += self.length
            if stop < 0:
                stop += self.length

            # Anything still outside the contig raises rather than truncating.
            if start < 0:
                raise OutOfRangeError(self.seqid, key.start, key.stop, self.length)
            return self.genome.get_slice(self.seqid, start, stop).decode("latin-1")

        elif isinstance(key, int):
            if key < 0:
                key += self.length

            if key < 0 or key >= self.length:
                raise OutOfRangeError(self.seqid, key, key + 1, self.length)

            return self.genome.get_slice(self.seqid, key, key + 1).decode("latin-1")

        else:
            raise TypeError("Index must be an integer or a slice.")

    def __str__(self):
        return self[:]

    def __repr__(self):
        return f"SequenceAccessor(seqid={self.seqid!r}, length={self.length})"


class ReferenceGenome:
    """Named contig sequences loaded fully into memory.

    Contigs keep the order their headers appeared in. Nothing can be changed once the
    genome is built, so one instance can be shared freely between threads or handed
    to worker processes.
    """

    def __init__(self, contigs: Mapping[str, SequenceLike], filename: Optional[Path] = None):
        self._contigs: Dict[str, bytes] = {name: _as_bytes(name, seq) for name, seq in contigs.items()}
        self._contig_keys = tuple(self._contigs)
        self._filename = filename

    @classmethod
    def from_fasta(cls, path: Union[str, Path]) -> "ReferenceGenome":
        """Loads every record of a FASTA file, gzip-compressed if the name ends in ``.gz``.

        Raises:
            FileError: if ``path`` cannot be opened.
            ParseError: if the file is not valid FASTA.
            DuplicateContigError: if two records share a name.
        """
        path = Path(path)
        logger.debug("Loading %s...", path)
        with open_fasta(path) as handle:
            records = parse_fasta(handle)
        genome = cls.from_contigs(records, filename=path)
        logger.debug("Finished loading %d contigs.", len(genome))
        return genome

    @classmethod
    def from_contigs(
        cls, records: Iterable[Tuple[str, SequenceLike]], filename: Optional[Path] = None
    ) -> "ReferenceGenome":
        """Builds a genome from ``(name, sequence)`` pairs.

        Raises:
            DuplicateContigError: if two pairs share a name.
            InvalidSequenceError: if a ``str`` sequence is not ASCII.
        """
        contigs: Dict[str, bytes] = {}
        for name, sequence in records:
            if name in contigs:
                raise DuplicateContigError(name)
            contigs[name] = _as_bytes(name, sequence)
        return cls(contigs, filename)

    @property
    def filename(self) -> Optional[Path]:
        return self._filename

    @property
    def contigs(self) -> Mapping[str, bytes]:
        """Read-only view of the name to sequence mapping."""
        return MappingProxyType(self._contigs)

    def contig_keys(self) -> Tuple[str, ...]:
        return self._contig_keys

    def _sequence(self, name: str) -> bytes:
        try:
            return self._contigs[name]
        except KeyError:
            raise NotFoundError(name) from None

    def contig_length(self, name: str) -> int:
        return len(self._sequence(name))

    def get_contig(self, name: str) -> bytes:
        return self._sequence(name)

    def get_slice(self, name: str, start: int, end: int) -> bytes:
        """Returns bytes ``[start, end)`` of contig ``name``, using 0-based offsets.

        ``start == end`` is valid and gives ``b""``. Coordinates are never clamped.

        Raises:
            NotFoundError: if ``name`` is not in the genome.
            OutOfRangeError: unless ``0 <= start <= end <= contig_length(name)``.
            TypeError: if ``start`` or ``end`` is not an integer.
        """
        sequence = self._sequence(name)
        start = operator.index(start)
        end = operator.index(end)
        if not 0 <= start <= end <= len(sequence):
            raise OutOfRangeError(name, start, end, len(sequence))
        return sequence[start:end]

    def __getitem__(self, seqid: str) -> SequenceAccessor:
        return SequenceAccessor(self, seqid, self.contig_length(seqid))

    def __contains__(self, seqid) -> bool:
        return seqid in self._contigs

    def __len__(self) -> int:
        return len(self._contigs)

    def __iter__(self) -> Iterator[str]:
        return iter(self._contig_keys)

    def keys(self) -> Tuple[str, ...]:
        return self._contig_keys

    def __repr__(self):
        return f"ReferenceGenome(filename={self._filename!r}, contigs={len(self)})"


def load(path: Union[str, Path]) -> ReferenceGenome:
    """Shorthand for ``ReferenceGenome.from_fasta``."""
    return ReferenceGenome.from_fasta(path)
