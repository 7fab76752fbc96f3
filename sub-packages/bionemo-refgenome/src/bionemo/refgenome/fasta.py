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

"""Plain FASTA parsing into (name, sequence) records.

Records are reassembled from line-wrapped sequence data into one flat ``bytes``
buffer per contig. No line width is assumed, and residues are stored exactly as
they appear in the file, case included.
"""

from __future__ import annotations

import gzip
import logging
import zlib
from pathlib import Path
from typing import BinaryIO, Iterable, Iterator, List, Tuple, Union

from bionemo.refgenome.errors import FileError, ParseError


logger = logging.getLogger(__name__)

HEADER_PREFIX = b">"

FastaRecord = Tuple[str, bytes]


def open_fasta(path: Union[str, Path]) -> BinaryIO:
    """Opens a FASTA file for binary reading, decompressing it if the name ends in ``.gz``.

    Raises:
        FileError: if the path does not exist, is a directory, or cannot be opened.
    """
    path = Path(path)
    try:
        if path.suffix == ".gz":
            logger.debug("Detected gzip extension, loading %s as gzip stream...", path)
            return gzip.open(path, "rb")
        logger.debug("Loading %s as plain-text file...", path)
        return open(path, "rb")
    except OSError as e:
        raise FileError(path, e.strerror or e) from e


def _numbered_lines(stream: Iterable) -> Iterator[Tuple[int, bytes]]:
    line_number = 0
    try:
        for line_number, line in enumerate(stream, start=1):
            if isinstance(line, str):
                line = line.encode("utf-8")
            yield line_number, line
    except (OSError, EOFError, zlib.error, UnicodeDecodeError) as e:
        raise ParseError(f"Failed to read FASTA stream: {e}", line_number + 1) from e


def iter_fasta_records(stream: Iterable) -> Iterator[FastaRecord]:
    """Yields ``(name, sequence)`` pairs in file order.

    The name is everything after ``>`` on the header line, minus trailing whitespace.
    Sequence lines are stripped of surrounding whitespace and concatenated without
    separators. Blank lines are skipped wherever they occur.

    Args:
        stream: a binary file object, or any iterable of ``bytes`` or ``str`` lines.

    Raises:
        ParseError: on sequence data before the first header, an empty or undecodable
            header, a stream with no records at all, or a read failure.
    """
    name = None
    chunks: List[bytes] = []
    for line_number, line in _numbered_lines(stream):
        stripped = line.strip()
        if not stripped:
            continue
        if line.startswith(HEADER_PREFIX):
            if name is not None:
                yield name, b"".join(chunks)
            name = _header_name(line, line_number)
            chunks = []
        elif name is None:
            raise ParseError("sequence data found before any '>' header", line_number)
        else:
            chunks.append(stripped)

    if name is None:
        raise ParseError("no FASTA records found")
    yield name, b"".join(chunks)


def _header_name(line: bytes, line_number: int) -> str:
    raw = line[len(HEADER_PREFIX) :].rstrip()
    if not raw:
        raise ParseError("header line has no sequence name", line_number)
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(f"sequence name is not valid UTF-8: {raw!r}", line_number) from e


def parse_fasta(stream: Iterable) -> List[FastaRecord]:
    """Parses an entire FASTA stream. Either every record is returned or an error is raised."""
    return list(iter_fasta_records(stream))
