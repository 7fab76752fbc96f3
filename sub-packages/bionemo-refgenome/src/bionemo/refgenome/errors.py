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


class ReferenceGenomeError(Exception):
    """Base class for every error raised by bionemo.refgenome."""


class LoadError(ReferenceGenomeError):
    """Raised when a reference genome cannot be built from its source."""


class FileError(LoadError):
    """The FASTA path could not be opened or read."""

    def __init__(self, path, reason):
        self.path = path
        super().__init__(f"Cannot read FASTA file '{path}': {reason}")


class ParseError(LoadError):
    """The input is not valid FASTA, or the stream failed mid-read."""

    def __init__(self, message, line_number=None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class DuplicateContigError(LoadError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"Contig '{name}' is already in the reference genome.")


class InvalidSequenceError(LoadError):
    """A sequence given as text contains non-ASCII characters."""

    def __init__(self, name, reason):
        self.name = name
        super().__init__(f"Sequence for contig '{name}' is not ASCII: {reason}")


class ContigLookupError(ReferenceGenomeError):
    """Raised by queries against an already loaded reference genome."""


class NotFoundError(ContigLookupError, KeyError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"Sequence '{name}' not found in reference genome.")

    # KeyError quotes its argument; keep the message readable.
    def __str__(self):
        return self.args[0]


class OutOfRangeError(ContigLookupError, IndexError):
    def __init__(self, name, start, end, length):
        self.name = name
        self.start = start
        self.end = end
        self.length = length
        super().__init__(f"Region [{start}, {end}) is out of bounds for '{name}' with length {length}.")
