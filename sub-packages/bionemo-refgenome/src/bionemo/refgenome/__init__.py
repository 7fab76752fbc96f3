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

from bionemo.refgenome.errors import (
    ContigLookupError,
    DuplicateContigError,
    FileError,
    InvalidSequenceError,
    LoadError,
    NotFoundError,
    OutOfRangeError,
    ParseError,
    ReferenceGenomeError,
)
from bionemo.refgenome.fasta import iter_fasta_records, open_fasta, parse_fasta
from bionemo.refgenome.reference import ReferenceGenome, SequenceAccessor, load


__all__ = [
    "ContigLookupError",
    "DuplicateContigError",
    "FileError",
    "InvalidSequenceError",
    "LoadError",
    "NotFoundError",
    "OutOfRangeError",
    "ParseError",
    "ReferenceGenome",
    "ReferenceGenomeError",
    "SequenceAccessor",
    "iter_fasta_records",
    "load",
    "open_fasta",
    "parse_fasta",
]
