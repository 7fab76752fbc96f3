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

import random
from pathlib import Path

import pytest


DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def data_dir():
    return DATA_DIR


@pytest.fixture
def create_test_fasta(tmp_path):
    """Returns a factory that writes a FASTA file of random sequences.

    Each call writes ``contig1`` .. ``contig{num_seqs}``, wrapped at ``line_width`` so
    the file is also readable by index-based tools. The factory returns the file path
    and a dict of the sequences written.
    """

    def _create(num_seqs=2, seq_length=1000, line_width=80, seed=0, filename="test.fasta"):
        rng = random.Random(seed)
        fasta_path = tmp_path / filename
        sequences = {}
        with open(fasta_path, "w") as fasta_file:
            for i in range(1, num_seqs + 1):
                # Write the header
                fasta_file.write(f">contig{i}\n")

                sequence = "".join(rng.choices("ACGTacgtN", k=seq_length))
                sequences[f"contig{i}"] = sequence

                for j in range(0, len(sequence), line_width):
                    fasta_file.write(sequence[j : j + line_width] + "\n")
        return fasta_path, sequences

    return _create
