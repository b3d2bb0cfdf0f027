# Copyright 2025 iGenius S.p.A
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
import string
import time

_ALPHABET = string.ascii_lowercase


def random_suffix(length: int, seed: int) -> str:
    """Return ``length`` lowercase letters drawn from a generator seeded with ``seed``.

    The same ``(length, seed)`` pair always yields the same string. A
    non-positive length yields an empty string. A seed of ``0`` is used as is;
    callers wanting a fresh seed go through :func:`resolve_seed` first.
    """
    if length <= 0:
        return ""
    rng = random.Random(seed)
    return "".join(rng.choice(_ALPHABET) for _ in range(length))


def resolve_seed(seed: int) -> int:
    """Return ``seed``, or a time-derived one (microseconds since epoch) when it is 0."""
    if seed:
        return seed
    return time.time_ns() // 1_000
