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

import os

from caf_naming.exceptions import EnvironmentVariableNotSetError


def read_environment_variable(
    name: str,
    default: str | None = None,
    fails_if_empty: bool = False,
) -> str:
    """Return the value of an environment variable.

    An unset variable yields ``default`` when one is given, raises when
    ``fails_if_empty`` is set, and is an empty string otherwise. A variable set
    to an empty string counts as set.
    """
    value = os.environ.get(name)
    if value is not None:
        return value
    if default is not None:
        return default
    if fails_if_empty:
        raise EnvironmentVariableNotSetError(name)
    return ""
