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

import base64

from pydantic import BaseModel, Field


class NameResult(BaseModel):
    """Outcome of resolving a name for one or more resource types.

    ``result`` holds the name generated for the single ``resource_type`` of the
    request (empty when only a list of types was requested), ``results`` maps
    every resolved type to its name, in resolution order.
    """

    result: str = ""
    results: dict[str, str] = Field(default_factory=dict)
    random_seed: int = 0
    random_string: str = ""

    @property
    def id(self) -> str:
        """Stable identifier of the resolved names.

        Base64 of the ``"<type>\\t<name>"`` lines joined by newlines.
        """
        lines = "\n".join(f"{rtype}\t{name}" for rtype, name in self.results.items())
        return base64.b64encode(lines.encode()).decode()
