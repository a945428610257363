#
#  Copyright (C) 2017-2025 Dremio Corporation
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.
#
from typing import Optional, List

from pydantic import BaseModel, ConfigDict, Field


class Endpoint(BaseModel):
    host: Optional[str] = None
    port: Optional[int] = None
    model_config = ConfigDict(validate_assignment=True)


class DatasourceConfiguration(BaseModel):
    # a datasource is addressed either by url or by endpoints, not both
    url: Optional[str] = None
    endpoints: Optional[List[Optional[Endpoint]]] = Field(default=None)
    model_config = ConfigDict(validate_assignment=True, extra="allow")

    @property
    def uses_url(self) -> bool:
        return bool(self.url)

    @property
    def uses_endpoints(self) -> bool:
        return bool(self.endpoints)
