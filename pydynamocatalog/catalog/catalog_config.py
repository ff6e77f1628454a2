################################################################################
#  Licensed to the Apache Software Foundation (ASF) under one
#  or more contributor license agreements.  See the NOTICE file
#  distributed with this work for additional information
#  regarding copyright ownership.  The ASF licenses this file
#  to you under the Apache License, Version 2.0 (the
#  "License"); you may not use this file except in compliance
#  with the License.  You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
# limitations under the License.
################################################################################
from dataclasses import dataclass

from pydynamocatalog.common.options import Options
from pydynamocatalog.common.options.config import CatalogOptions


@dataclass(frozen=True)
class CatalogConfig:
    """Settings of a catalog instance, fixed once the catalog is initialized."""

    name: str
    warehouse_root: str
    unique_locations: bool = False

    @classmethod
    def create(cls, name: str, warehouse: str, unique_locations: bool = False) -> "CatalogConfig":
        if not warehouse:
            raise ValueError(
                "Cannot initialize catalog {} because warehouse path must not be null or empty".format(name))
        return cls(name, warehouse.rstrip('/'), unique_locations)

    @classmethod
    def from_options(cls, name: str, options: Options) -> "CatalogConfig":
        if not options.contains(CatalogOptions.WAREHOUSE):
            raise ValueError(f"'{CatalogOptions.WAREHOUSE.key()}' path must be set")
        return cls.create(
            name,
            options.get(CatalogOptions.WAREHOUSE),
            options.get(CatalogOptions.UNIQUE_TABLE_LOCATION))
