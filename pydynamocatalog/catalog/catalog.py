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
#################################################################################

from abc import ABC, abstractmethod
from typing import Union

from pydynamocatalog.common.identifier import TableIdentifier


class Catalog(ABC):
    """
    This interface is responsible for locating tables of a catalog whose
    namespace and table metadata live in an external metadata store.
    """
    DB_SUFFIX = ".db"

    DB_LOCATION_PROP = "location"

    @abstractmethod
    def name(self) -> str:
        """Name of this catalog."""

    @abstractmethod
    def default_warehouse_location(self, identifier: Union[str, TableIdentifier]) -> str:
        """Location of a table that is created without an explicit location."""

    def close(self):
        """Release resources held by this catalog."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
