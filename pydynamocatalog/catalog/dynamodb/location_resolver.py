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
import logging
import uuid
from typing import Callable, Optional

from pydynamocatalog.catalog.catalog import Catalog
from pydynamocatalog.catalog.catalog_config import CatalogConfig
from pydynamocatalog.catalog.dynamodb.namespace_reader import NamespaceMetadataReader
from pydynamocatalog.common.identifier import Namespace, TableIdentifier

logger = logging.getLogger(__name__)


def random_suffix() -> str:
    """32 lowercase hex characters, fresh on every call."""
    return uuid.uuid4().hex


class LocationResolver:
    """
    Computes where a table lives when it is created without an explicit location.

    A namespace location property wins over the warehouse; without one the table
    goes to "<warehouse>/<namespace>.db/<table>". With unique locations enabled a
    random suffix is appended, so a dropped and recreated table never reuses the
    old path.
    """

    def __init__(self,
                 config: CatalogConfig,
                 reader: NamespaceMetadataReader,
                 suffix_supplier: Optional[Callable[[], str]] = None):
        self.config = config
        self.reader = reader
        self.suffix_supplier = suffix_supplier or random_suffix

    def resolve_default_location(self, identifier: TableIdentifier) -> str:
        namespace = identifier.get_namespace()
        override = self.reader.get_override(namespace)
        if override is not None:
            namespace_path = override
        else:
            namespace_path = self.get_namespace_path(namespace)

        location = f"{namespace_path}/{identifier.get_table_name()}"
        if self.config.unique_locations:
            location = f"{location}-{self.suffix_supplier()}"

        logger.debug("Default location of table %s is %s", identifier, location)
        return location

    def get_namespace_path(self, namespace: Namespace) -> str:
        return f"{self.config.warehouse_root}/{namespace}{Catalog.DB_SUFFIX}"
