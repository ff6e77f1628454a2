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
from typing import Callable, Optional, Union

from pydynamocatalog.catalog.catalog import Catalog
from pydynamocatalog.catalog.catalog_config import CatalogConfig
from pydynamocatalog.catalog.dynamodb.dynamodb_namespace_store import DynamoDbNamespaceStore
from pydynamocatalog.catalog.dynamodb.location_resolver import LocationResolver
from pydynamocatalog.catalog.dynamodb.namespace_reader import NamespaceMetadataReader
from pydynamocatalog.catalog.dynamodb.namespace_store import NamespaceStore
from pydynamocatalog.common.identifier import TableIdentifier
from pydynamocatalog.common.options import Options

logger = logging.getLogger(__name__)


class DynamoDbCatalog(Catalog):
    """Catalog keeping namespace metadata in a DynamoDB table."""

    def __init__(self, store: NamespaceStore, suffix_supplier: Optional[Callable[[], str]] = None):
        self.store = store
        self.suffix_supplier = suffix_supplier
        self.config: Optional[CatalogConfig] = None
        self.resolver: Optional[LocationResolver] = None

    @classmethod
    def from_options(cls, name: str, options: Options, store: Optional[NamespaceStore] = None) -> 'DynamoDbCatalog':
        config = CatalogConfig.from_options(name, options)
        catalog = cls(store if store is not None else DynamoDbNamespaceStore(options))
        catalog.initialize(config.name, config.warehouse_root, config.unique_locations)
        return catalog

    def initialize(self, name: str, warehouse: str, unique_locations: bool = False):
        if self.config is not None:
            raise ValueError(f"Catalog {self.config.name} is already initialized")
        self.config = CatalogConfig.create(name, warehouse, unique_locations)
        self.resolver = LocationResolver(self.config, NamespaceMetadataReader(self.store), self.suffix_supplier)
        logger.info("Initialized catalog %s with warehouse %s, unique table locations: %s",
                    name, self.config.warehouse_root, unique_locations)

    def name(self) -> str:
        self._check_initialized()
        return self.config.name

    def default_warehouse_location(self, identifier: Union[str, TableIdentifier]) -> str:
        self._check_initialized()
        return self.resolver.resolve_default_location(TableIdentifier.parse(identifier))

    def close(self):
        self.store.close()

    def _check_initialized(self):
        if self.resolver is None:
            raise ValueError("Catalog must be initialized before use")

    def __str__(self) -> str:
        return f"DynamoDbCatalog({self.config.name if self.config else None})"
