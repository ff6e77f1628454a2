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
from typing import Optional

from pydynamocatalog.catalog.catalog import Catalog
from pydynamocatalog.catalog.dynamodb.dynamodb_catalog import DynamoDbCatalog
from pydynamocatalog.catalog.dynamodb.namespace_store import NamespaceStore
from pydynamocatalog.common.options import Options
from pydynamocatalog.common.options.config import CatalogOptions


class CatalogFactory:

    CATALOG_REGISTRY = {
        "dynamodb": DynamoDbCatalog,
    }

    @staticmethod
    def create(name: str, catalog_options: dict, store: Optional[NamespaceStore] = None) -> Catalog:
        options = Options(catalog_options)
        identifier = options.get(CatalogOptions.METASTORE)
        catalog_class = CatalogFactory.CATALOG_REGISTRY.get(identifier)
        if catalog_class is None:
            raise ValueError(f"Unknown catalog identifier: {identifier}. "
                             f"Available types: {list(CatalogFactory.CATALOG_REGISTRY.keys())}")
        return catalog_class.from_options(name, options, store)
