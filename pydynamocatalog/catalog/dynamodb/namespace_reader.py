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
from typing import Optional

from pydynamocatalog.catalog.catalog import Catalog
from pydynamocatalog.catalog.catalog_exception import NamespaceNotExistException
from pydynamocatalog.catalog.dynamodb.namespace_store import NamespaceStore
from pydynamocatalog.catalog.dynamodb.property_encoder import PropertyEncoder
from pydynamocatalog.common.identifier import Namespace

logger = logging.getLogger(__name__)


class NamespaceMetadataReader:

    LOCATION_COL = PropertyEncoder.encode(Catalog.DB_LOCATION_PROP)

    def __init__(self, store: NamespaceStore):
        self.store = store

    def get_override(self, namespace: Namespace) -> Optional[str]:
        """
        Location property of a namespace.

        Returns:
            The stored location, or None when the namespace has no location property.

        Raises:
            NamespaceNotExistException: If the store has no row for the namespace.
        """
        row = self.store.get(namespace)
        if row is None:
            raise NamespaceNotExistException(namespace)

        location = row.get(self.LOCATION_COL)
        if not location:
            logger.debug("Namespace %s has no location property", namespace)
            return None

        logger.debug("Namespace %s is located at %s", namespace, location)
        return location
