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

from abc import ABC, abstractmethod
from typing import Dict, Optional

from pydynamocatalog.common.identifier import Namespace


class NamespaceStore(ABC):
    """
    Point lookup of namespace metadata rows.

    A row maps column names to string values. None means the store has no
    row for the namespace; an empty dict is an existing namespace without
    any column set.
    """

    @abstractmethod
    def get(self, namespace: Namespace) -> Optional[Dict[str, str]]:
        """Fetch the metadata row of the given namespace."""

    def close(self):
        pass


class InMemoryNamespaceStore(NamespaceStore):

    def __init__(self, rows: Optional[Dict[Namespace, Dict[str, str]]] = None):
        self._rows = dict(rows) if rows else {}

    def put(self, namespace: Namespace, row: Dict[str, str]):
        self._rows[namespace] = dict(row)

    def get(self, namespace: Namespace) -> Optional[Dict[str, str]]:
        row = self._rows.get(namespace)
        return dict(row) if row is not None else None
