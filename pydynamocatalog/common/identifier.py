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
from typing import Tuple, Union

NAMESPACE_SEPARATOR = '.'


@dataclass(frozen=True)
class Namespace:
    """Ordered levels of a catalog namespace, e.g. ("db",) or ("a", "b")."""

    levels: Tuple[str, ...]

    def __post_init__(self):
        if isinstance(self.levels, str):
            raise ValueError("Namespace levels must be a sequence, not a string: {!r}".format(self.levels))
        if not self.levels:
            raise ValueError("Namespace must have at least one level")
        for level in self.levels:
            if not level:
                raise ValueError("Invalid namespace level: {!r}".format(level))
        object.__setattr__(self, 'levels', tuple(self.levels))

    @classmethod
    def of(cls, *levels: str) -> "Namespace":
        return cls(tuple(levels))

    def __str__(self) -> str:
        return NAMESPACE_SEPARATOR.join(self.levels)


@dataclass(frozen=True)
class TableIdentifier:

    namespace: Namespace
    name: str

    def __post_init__(self):
        if not self.name:
            raise ValueError("Invalid table name: {!r}".format(self.name))

    @classmethod
    def of(cls, *parts: str) -> "TableIdentifier":
        if len(parts) < 2:
            raise ValueError("Table identifier needs a namespace and a name: {}".format(parts))
        return cls(Namespace(tuple(parts[:-1])), parts[-1])

    @classmethod
    def from_string(cls, full_name: str) -> "TableIdentifier":
        parts = full_name.split(NAMESPACE_SEPARATOR)
        if len(parts) < 2:
            raise ValueError("Invalid identifier format: {}".format(full_name))
        return cls.of(*parts)

    @classmethod
    def parse(cls, identifier: Union[str, "TableIdentifier"]) -> "TableIdentifier":
        if isinstance(identifier, TableIdentifier):
            return identifier
        return cls.from_string(identifier)

    def get_full_name(self) -> str:
        return "{}.{}".format(self.namespace, self.name)

    def get_namespace(self) -> Namespace:
        return self.namespace

    def get_table_name(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.get_full_name()
