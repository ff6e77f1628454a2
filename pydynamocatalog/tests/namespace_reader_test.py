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

import unittest

from pydynamocatalog.catalog.catalog_exception import NamespaceNotExistException
from pydynamocatalog.catalog.dynamodb.namespace_reader import NamespaceMetadataReader
from pydynamocatalog.catalog.dynamodb.namespace_store import InMemoryNamespaceStore
from pydynamocatalog.common.identifier import Namespace


class NamespaceMetadataReaderTest(unittest.TestCase):

    def setUp(self):
        self.namespace = Namespace.of("db")
        self.store = InMemoryNamespaceStore()
        self.reader = NamespaceMetadataReader(self.store)

    def test_missing_row_raises(self):
        with self.assertRaises(NamespaceNotExistException) as context:
            self.reader.get_override(self.namespace)
        self.assertEqual(self.namespace, context.exception.namespace)
        self.assertIn("Cannot find default warehouse location:", str(context.exception))

    def test_empty_row_has_no_override(self):
        self.store.put(self.namespace, {})
        self.assertIsNone(self.reader.get_override(self.namespace))

    def test_row_without_location_has_no_override(self):
        self.store.put(self.namespace, {"namespace": "db", "p.comment": "sales"})
        self.assertIsNone(self.reader.get_override(self.namespace))

    def test_location_property(self):
        self.store.put(self.namespace, {"p.location": "s3://bucket2/db"})
        self.assertEqual("s3://bucket2/db", self.reader.get_override(self.namespace))

    def test_location_is_returned_as_stored(self):
        self.store.put(self.namespace, {"p.location": "s3://bucket2/db/"})
        self.assertEqual("s3://bucket2/db/", self.reader.get_override(self.namespace))

    def test_empty_location_has_no_override(self):
        self.store.put(self.namespace, {"p.location": ""})
        self.assertIsNone(self.reader.get_override(self.namespace))

    def test_unprefixed_location_column_is_ignored(self):
        self.store.put(self.namespace, {"location": "s3://bucket2/db"})
        self.assertIsNone(self.reader.get_override(self.namespace))

    def test_other_namespace_is_not_used(self):
        self.store.put(Namespace.of("other"), {"p.location": "s3://bucket2/other"})
        with self.assertRaises(NamespaceNotExistException):
            self.reader.get_override(self.namespace)


if __name__ == '__main__':
    unittest.main()
