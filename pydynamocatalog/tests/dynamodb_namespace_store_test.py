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
from unittest.mock import Mock, patch

from pydynamocatalog.catalog.dynamodb.dynamodb_namespace_store import (DynamoDbNamespaceStore,
                                                                       convert_item_to_row)
from pydynamocatalog.common.identifier import Namespace
from pydynamocatalog.common.options import Options


class DynamoDbNamespaceStoreTest(unittest.TestCase):

    def setUp(self):
        self.client = Mock()
        self.store = DynamoDbNamespaceStore(Options({"dynamodb.table-name": "catalog"}), client=self.client)

    def test_get_row(self):
        self.client.get_item.return_value = {
            "Item": {
                "identifier": {"S": "NAMESPACE"},
                "namespace": {"S": "a.b"},
                "p.location": {"S": "s3://bucket2/a/b"},
                "v": {"N": "3"},
            }
        }

        row = self.store.get(Namespace.of("a", "b"))
        self.assertEqual({
            "identifier": "NAMESPACE",
            "namespace": "a.b",
            "p.location": "s3://bucket2/a/b",
            "v": "3",
        }, row)
        self.client.get_item.assert_called_once_with(
            TableName="catalog",
            ConsistentRead=True,
            Key={"identifier": {"S": "NAMESPACE"}, "namespace": {"S": "a.b"}},
        )

    def test_missing_item(self):
        self.client.get_item.return_value = {"ResponseMetadata": {"HTTPStatusCode": 200}}
        self.assertIsNone(self.store.get(Namespace.of("db")))

    def test_empty_item(self):
        self.client.get_item.return_value = {"Item": {}}
        self.assertEqual({}, self.store.get(Namespace.of("db")))

    def test_default_table_name(self):
        store = DynamoDbNamespaceStore(Options(), client=self.client)
        self.assertEqual("iceberg", store.table_name)

    def test_convert_rejects_unsupported_types(self):
        with self.assertRaises(ValueError):
            convert_item_to_row({"p.location": {"BOOL": True}})
        with self.assertRaises(ValueError):
            convert_item_to_row({"p.location": {"S": "a", "N": "1"}})

    def test_client_from_options(self):
        options = Options({
            "dynamodb.region": "us-west-2",
            "dynamodb.profile-name": "analytics",
            "dynamodb.access-key-id": "key",
            "dynamodb.secret-access-key": "secret",
            "dynamodb.session-token": "token",
            "dynamodb.endpoint": "http://localhost:8000",
        })
        with patch("pydynamocatalog.catalog.dynamodb.dynamodb_namespace_store.boto3.Session") as session_class:
            store = DynamoDbNamespaceStore(options)

        session_class.assert_called_once_with(
            profile_name="analytics",
            region_name="us-west-2",
            aws_access_key_id="key",
            aws_secret_access_key="secret",
            aws_session_token="token",
        )
        session_class.return_value.client.assert_called_once_with("dynamodb", endpoint_url="http://localhost:8000")
        self.assertIs(session_class.return_value.client.return_value, store.client)

        store.close()
        store.client.close.assert_called_once_with()

    def test_injected_client_is_not_closed(self):
        self.store.close()
        self.client.close.assert_not_called()


if __name__ == '__main__':
    unittest.main()
