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
from typing import Any, Dict, Optional

import boto3

from pydynamocatalog.catalog.dynamodb.namespace_store import NamespaceStore
from pydynamocatalog.common.identifier import Namespace
from pydynamocatalog.common.options import Options
from pydynamocatalog.common.options.config import DynamoDbOptions

DYNAMODB_CLIENT = "dynamodb"

COL_IDENTIFIER = "identifier"
COL_NAMESPACE = "namespace"
NAMESPACE_IDENTIFIER = "NAMESPACE"

ITEM = "Item"

logger = logging.getLogger(__name__)


class DynamoDbNamespaceStore(NamespaceStore):
    """
    Reads namespace rows from the catalog's DynamoDB table. A namespace row is
    keyed by the constant identifier "NAMESPACE" and the dotted namespace name.
    """

    def __init__(self, options: Options, client: Optional[Any] = None):
        self.table_name = options.get(DynamoDbOptions.TABLE_NAME)
        if client is not None:
            self.client = client
            self._owns_client = False
        else:
            self.client = self._create_client(options)
            self._owns_client = True

    @staticmethod
    def _create_client(options: Options):
        session = boto3.Session(
            profile_name=options.get(DynamoDbOptions.PROFILE_NAME),
            region_name=options.get(DynamoDbOptions.REGION),
            aws_access_key_id=options.get(DynamoDbOptions.ACCESS_KEY_ID),
            aws_secret_access_key=options.get(DynamoDbOptions.SECRET_ACCESS_KEY),
            aws_session_token=options.get(DynamoDbOptions.SESSION_TOKEN),
        )
        return session.client(DYNAMODB_CLIENT, endpoint_url=options.get(DynamoDbOptions.ENDPOINT))

    @staticmethod
    def namespace_primary_key(namespace: Namespace) -> Dict[str, Dict[str, str]]:
        return {
            COL_IDENTIFIER: {"S": NAMESPACE_IDENTIFIER},
            COL_NAMESPACE: {"S": str(namespace)},
        }

    def get(self, namespace: Namespace) -> Optional[Dict[str, str]]:
        response = self.client.get_item(
            TableName=self.table_name,
            ConsistentRead=True,
            Key=self.namespace_primary_key(namespace),
        )
        if ITEM not in response:
            logger.debug("No row for namespace %s in table %s", namespace, self.table_name)
            return None
        return convert_item_to_row(response[ITEM])

    def close(self):
        if self._owns_client:
            self.client.close()


def convert_item_to_row(item: Dict[str, Dict[str, Any]]) -> Dict[str, str]:
    """Convert a DynamoDB item to a plain row.

    Example of an item:
    {
        "namespace": {"S": "db"},
        "p.location": {"S": "s3://bucket2/db"},
        "v": {"N": "1"}
    }

    Converted to a row:
    {
        "namespace": "db",
        "p.location": "s3://bucket2/db",
        "v": "1"
    }

    Only "S" and "N" attributes are written by the catalog, so only those are supported.
    """
    row = {}
    for column_name, attribute in item.items():
        if len(attribute) != 1:
            raise ValueError(f"Expecting only 1 attribute type for column {column_name}: {list(attribute)}")

        data_type, value = next(iter(attribute.items()))
        if data_type not in ("S", "N"):
            raise ValueError(f"Only S and N data types are supported, got {data_type} for column {column_name}")
        row[column_name] = value

    return row
