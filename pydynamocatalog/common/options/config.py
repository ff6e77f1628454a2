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
from pydynamocatalog.common.options.config_options import ConfigOptions


class CatalogOptions:
    METASTORE = ConfigOptions.key("metastore").string_type().default_value("dynamodb")
    WAREHOUSE = ConfigOptions.key("warehouse").string_type().no_default_value()
    UNIQUE_TABLE_LOCATION = ConfigOptions.key("unique-table-location").boolean_type().default_value(False)


class DynamoDbOptions:
    TABLE_NAME = ConfigOptions.key("dynamodb.table-name").string_type().default_value("iceberg")
    REGION = ConfigOptions.key("dynamodb.region").string_type().no_default_value()
    PROFILE_NAME = ConfigOptions.key("dynamodb.profile-name").string_type().no_default_value()
    ACCESS_KEY_ID = ConfigOptions.key("dynamodb.access-key-id").string_type().no_default_value()
    SECRET_ACCESS_KEY = ConfigOptions.key("dynamodb.secret-access-key").string_type().no_default_value()
    SESSION_TOKEN = ConfigOptions.key("dynamodb.session-token").string_type().no_default_value()
    ENDPOINT = ConfigOptions.key("dynamodb.endpoint").string_type().no_default_value()
