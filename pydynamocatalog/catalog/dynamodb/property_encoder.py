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

PROPERTY_COL_PREFIX = "p."


class PropertyEncoder:
    """
    Maps namespace property names to the columns that store them in a
    metadata row. Every property column carries the same prefix so that
    properties never clash with the key and bookkeeping columns.
    """

    @staticmethod
    def encode(property_name: str) -> str:
        return PROPERTY_COL_PREFIX + property_name

    @staticmethod
    def is_property_column(column_name: str) -> bool:
        return column_name.startswith(PROPERTY_COL_PREFIX)

    @staticmethod
    def decode(column_name: str) -> str:
        if not PropertyEncoder.is_property_column(column_name):
            raise ValueError(f"Column {column_name} is not a property column")
        return column_name[len(PROPERTY_COL_PREFIX):]
