# SPDX-License-Identifier: Apache-2.0
# Copyright Contributors to the Datever Project


# Update this value to version up datever. Do not place anything else in this file.
_datever_version = "1.2.0"
