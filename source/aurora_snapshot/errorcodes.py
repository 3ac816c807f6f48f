#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0

GENERAL_ERROR = "GENERAL_ERROR"
CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
INVALID_PARAMS = "INVALID_PARAMS"
