#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0

__name__ = "aurora-snapshot"
__version__ = "1.0.0"
