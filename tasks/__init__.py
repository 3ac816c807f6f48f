#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#
#  Licensed under the Apache License, Version 2.0 (the "License"). You may not use this file except in compliance
#  with the License. A copy of the License is located at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
#  or in the 'license' file accompanying this file. This file is distributed on an 'AS IS' BASIS, WITHOUT WARRANTIES
#  OR CONDITIONS OF ANY KIND, express or implied. See the License for the specific language governing permissions
#  and limitations under the License.
from invoke import Collection

import tasks.devkit as devkit
import tasks.clean
import tasks.cdk
import tasks.tests
import os

ns = Collection()
ns.configure({
    'run': {
        'echo': True
    }
})

ns.add_collection(clean)
ns.add_collection(cdk)
ns.add_collection(tests)

# local development - unique for individual developer.
# local_dev.py is added to .gitignore and is not checked in.
local_dev = os.path.join(devkit.props.project_root_dir, 'tasks', 'local_dev.py')
if os.path.isfile(local_dev):
    import tasks.local_dev

    ns.add_collection(local_dev)
