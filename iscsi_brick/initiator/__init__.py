# Copyright 2015 OpenStack Foundation
# All Rights Reserved.
#
#    Licensed under the Apache License, Version 2.0 (the "License"); you may
#    not use this file except in compliance with the License. You may obtain
#    a copy of the License at
#
#         http://www.apache.org/licenses/LICENSE-2.0
#
#    Unless required by applicable law or agreed to in writing, software
#    distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
#    WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
#    License for the specific language governing permissions and limitations
#    under the License.
"""iSCSI Brick's Initiator module.

The initiator module contains the connectors that discover iSCSI targets,
read the local initiator names and manage the sessions of the host.
"""

# Connector backends
LINUX = 'LINUX'
MOCK = 'MOCK'

# Connector option keys
CHROOT_DIRECTORY = 'chrootDirectory'
MOCK_NUMBER_OF_INITIATORS = 'numberOfInitiators'
MOCK_NUMBER_OF_TARGETS = 'numberOfTargets'

# iscsiadm exit code for "session exists", also returned when logging out of
# a session that is already gone.
ISCSI_ERR_SESS_EXISTS = 15

ISCSI_DEFAULT_PORT = 3260
INITIATOR_NAME_PREFIX = 'InitiatorName='
