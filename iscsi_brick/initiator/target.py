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

from typing import NamedTuple


class ISCSITarget(NamedTuple):
    """An iSCSI target as reported by a sendtargets discovery.

    :param portal: Address of the portal, as ``ip:port``.
    :param group_tag: Target portal group tag.
    :param target: IQN of the target.
    """
    portal: str
    group_tag: str
    target: str

    def __str__(self):
        return '%s,%s %s' % (self.portal, self.group_tag, self.target)
