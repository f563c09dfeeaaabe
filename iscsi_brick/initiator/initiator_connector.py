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


import abc
import types

from oslo_config import cfg
from oslo_log import log as logging

from iscsi_brick import exception
from iscsi_brick import executor
from iscsi_brick import initiator

LOG = logging.getLogger(__name__)
CONF = cfg.CONF


class ISCSIConnector(executor.Executor, metaclass=abc.ABCMeta):
    """Operations every iSCSI connector backend provides.

    Callers should only rely on the methods defined here, so a
    LinuxISCSIConnector can be replaced with a MockISCSIConnector in tests.
    """

    # Whether the connector synthesizes its results instead of running
    # iscsiadm.  Fixed per class.
    mock = False

    def __init__(self, options=None, root_helper=None, execute=None,
                 *args, **kwargs):
        self.options = types.MappingProxyType(dict(options or {}))
        super(ISCSIConnector, self).__init__(
            root_helper, execute=execute,
            chroot_directory=self.get_chroot_directory(), *args, **kwargs)

    def get_chroot_directory(self):
        """Directory iscsiadm runs chrooted into, '/' meaning no chroot."""
        return (self.options.get(initiator.CHROOT_DIRECTORY) or
                CONF.iscsi_brick.chroot_directory or
                executor.ROOT_DIRECTORY)

    def _login_discovered_targets(self, targets):
        for target in targets:
            try:
                self.perform_login(target)
            except exception.ISCSIBrickException as exc:
                LOG.warning('Login to discovered target %(target)s at '
                            '%(portal)s failed: %(err)s',
                            {'target': target.target,
                             'portal': target.portal, 'err': exc})

    @abc.abstractmethod
    def discover_targets(self, address, login=False):
        """Run a sendtargets discovery against a portal.

        :param address: Address of the discovery portal.
        :type address: str
        :param login: Login to every discovered target.  Login failures are
                      logged and don't change the result.
        :type login: bool
        :returns: list of ISCSITarget, empty if nothing was found
        """
        pass

    @abc.abstractmethod
    def get_initiators(self, filename=''):
        """Return the initiator names configured on the host.

        :param filename: File holding the InitiatorName lines, the backend
                         default is used when empty.
        :type filename: str
        :returns: list of IQN strings
        """
        pass

    @abc.abstractmethod
    def perform_login(self, target):
        """Login to a target.  An existing session counts as success.

        :param target: The target to login to.
        :type target: ISCSITarget
        """
        pass

    @abc.abstractmethod
    def perform_logout(self, target):
        """Logout of a target.  A missing session counts as success.

        :param target: The target to logout of.
        :type target: ISCSITarget
        """
        pass

    @abc.abstractmethod
    def perform_rescan(self):
        """Rescan the targets of every current session."""
        pass
