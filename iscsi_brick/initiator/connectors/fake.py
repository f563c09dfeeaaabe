# Copyright 2013 OpenStack Foundation.
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

"""In-memory iSCSI connector for testing code that uses iscsi-brick.

Results are synthesized from the connector options, and any operation can be
forced to fail through an InducedErrors instance.
"""

from oslo_log import log as logging

from iscsi_brick import exception
from iscsi_brick.i18n import _
from iscsi_brick import initiator
from iscsi_brick.initiator import initiator_connector
from iscsi_brick.initiator import target as iscsi_target
from iscsi_brick import utils

LOG = logging.getLogger(__name__)

MOCK_TARGET_IQN_PREFIX = 'iqn.1992-04.com.mock:600009700bcbb70e32870174000'
MOCK_INITIATOR_IQN_PREFIX = 'iqn.1993-08.com.mock:01:00000000'
MOCK_GROUP_TAG = '0'


class InducedErrors(object):
    """Flags that make the matching MockISCSIConnector operation fail."""

    FLAGS = ('discovery', 'initiator', 'login', 'logout', 'rescan')

    def __init__(self, discovery=False, initiator=False, login=False,
                 logout=False, rescan=False):
        self.discovery = discovery
        self.initiator = initiator
        self.login = login
        self.logout = logout
        self.rescan = rescan

    def set(self, **flags):
        for name, value in flags.items():
            if name not in self.FLAGS:
                raise exception.Invalid(
                    _("Unknown induced error %(name)s, valid ones are: "
                      "%(valid)s") % {'name': name,
                                      'valid': ', '.join(self.FLAGS)})
            setattr(self, name, bool(value))

    def reset(self):
        self.set(**dict.fromkeys(self.FLAGS, False))

    def __repr__(self):
        return 'InducedErrors(%s)' % ', '.join(
            '%s=%s' % (name, getattr(self, name)) for name in self.FLAGS)


# Shared by every mock connector built without its own InducedErrors.
# Tests running concurrently should pass their own instance instead.
induced_errors = InducedErrors()


def set_induced_errors(**flags):
    induced_errors.set(**flags)


def reset_induced_errors():
    induced_errors.reset()


def _get_count(options, key):
    count = utils.get_option_as_int(options, key)
    return count or 1


class MockISCSIConnector(initiator_connector.ISCSIConnector):
    """Connector returning synthetic targets and initiators."""

    mock = True

    def __init__(self, options=None, root_helper=None, execute=None,
                 induced=None, *args, **kwargs):
        super(MockISCSIConnector, self).__init__(
            options=options, root_helper=root_helper, execute=execute,
            *args, **kwargs)
        if induced is None:
            induced = induced_errors
        self.induced_errors = induced

    def _check_induced_error(self, flag, operation):
        if getattr(self.induced_errors, flag):
            LOG.debug('Raising induced error for %s', operation)
            raise exception.InducedError(operation=operation)

    @utils.trace
    def discover_targets(self, address, login=False):
        self._check_induced_error('discovery', 'discover_targets')
        count = _get_count(self.options, initiator.MOCK_NUMBER_OF_TARGETS)
        targets = [
            iscsi_target.ISCSITarget(
                '%s:%s' % (address, initiator.ISCSI_DEFAULT_PORT),
                MOCK_GROUP_TAG,
                '%s%05d' % (MOCK_TARGET_IQN_PREFIX, idx))
            for idx in range(count)]
        if login:
            self._login_discovered_targets(targets)
        return targets

    @utils.trace
    def get_initiators(self, filename=''):
        self._check_induced_error('initiator', 'get_initiators')
        count = _get_count(self.options, initiator.MOCK_NUMBER_OF_INITIATORS)
        return ['%s%05d' % (MOCK_INITIATOR_IQN_PREFIX, idx)
                for idx in range(count)]

    @utils.trace
    def perform_login(self, target):
        self._check_induced_error('login', 'iSCSI Login')

    @utils.trace
    def perform_logout(self, target):
        self._check_induced_error('logout', 'iSCSI Logout')

    @utils.trace
    def perform_rescan(self):
        self._check_induced_error('rescan', 'iSCSI Rescan')
