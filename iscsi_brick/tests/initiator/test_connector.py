# (c) Copyright 2013 Hewlett-Packard Development Company, L.P.
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

import operator

import ddt

from iscsi_brick import exception
from iscsi_brick import initiator
from iscsi_brick.initiator import connector
from iscsi_brick.initiator.connectors import fake
from iscsi_brick.initiator.connectors import linux
from iscsi_brick.initiator import initiator_connector
from iscsi_brick.initiator import target as iscsi_target
from iscsi_brick.tests import base as test_base

FAKE_PORTAL = '10.0.2.15:3260'
FAKE_IQN = 'iqn.2010-10.org.openstack:volume-00000001'
FAKE_TARGET = iscsi_target.ISCSITarget(FAKE_PORTAL, '1', FAKE_IQN)


class ConnectorTestCase(test_base.TestCase):

    def setUp(self):
        super(ConnectorTestCase, self).setUp()
        self.cmds = []

    def fake_execute(self, *cmd, **kwargs):
        self.cmds.append(" ".join(cmd))
        return "", None

    def fake_target(self, portal=FAKE_PORTAL, iqn=FAKE_IQN):
        return iscsi_target.ISCSITarget(portal, '1', iqn)


@ddt.ddt
class ConnectorFactoryTestCase(ConnectorTestCase):

    @ddt.data(('linux', linux.LinuxISCSIConnector, False),
              ('LINUX', linux.LinuxISCSIConnector, False),
              ('mock', fake.MockISCSIConnector, True),
              ('Mock', fake.MockISCSIConnector, True))
    @ddt.unpack
    def test_factory(self, backend, expected_cls, is_mock):
        obj = connector.factory(backend, {'numberOfTargets': '2'},
                                execute=self.fake_execute)
        self.assertIsInstance(obj, expected_cls)
        self.assertIsInstance(obj, initiator_connector.ISCSIConnector)
        self.assertEqual(is_mock, obj.mock)
        self.assertEqual('2', obj.options[initiator.MOCK_NUMBER_OF_TARGETS])

    def test_factory_root_helper(self):
        obj = connector.factory(initiator.LINUX, root_helper='sudo')
        self.assertEqual('sudo', obj._root_helper)

    def test_factory_invalid_backend(self):
        self.assertRaises(exception.InvalidConnectorBackend,
                          connector.factory, 'bogus')

    def test_get_connector_mapping(self):
        mapping = connector.get_connector_mapping()
        self.assertEqual({initiator.LINUX, initiator.MOCK}, set(mapping))
        # The returned mapping is a copy
        mapping.clear()
        self.assertEqual(2, len(connector.get_connector_mapping()))


@ddt.ddt
class ISCSIConnectorTestCase(ConnectorTestCase):

    def test_interface_is_abstract(self):
        self.assertRaises(TypeError, initiator_connector.ISCSIConnector)

    def test_options_are_read_only(self):
        options = {'numberOfTargets': '3'}
        obj = fake.MockISCSIConnector(options)
        self.assertRaises(TypeError, operator.setitem, obj.options,
                          'numberOfTargets', '4')
        # Changes to the caller's mapping don't reach the connector
        options['numberOfTargets'] = '4'
        self.assertEqual('3', obj.options['numberOfTargets'])

    def test_no_options(self):
        obj = fake.MockISCSIConnector()
        self.assertEqual({}, dict(obj.options))

    @ddt.data(({}, '/'),
              ({'chrootDirectory': ''}, '/'),
              ({'chrootDirectory': '/mnt/root'}, '/mnt/root'))
    @ddt.unpack
    def test_get_chroot_directory(self, options, expected):
        obj = linux.LinuxISCSIConnector(options)
        self.assertEqual(expected, obj.get_chroot_directory())

    def test_get_chroot_directory_from_config(self):
        self.flags(chroot_directory='/host')
        obj = linux.LinuxISCSIConnector()
        self.assertEqual('/host', obj.get_chroot_directory())

    def test_get_chroot_directory_option_wins_over_config(self):
        self.flags(chroot_directory='/host')
        obj = linux.LinuxISCSIConnector({'chrootDirectory': '/mnt/root'})
        self.assertEqual('/mnt/root', obj.get_chroot_directory())
