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
"""iSCSI connector objects for each supported backend.

.. module: connector

The Linux backend runs iscsiadm on the host, the mock backend synthesizes
results in memory so callers can be tested without iSCSI hardware.
"""

from oslo_log import log as logging
from oslo_utils import importutils

from iscsi_brick import exception
from iscsi_brick.i18n import _
from iscsi_brick import initiator

LOG = logging.getLogger(__name__)

_connector_mapping = {
    initiator.LINUX:
        'iscsi_brick.initiator.connectors.linux.LinuxISCSIConnector',
    initiator.MOCK:
        'iscsi_brick.initiator.connectors.fake.MockISCSIConnector',
}


def get_connector_mapping():
    """Get connector mapping based on the backend name."""
    return dict(_connector_mapping)


def factory(backend, options=None, root_helper=None, *args, **kwargs):
    """Build an iSCSI connector object based upon the backend name."""
    LOG.debug("Factory for %s iSCSI connector", backend)
    backend = backend.upper()

    connector = _connector_mapping.get(backend)
    if not connector:
        msg = (_("Invalid iSCSI connector backend "
                 "specified %(backend)s") %
               dict(backend=backend))
        raise exception.InvalidConnectorBackend(msg)

    kwargs.update({'options': options,
                   'root_helper': root_helper})
    conn_cls = importutils.import_class(connector)
    return conn_cls(*args, **kwargs)
