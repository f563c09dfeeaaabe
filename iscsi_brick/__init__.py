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

from oslo_config import cfg
from oslo_log import log as logging

from iscsi_brick import opts


LOG = logging.getLogger(__name__)


def setup(conf=cfg.CONF, **kwargs):
    """Setup the iscsi-brick library.

    Service configuration options must have been initialized before this
    call.  Any keyword argument is passed to opts.set_defaults, so a service
    can change where iscsiadm or the initiator name file live.
    """
    opts.set_defaults(conf, **kwargs)
    LOG.debug('iscsi_brick configured with chroot directory %s',
              conf.iscsi_brick.chroot_directory)
