# Copyright (c) 2022, Red Hat, Inc.
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
from oslo_config import cfg


_opts = [
    cfg.StrOpt('iscsiadm_path',
               default='iscsiadm',
               help='Path of the iscsiadm binary used for discovery, login, '
                    'logout and rescan. When a chroot directory is in use '
                    'the path is resolved inside the chroot.'),
    cfg.StrOpt('chroot_directory',
               default='/',
               help='Directory iscsiadm is run chrooted into. Useful for '
                    'containerized services where the host filesystem is '
                    'mounted under a prefix. The ``chrootDirectory`` '
                    'connector option takes precedence over this value. '
                    'Default value ``/`` runs iscsiadm without chroot.'),
    cfg.StrOpt('initiator_name_file',
               default='/etc/iscsi/initiatorname.iscsi',
               help='File holding the ``InitiatorName=`` entries of the '
                    'host. When a chroot directory is in use the file is '
                    'looked up under that directory.'),
]

cfg.CONF.register_opts(_opts, group='iscsi_brick')


def list_opts():
    """oslo.config.opts entrypoint for sample config generation."""
    return [('iscsi_brick', _opts)]


def set_defaults(conf=cfg.CONF, iscsiadm_path=None, chroot_directory=None,
                 initiator_name_file=None):
    """Override the default values of the iscsi_brick options.

    Meant for services that ship iscsiadm in a non standard location or that
    always run inside a container with the host root mounted elsewhere.
    Only the arguments that are not None are changed.
    """
    if iscsiadm_path is not None:
        conf.set_default('iscsiadm_path', iscsiadm_path, 'iscsi_brick')
    if chroot_directory is not None:
        conf.set_default('chroot_directory', chroot_directory, 'iscsi_brick')
    if initiator_name_file is not None:
        conf.set_default('initiator_name_file', initiator_name_file,
                         'iscsi_brick')
