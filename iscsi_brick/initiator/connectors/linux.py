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


import os
from typing import List, Tuple  # noqa: H301

from oslo_concurrency import processutils as putils
from oslo_config import cfg
from oslo_log import log as logging
from oslo_utils import strutils

from iscsi_brick import exception
from iscsi_brick import executor
from iscsi_brick import initiator
from iscsi_brick.initiator import initiator_connector
from iscsi_brick.initiator import target as iscsi_target
from iscsi_brick import utils

LOG = logging.getLogger(__name__)
CONF = cfg.CONF


class LinuxISCSIConnector(initiator_connector.ISCSIConnector):
    """Connector that drives the open-iscsi iscsiadm tool."""

    mock = False

    def _run_iscsiadm_bare(self, iscsi_command, **kwargs) -> Tuple[str, str]:
        check_exit_code = kwargs.pop('check_exit_code', 0)
        (out, err) = self._execute_chrooted(CONF.iscsi_brick.iscsiadm_path,
                                            *iscsi_command,
                                            run_as_root=True,
                                            root_helper=self._root_helper,
                                            check_exit_code=check_exit_code)
        msg = ("iscsiadm %(iscsi_command)s: stdout=%(out)s stderr=%(err)s" %
               {'iscsi_command': iscsi_command, 'out': out, 'err': err})
        # don't let passwords be shown in log output
        LOG.debug(strutils.mask_password(msg))
        return (out, err)

    def _run_iscsiadm_node(self, target, iscsi_command, failure):
        """Run a node command, treating an existing session as success.

        iscsiadm returns ISCSI_ERR_SESS_EXISTS both when logging in to a
        target we already have a session with and when the session we log
        out of is already gone.  Any other failure raises the given
        exception class.
        """
        try:
            self._run_iscsiadm_bare(('-m', 'node', '-T', target.target,
                                     '--portal', target.portal) +
                                    iscsi_command)
        except putils.ProcessExecutionError as exc:
            if exc.exit_code == initiator.ISCSI_ERR_SESS_EXISTS:
                LOG.info('iscsiadm %(cmd)s for %(target)s at %(portal)s '
                         'found the session state already in place.',
                         {'cmd': iscsi_command, 'target': target.target,
                          'portal': target.portal})
                return
            LOG.error('iscsiadm %(cmd)s failed for %(target)s at %(portal)s '
                      '(exit code %(code)s): %(err)s',
                      {'cmd': iscsi_command, 'target': target.target,
                       'portal': target.portal, 'code': exc.exit_code,
                       'err': exc.stderr or exc.description})
            raise failure(target=target.target, portal=target.portal,
                          exit_code=exc.exit_code) from exc
        except OSError as exc:
            # A custom execute may not convert start failures
            LOG.error('iscsiadm %(cmd)s could not be run for %(target)s at '
                      '%(portal)s: %(err)s',
                      {'cmd': iscsi_command, 'target': target.target,
                       'portal': target.portal, 'err': exc})
            raise failure(target=target.target, portal=target.portal,
                          exit_code=None) from exc

    @staticmethod
    def _get_targets_from_iscsiadm_output(output) -> List:
        # One line of a sendtargets discovery looks like:
        #   10.247.73.130:3260,0 iqn.1992-04.com.emc:600009700bcbb70e328701
        # as we are parsing a command line utility, allow for the
        # possibility that additional debug data is spewed in the
        # stream, and only grab lines with exactly two tokens.
        targets = []
        for line in (output or '').splitlines():
            tokens = line.split(' ')
            if len(tokens) != 2:
                continue
            portal, _sep, group_tag = tokens[0].partition(',')
            if not (portal and group_tag and tokens[1]):
                LOG.debug('Skipping malformed discovery line %r', line)
                continue
            targets.append(iscsi_target.ISCSITarget(portal, group_tag,
                                                    tokens[1]))
        return targets

    @utils.trace
    def discover_targets(self, address, login=False):
        try:
            out, _err = self._run_iscsiadm_bare(('-m', 'discovery',
                                                 '-t', 'st',
                                                 '--portal', address))
        except putils.ProcessExecutionError as exc:
            LOG.error('Error discovering %(address)s: %(err)s',
                      {'address': address,
                       'err': exc.stderr or exc.description})
            raise exception.TargetDiscoveryFailed(
                address=address,
                reason=exc.stderr or exc.description) from exc

        targets = self._get_targets_from_iscsiadm_output(out)
        if login:
            self._login_discovered_targets(targets)
        return targets

    def _get_default_initiator_file(self):
        file_path = CONF.iscsi_brick.initiator_name_file
        chroot_directory = self.get_chroot_directory()
        if chroot_directory == executor.ROOT_DIRECTORY:
            return file_path
        return os.path.join(chroot_directory, file_path.lstrip('/'))

    @staticmethod
    def _get_initiators_from_file_contents(contents) -> List[str]:
        iqns = []
        for line in (contents or '').splitlines():
            # remove all whitespace to catch different formatting
            line = ''.join(line.split())
            if line.startswith(initiator.INITIATOR_NAME_PREFIX):
                iqns.append(line.split('=')[1])
        return iqns

    @utils.trace
    def get_initiators(self, filename=''):
        file_path = filename or self._get_default_initiator_file()
        if not os.path.exists(file_path):
            LOG.warning("Could not find the iSCSI Initiator File %s",
                        file_path)
            raise exception.InitiatorFileNotFound(path=file_path)

        # The file is usually only readable by root.
        try:
            contents, _err = self._execute('cat', file_path,
                                           run_as_root=True,
                                           root_helper=self._root_helper)
        except putils.ProcessExecutionError as exc:
            LOG.error("Error gathering initiator names from %(path)s: "
                      "%(err)s",
                      {'path': file_path,
                       'err': exc.stderr or exc.description})
            raise exception.InitiatorFileReadError(
                path=file_path,
                reason=exc.stderr or exc.description) from exc

        return self._get_initiators_from_file_contents(contents)

    @utils.trace
    def perform_login(self, target):
        LOG.info("Trying to login to iSCSI target %(target)s at %(portal)s",
                 {'target': target.target, 'portal': target.portal})
        self._run_iscsiadm_node(target, ('-l',),
                                exception.FailedISCSITargetLogin)

    @utils.trace
    def perform_logout(self, target):
        LOG.info("Trying to logout of iSCSI target %(target)s at %(portal)s",
                 {'target': target.target, 'portal': target.portal})
        self._run_iscsiadm_node(target, ('--logout',),
                                exception.FailedISCSITargetLogout)

    @utils.trace
    def perform_rescan(self):
        self._run_iscsiadm_bare(('-m', 'node', '--rescan'))
