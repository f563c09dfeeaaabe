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

"""Exceptions for the iSCSI brick library."""

from oslo_concurrency import processutils as putils
from oslo_log import log as logging

from iscsi_brick.i18n import _


LOG = logging.getLogger(__name__)


class ISCSIBrickException(Exception):
    """Base iSCSI Brick Exception

    To correctly use this class, inherit from it and define
    a 'message' property. That message will get printf'd
    with the keyword arguments provided to the constructor.
    """
    message = _("An unknown exception occurred.")
    code = 500

    def __init__(self, message=None, **kwargs):
        self.kwargs = kwargs

        if 'code' not in self.kwargs:
            try:
                self.kwargs['code'] = self.code
            except AttributeError:
                pass

        if not message:
            try:
                message = self.message % kwargs

            except Exception:
                # kwargs doesn't match a variable in the message
                # log the issue and the kwargs
                LOG.exception("Exception in string format operation. "
                              "msg='%s'", self.message)
                for name, value in kwargs.items():
                    LOG.error("%(name)s: %(value)s", {'name': name,
                                                      'value': value})

                # at least get the core message out if something happened
                message = self.message

        # Put the message in 'msg' so that we can access it.  If we have it in
        # message it will be overshadowed by the class' message attribute
        self.msg = message
        super(ISCSIBrickException, self).__init__(message)


class NotFound(ISCSIBrickException):
    message = _("Resource could not be found.")
    code = 404


class Invalid(ISCSIBrickException):
    message = _("Unacceptable parameters.")
    code = 400


class InitiatorFileNotFound(NotFound):
    message = _("iSCSI initiator name file %(path)s does not exist.")


class InitiatorFileReadError(ISCSIBrickException):
    message = _("Unable to read iSCSI initiator name file %(path)s: "
                "%(reason)s")


class TargetDiscoveryFailed(ISCSIBrickException):
    message = _("Unable to discover iSCSI targets at %(address)s: "
                "%(reason)s")


class FailedISCSITargetLogin(ISCSIBrickException):
    message = _("Unable to login to iSCSI target %(target)s at portal "
                "%(portal)s (exit code %(exit_code)s).")


class FailedISCSITargetLogout(ISCSIBrickException):
    message = _("Unable to logout of iSCSI target %(target)s at portal "
                "%(portal)s (exit code %(exit_code)s).")


class InducedError(ISCSIBrickException):
    message = _("%(operation)s induced error")


# This extends ValueError so callers can treat a bad backend name like any
# other bad argument.
class InvalidConnectorBackend(ValueError):
    pass


class ExecutionTimeout(putils.ProcessExecutionError):
    pass
