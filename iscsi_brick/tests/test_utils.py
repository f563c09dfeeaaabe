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

from unittest import mock

import ddt

from iscsi_brick import utils
from iscsi_brick.tests import base


@ddt.ddt
class GetOptionAsIntTestCase(base.TestCase):

    @ddt.data(({'numberOfTargets': '5'}, 5),
              ({'numberOfTargets': '0'}, 0),
              ({'numberOfTargets': '-2'}, -2),
              ({'numberOfTargets': '+3'}, 3),
              ({}, 0))
    @ddt.unpack
    def test_get_option_as_int(self, options, expected):
        self.assertEqual(expected,
                         utils.get_option_as_int(options, 'numberOfTargets'))

    @ddt.data('five', '', '1.5', ' 5 ', '5\n', '1_000', '0x10')
    @mock.patch.object(utils, 'LOG')
    def test_get_option_as_int_not_numeric(self, value, mock_log):
        res = utils.get_option_as_int({'numberOfTargets': value},
                                      'numberOfTargets')
        self.assertEqual(0, res)
        mock_log.warning.assert_called_once()


class LogTracingTestCase(base.TestCase):

    def test_utils_trace_method(self):
        mock_logging = self.patch('iscsi_brick.utils.logging')
        mock_log = mock.Mock()
        mock_log.isEnabledFor = lambda x: True
        mock_logging.getLogger = mock.Mock(return_value=mock_log)

        @utils.trace
        def _trace_test_method(*args, **kwargs):
            return 'OK'

        result = _trace_test_method(self)
        self.assertEqual('OK', result)
        self.assertEqual(2, mock_log.debug.call_count)

    def test_utils_trace_method_exception(self):
        mock_logging = self.patch('iscsi_brick.utils.logging')
        mock_log = mock.Mock()
        mock_log.isEnabledFor = lambda x: True
        mock_logging.getLogger = mock.Mock(return_value=mock_log)

        @utils.trace
        def _trace_test_method(*args, **kwargs):
            raise ValueError('boom')

        self.assertRaises(ValueError, _trace_test_method, self)
        self.assertEqual(2, mock_log.debug.call_count)
        self.assertIn('exception', mock_log.debug.call_args[0][0])

    def test_utils_trace_method_disabled(self):
        mock_logging = self.patch('iscsi_brick.utils.logging')
        mock_log = mock.Mock()
        mock_log.isEnabledFor = lambda x: False
        mock_logging.getLogger = mock.Mock(return_value=mock_log)

        @utils.trace
        def _trace_test_method(*args, **kwargs):
            return 'OK'

        result = _trace_test_method(self)
        self.assertEqual('OK', result)
        mock_log.debug.assert_not_called()

    def test_utils_trace_method_with_password_in_result(self):
        mock_logging = self.patch('iscsi_brick.utils.logging')
        mock_log = mock.Mock()
        mock_log.isEnabledFor = lambda x: True
        mock_logging.getLogger = mock.Mock(return_value=mock_log)

        @utils.trace
        def _trace_test_method(*args, **kwargs):
            return "'adminPass': 'Now you see me'"

        result = _trace_test_method(self)
        self.assertEqual("'adminPass': 'Now you see me'", result)
        self.assertNotIn('Now you see me',
                         str(mock_log.debug.call_args_list[-1]))
