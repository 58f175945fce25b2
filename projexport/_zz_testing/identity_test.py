# Copyright (C) 2016 Jaedyn K. Draper
#
# Permission is hereby granted, free of charge, to any person obtaining
# a copy of this software and associated documentation files (the "Software"),
# to deal in the Software without restriction, including without limitation
# the rights to use, copy, modify, merge, publish, distribute, sublicense,
# and/or sell copies of the Software, and to permit persons to whom the
# Software is furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL
# THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""
.. module:: identity_test
	:synopsis: Tests for generated GUIDs.

.. moduleauthor:: Brandon Bare
"""

import re

from .._testing import testcase
from .. import identity

_guidRegex = re.compile(R"^\{[0-9A-F]{8}-[0-9A-F]{4}-[0-9A-F]{4}-[0-9A-F]{4}-[0-9A-F]{12}\}$")


class TestIdentity(testcase.TestCase):
	"""GUID tests"""
	# pylint: disable=invalid-name

	def testGuidFormat(self):
		"""GUIDs are upper case and wrapped in braces"""
		self.assertRegex(identity.CreateGuid("Xy12AbVST3"), _guidRegex)

	def testGuidIsStable(self):
		"""The same seed always produces the same GUID"""
		self.assertEqual(identity.CreateGuid("Xy12AbShared Code"), identity.CreateGuid("Xy12AbShared Code"))

	def testGuidsDiffer(self):
		"""Different seeds produce different GUIDs"""
		seeds = ["Xy12AbVST3", "Xy12AbAAX", "Xy12AbShared Code", "grp_source", "grp_wrappers"]
		self.assertEqual(len(seeds), len({identity.CreateGuid(seed) for seed in seeds}))
