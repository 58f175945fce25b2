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
.. module:: defines_test
	:synopsis: Tests for preprocessor define handling.

.. moduleauthor:: Jaedyn K. Draper
"""

import collections

from .._testing import testcase
from .. import defines


class TestDefines(testcase.TestCase):
	"""Preprocessor define tests"""
	# pylint: disable=invalid-name

	def testParse(self):
		"""Defines may be separated by spaces, semicolons or new lines"""
		parsed = defines.ParsePreprocessorDefines("FOO=1 BAR;BAZ=hello\nQUX=")
		self.assertEqual([("FOO", "1"), ("BAR", ""), ("BAZ", "hello"), ("QUX", "")], list(parsed.items()))
		self.assertEqual([], list(defines.ParsePreprocessorDefines("").items()))
		self.assertEqual([], list(defines.ParsePreprocessorDefines(None).items()))

	def testMergeCollision(self):
		"""On a collision the later value wins but the key keeps its first position"""
		base = collections.OrderedDict([("A", ""), ("WIN32", "")])
		overrides = collections.OrderedDict([("A", "1"), ("B", "")])
		merged = defines.MergePreprocessorDefines(base, overrides)
		self.assertEqual("A=1;WIN32;B", defines.FormatPreprocessorDefines(merged))

	def testMergeLeavesInputsAlone(self):
		"""Merging builds a new mapping"""
		base = collections.OrderedDict([("A", "")])
		defines.MergePreprocessorDefines(base, {"A": "2"})
		self.assertEqual("", base["A"])

	def testFormatJoinString(self):
		"""Custom separators are used between defines"""
		values = collections.OrderedDict([("X", "1"), ("Y", "")])
		self.assertEqual("X=1 Y", defines.FormatPreprocessorDefines(values, " "))

	def testReplaceTokens(self):
		"""Known ${NAME} tokens are replaced; unknown tokens stay as written"""
		values = collections.OrderedDict([("OUT", "build"), ("ARCH", "x64")])
		self.assertEqual("build/x64/${MISSING}", defines.ReplacePreprocessorTokens(values, "${OUT}/${ARCH}/${MISSING}"))
		self.assertEqual("", defines.ReplacePreprocessorTokens(values, ""))

	def testVersionAsHex(self):
		"""Version strings pack into one byte per component"""
		self.assertEqual("0x10203", defines.GetVersionAsHex("1.2.3"))
		self.assertEqual("0x20000", defines.GetVersionAsHex("2"))
		self.assertEqual("0x1020304", defines.GetVersionAsHex("1.2.3.4"))
