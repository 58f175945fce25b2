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
.. module:: file_proxy_test
	:synopsis: Tests for write-if-different file output.

.. moduleauthor:: Brandon Bare
"""

import os

from .._testing import testcase
from .. import ExportFailureException
from .._utils import shared_globals
from .._utils.file_proxy import FileProxy


class TestFileProxy(testcase.TestCase):
	"""Write-if-different tests"""
	# pylint: disable=invalid-name

	def testWritesNewFile(self):
		"""Missing files and folders are created"""
		tempDir = self.CreateTempDir()
		path = os.path.join(tempDir, "nested", "out.txt")

		self.assertTrue(FileProxy(path, b"hello").Check())
		with open(path, "rb") as f:
			self.assertEqual(b"hello", f.read())
		self.assertEqual([path], shared_globals.exportedFiles)

	def testUnchangedFileIsNotTouched(self):
		"""Identical content leaves the file and its modification time alone"""
		tempDir = self.CreateTempDir()
		path = os.path.join(tempDir, "out.txt")
		FileProxy(path, b"hello").Check()

		os.utime(path, (1000000000, 1000000000))
		self.assertFalse(FileProxy(path, b"hello").Check())
		self.assertEqual(1000000000, int(os.path.getmtime(path)))
		self.assertEqual(1, len(shared_globals.exportedFiles))

	def testChangedFileIsRewritten(self):
		"""Different content replaces the file"""
		tempDir = self.CreateTempDir()
		path = os.path.join(tempDir, "out.txt")
		FileProxy(path, b"hello").Check()

		self.assertTrue(FileProxy(path, b"goodbye").Check())
		with open(path, "rb") as f:
			self.assertEqual(b"goodbye", f.read())

	def testWriteFailure(self):
		"""Filesystem errors become export failures"""
		tempDir = self.CreateTempDir()
		blocker = os.path.join(tempDir, "blocker")
		with open(blocker, "wb") as f:
			f.write(b"x")

		with self.assertRaises(ExportFailureException):
			FileProxy(os.path.join(blocker, "out.txt"), b"hello").Check()
