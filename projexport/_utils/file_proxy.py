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
.. module:: file_proxy
	:synopsis: Write-if-different handling for generated files

.. moduleauthor:: Brandon Bare
"""

import hashlib
import os

from .. import log, ExportFailureException
from . import shared_globals


def _hashData(data):
	dataHash = hashlib.md5()
	dataHash.update(data)
	return dataHash.hexdigest()


class FileProxy(object):
	"""
	Handler for moving generated data into its final location. The file on disk is only touched when its
	contents differ from the generated data, so an unchanged file keeps its modification time.

	:param realFilePath: Final output path
	:type realFilePath: str
	:param data: Generated file contents
	:type data: bytes
	"""
	def __init__(self, realFilePath, data):
		self.realFilePath = realFilePath
		self.data = data

	def Check(self):
		"""
		Compare the generated data against the output file, then write it if they don't match.

		:return: True if the file was written, False if it was already up to date
		:rtype: bool
		"""
		try:
			outDirPath = os.path.dirname(self.realFilePath)

			# Create the output directory if it doesn't exist.
			if outDirPath and not os.access(outDirPath, os.F_OK):
				os.makedirs(outDirPath)

			if os.access(self.realFilePath, os.F_OK):
				with open(self.realFilePath, "rb") as outputFile:
					outputHash = _hashData(outputFile.read())
			else:
				# The output file doesn't exist, so use an empty string to stand in for the hash.
				outputHash = ""

			if _hashData(self.data) == outputHash:
				log.Build("[UP-TO-DATE] {}", self.realFilePath)
				return False

			log.Build("[WRITING] {}", self.realFilePath)

			with open(self.realFilePath, "wb") as outputFile:
				outputFile.write(self.data)
				outputFile.flush()
				os.fsync(outputFile.fileno())

		except OSError as e:
			raise ExportFailureException("Failed to write {}: {}".format(self.realFilePath, e))

		shared_globals.exportedFiles.append(self.realFilePath)
		return True
