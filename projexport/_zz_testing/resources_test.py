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
.. module:: resources_test
	:synopsis: Tests for icon container and resource script generation.

.. moduleauthor:: Jaedyn K. Draper
"""

import io
import os
import struct

from .._testing import testcase
from .._utils.image import DecodePng, Image, PNG_SIGNATURE
from ..msvc import resources
from . import sample_project


class TestIconFile(testcase.TestCase):
	"""Icon container tests"""
	# pylint: disable=invalid-name

	def testDirectoryOffsets(self):
		"""Each directory entry points at its image, and the first image follows the directory"""
		images = [sample_project.CreateSolidImage(size) for size in (16, 32, 48, 256)]
		data = resources.WriteIconFile(images)

		reserved, iconType, count = struct.unpack_from("<HHH", data, 0)
		self.assertEqual((0, 1, 4), (reserved, iconType, count))

		expectedOffset = 6 + 16 * count
		for index, image in enumerate(images):
			width, height, _, _, planes, bits, size, offset = struct.unpack_from("<BBBBHHII", data, 6 + 16 * index)
			self.assertEqual(image.width & 0xFF, width)
			self.assertEqual(image.height & 0xFF, height)
			self.assertEqual((1, 32), (planes, bits))
			self.assertEqual(expectedOffset, offset)
			expectedOffset += size

		self.assertEqual(len(data), expectedOffset)

	def testLargeImagesArePng(self):
		"""256 pixel images are stored as PNG, smaller ones as bitmaps"""
		images = [sample_project.CreateSolidImage(16), sample_project.CreateSolidImage(256, (0, 0, 255, 255))]
		data = resources.WriteIconFile(images)

		_, _, _, _, _, _, smallSize, smallOffset = struct.unpack_from("<BBBBHHII", data, 6)
		_, _, _, _, _, _, largeSize, largeOffset = struct.unpack_from("<BBBBHHII", data, 22)

		self.assertEqual(40, struct.unpack_from("<I", data, smallOffset)[0])
		self.assertEqual(40 + 16 * 16 * 4 + 16 * 4, smallSize)

		pngData = data[largeOffset:largeOffset + largeSize]
		self.assertTrue(pngData.startswith(PNG_SIGNATURE))
		decoded = DecodePng(pngData)
		self.assertEqual((0, 0, 255, 255), decoded.GetPixel(128, 128))

	def testBitmapMask(self):
		"""Transparent pixels are zeroed and set in the mask; mask rows are padded to four bytes"""
		image = sample_project.CreateSolidImage(8, (10, 20, 30, 255))
		image.SetPixel(0, 7, (10, 20, 30, 5))

		out = io.BytesIO()
		resources.WriteBmpImage(image, out)
		data = out.getvalue()

		header = struct.unpack_from("<IiiHHIIiiII", data, 0)
		self.assertEqual((40, 8, 16, 1, 32), header[:5])
		self.assertEqual(len(data) - 40, header[6])

		# Rows are stored bottom-up, so image row 7 comes first.
		self.assertEqual(b"\0\0\0\0", data[40:44])
		self.assertEqual(bytes(bytearray([30, 20, 10, 255])), data[44:48])

		maskStart = 40 + 8 * 8 * 4
		self.assertEqual(bytes(bytearray([0x80, 0, 0, 0])), data[maskStart:maskStart + 4])
		self.assertEqual(b"\0\0\0\0", data[maskStart + 4:maskStart + 8])

	def testMaskStrideForOddWidths(self):
		"""Mask rows cover every pixel even when the width isn't a multiple of eight"""
		image = Image(20, 2, bytearray([1, 2, 3, 255]) * 40)
		image.SetPixel(19, 0, (0, 0, 0, 0))

		out = io.BytesIO()
		resources.WriteBmpImage(image, out)
		data = out.getvalue()

		self.assertEqual(40 + 20 * 2 * 4 + 2 * 4, len(data))

		# Top image row is the last mask row; pixel 19 is bit 3 of the third byte.
		lastMaskRow = data[-4:]
		self.assertEqual(bytes(bytearray([0, 0, 0x10, 0])), lastMaskRow)


class TestResourceScript(testcase.TestCase):
	"""Resource script tests"""
	# pylint: disable=invalid-name

	def testCommaSeparatedVersion(self):
		"""Short versions are padded, long versions are kept whole"""
		self.assertEqual("1,2,0,0", resources.GetCommaSeparatedVersionNumber("1.2"))
		self.assertEqual("1,2,3,4", resources.GetCommaSeparatedVersionNumber("1.2.3.4"))
		self.assertEqual("1,2,3,4,5", resources.GetCommaSeparatedVersionNumber("1.2.3.4.5"))
		self.assertEqual("0,0,0,0", resources.GetCommaSeparatedVersionNumber(""))

	def testRcContents(self):
		"""Product metadata is escaped and the icon is referenced twice"""
		project = sample_project.CreatePluginProject("/work/Gain")
		project.companyName = "Quote \"Audio\""
		text = resources.CreateRcFileContents(project, "icon.ico")

		self.assertIn("FILEVERSION  1,2,3,0\r\n", text)
		self.assertIn("VALUE \"CompanyName\",  \"Quote \\\"Audio\\\"\\0\"", text)
		self.assertIn("VALUE \"ProductName\",  \"Gain Plugin\\0\"", text)
		self.assertIn("IDI_ICON1 ICON DISCARDABLE \"icon.ico\"", text)
		self.assertIn("IDI_ICON2 ICON DISCARDABLE \"icon.ico\"", text)
		self.assertNotIn("\n", text.replace("\r\n", ""))

	def testRcWithoutIcon(self):
		"""No icon lines are written without an icon, and empty values are skipped"""
		project = sample_project.CreateAppProject("/w")
		text = resources.CreateRcFileContents(project)
		self.assertNotIn("IDI_ICON1", text)
		self.assertNotIn("CompanyName", text)
		self.assertIn("FILEVERSION  2,0,0,0", text)

	def testCreateResourcesAndIcon(self):
		"""The icon is only written when the project has images; the resource script always is"""
		tempDir = self.CreateTempDir()
		project = sample_project.CreateAppProject(tempDir)

		files = resources.CreateResourcesAndIcon(project, tempDir)
		self.assertIsNone(files.iconFile)
		self.assertTrue(os.path.exists(files.rcFile))

		project.icons = [sample_project.CreateSolidImage(32)]
		files = resources.CreateResourcesAndIcon(project, tempDir)
		self.assertEqual(os.path.join(tempDir, "icon.ico"), files.iconFile)
		with open(files.iconFile, "rb") as f:
			self.assertEqual(4, struct.unpack_from("<HHH", f.read(), 0)[2])
		with open(files.rcFile, "rb") as f:
			self.assertIn(b"IDI_ICON1 ICON DISCARDABLE \"icon.ico\"", f.read())
