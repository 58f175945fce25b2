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
.. module:: resources
	:synopsis: Icon container and resource script generation for Windows targets.

.. moduleauthor:: Jaedyn K. Draper
"""

import collections
import io
import os
import re
import struct

from .. import log
from .._utils.file_proxy import FileProxy
from .._utils.image import EncodePng
from ..paths import EscapeCString

ResourceFiles = collections.namedtuple("ResourceFiles", ["iconFile", "rcFile"])

ICON_SIZES = (16, 32, 48, 256)

# Pixels with alpha at or below this are written as fully transparent.
ALPHA_THRESHOLD = 5

# Images at or above this size are stored as PNG rather than bitmap.
PNG_SIZE_THRESHOLD = 256

_bitmapInfoHeaderSize = 40
_iconDirEntrySize = 16


def _getMaskStride(width):
	return ((width + 7) // 8 + 3) & ~3


def WriteBmpImage(image, out):
	"""
	Write an image as an icon bitmap: a BITMAPINFOHEADER, 32-bit BGRA pixels and a 1-bit transparency mask,
	both stored bottom row first. Each mask row is padded to a multiple of four bytes.

	:param image: Image to write
	:type image: projexport._utils.image.Image
	:param out: Output stream
	:type out: io.BytesIO
	"""
	w = image.width
	h = image.height
	maskStride = _getMaskStride(w)

	out.write(struct.pack(
		"<IiiHHIIiiII",
		_bitmapInfoHeaderSize,
		w,
		h * 2,
		1, # planes
		32, # bits
		0, # compression
		(h * w * 4) + (h * maskStride),
		0, # x pixels per meter
		0, # y pixels per meter
		0, # colors used
		0, # colors important
	))

	for y in range(h - 1, -1, -1):
		for x in range(w):
			r, g, b, a = image.GetPixel(x, y)
			if a <= ALPHA_THRESHOLD:
				out.write(b"\0\0\0\0")
			else:
				out.write(struct.pack("BBBB", b, g, r, a))

	for y in range(h - 1, -1, -1):
		row = bytearray()
		mask = 0
		count = 0
		for x in range(w):
			mask <<= 1
			if image.GetPixel(x, y)[3] <= ALPHA_THRESHOLD:
				mask |= 1
			count += 1
			if count == 8:
				row.append(mask)
				mask = 0
				count = 0

		if count:
			row.append((mask << (8 - count)) & 0xFF)

		row.extend(bytearray(maskStride - len(row)))
		out.write(bytes(row))


def WriteIconFile(images):
	"""
	Build an .ico container. Small images are stored as bitmaps, large ones as PNG.

	:param images: Images to include, in directory order
	:type images: list[projexport._utils.image.Image]
	:return: Icon file data
	:rtype: bytes
	"""
	out = io.BytesIO()
	out.write(struct.pack("<HHH", 0, 1, len(images)))

	dataBlock = io.BytesIO()
	dataBlockStart = 6 + len(images) * _iconDirEntrySize

	for image in images:
		oldDataSize = dataBlock.tell()

		if image.width >= PNG_SIZE_THRESHOLD or image.height >= PNG_SIZE_THRESHOLD:
			dataBlock.write(EncodePng(image))
		else:
			WriteBmpImage(image, dataBlock)

		# Width and height of 256 are stored as 0.
		out.write(struct.pack(
			"<BBBBHHII",
			image.width & 0xFF,
			image.height & 0xFF,
			0,
			0,
			1, # colour planes
			32, # bits per pixel
			dataBlock.tell() - oldDataSize,
			dataBlockStart + oldDataSize,
		))

	assert out.tell() == dataBlockStart, "Icon directory size doesn't match the data block offset"
	out.write(dataBlock.getvalue())
	return out.getvalue()


def GetCommaSeparatedVersionNumber(version):
	"""
	Normalise a version string to at least four comma-separated components. Short versions are padded
	with zeros; longer versions are kept as they are.

	:param version: Version string, e.g. "1.2"
	:type version: str
	:return: Comma-separated version, e.g. "1,2,0,0"
	:rtype: str
	"""
	parts = [part.strip() for part in re.split(R"[,.]", version or "")]
	parts = [part for part in parts if part]
	while len(parts) < 4:
		parts.append("0")
	return ",".join(parts)


def _rcValue(name, value):
	if not value:
		return []
	return ["      VALUE \"{}\",  \"{}\\0\"".format(name, EscapeCString(value))]


def CreateRcFileContents(project, iconFileName=None):
	"""
	Build the resource script carrying the product metadata and icon references.

	:param project: Project model
	:type project: projexport.model.ProjectModel
	:param iconFileName: File name of the generated icon, or None if there is no icon
	:type iconFileName: str or None
	:return: Resource script text
	:rtype: str
	"""
	version = project.version

	lines = [
		"#ifdef USER_DEFINED_RC_FILE",
		" #include USER_DEFINED_RC_FILE",
		"#else",
		"",
		"#undef  WIN32_LEAN_AND_MEAN",
		"#define WIN32_LEAN_AND_MEAN",
		"#include <windows.h>",
		"",
		"VS_VERSION_INFO VERSIONINFO",
		"FILEVERSION  {}".format(GetCommaSeparatedVersionNumber(version)),
		"BEGIN",
		"  BLOCK \"StringFileInfo\"",
		"  BEGIN",
		"    BLOCK \"040904E4\"",
		"    BEGIN",
	]

	lines += _rcValue("CompanyName", project.companyName)
	lines += _rcValue("FileDescription", project.title)
	lines += _rcValue("FileVersion", version)
	lines += _rcValue("ProductName", project.title)
	lines += _rcValue("ProductVersion", version)

	lines += [
		"    END",
		"  END",
		"",
		"  BLOCK \"VarFileInfo\"",
		"  BEGIN",
		"    VALUE \"Translation\", 0x409, 1252",
		"  END",
		"END",
		"",
		"#endif",
	]

	text = "\r\n".join(lines) + "\r\n"

	if iconFileName:
		text += "\r\nIDI_ICON1 ICON DISCARDABLE \"{0}\"\r\nIDI_ICON2 ICON DISCARDABLE \"{0}\"".format(iconFileName)

	return text


def CreateResourcesAndIcon(project, targetFolder):
	"""
	Write icon.ico and resources.rc into the build folder, skipping files whose content is unchanged.

	:param project: Project model
	:type project: projexport.model.ProjectModel
	:param targetFolder: Absolute build folder
	:type targetFolder: str
	:return: The files that exist for this export
	:rtype: ResourceFiles
	"""
	images = []
	for size in ICON_SIZES:
		image = project.GetBestIconForSize(size)
		if image is not None:
			images.append(image)

	iconFile = None
	if images:
		iconFile = os.path.join(targetFolder, "icon.ico")
		FileProxy(iconFile, WriteIconFile(images)).Check()
	else:
		log.Info("Project {} has no icon, skipping icon.ico", project.title)

	rcFile = os.path.join(targetFolder, "resources.rc")
	rcText = CreateRcFileContents(project, os.path.basename(iconFile) if iconFile else None)
	FileProxy(rcFile, rcText.encode("utf-8")).Check()

	return ResourceFiles(iconFile, rcFile)
