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
.. module:: image
	:synopsis: Minimal RGBA image container with PNG encoding and decoding.
		Decoding supports non-interlaced 8-bit RGB and RGBA images, which covers icon sources.

.. moduleauthor:: Jaedyn K. Draper
"""

import struct
import zlib

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"

_colorTypeRgb = 2
_colorTypeRgba = 6


class ImageFormatError(Exception):
	"""Raised when image data can't be decoded."""
	pass


class Image(object):
	"""
	A square or rectangular RGBA image.

	:param width: Width in pixels
	:type width: int
	:param height: Height in pixels
	:type height: int
	:param pixels: Row-major RGBA data, 4 bytes per pixel. Defaults to fully transparent.
	:type pixels: bytes or bytearray
	"""
	def __init__(self, width, height, pixels=None):
		assert width > 0 and height > 0, "Image dimensions must be positive"
		if pixels is None:
			pixels = bytearray(width * height * 4)
		assert len(pixels) == width * height * 4, "Pixel buffer size doesn't match dimensions"
		self.width = width
		self.height = height
		self.pixels = bytearray(pixels)

	def GetPixel(self, x, y):
		"""
		:return: (r, g, b, a) at the given coordinate
		:rtype: tuple[int, int, int, int]
		"""
		offset = (y * self.width + x) * 4
		return tuple(self.pixels[offset:offset + 4])

	def SetPixel(self, x, y, rgba):
		"""
		Set the pixel at the given coordinate.

		:param rgba: (r, g, b, a)
		:type rgba: tuple[int, int, int, int]
		"""
		offset = (y * self.width + x) * 4
		self.pixels[offset:offset + 4] = bytearray(rgba)

	def Rescaled(self, width, height):
		"""
		Create a nearest-neighbour rescaled copy of this image.

		:return: New image of the requested size
		:rtype: Image
		"""
		if width == self.width and height == self.height:
			return Image(width, height, self.pixels)

		out = bytearray(width * height * 4)
		for y in range(height):
			srcY = y * self.height // height
			for x in range(width):
				srcX = x * self.width // width
				src = (srcY * self.width + srcX) * 4
				dst = (y * width + x) * 4
				out[dst:dst + 4] = self.pixels[src:src + 4]
		return Image(width, height, out)


def _chunk(chunkType, data):
	return struct.pack(">I", len(data)) + chunkType + data + struct.pack(">I", zlib.crc32(chunkType + data) & 0xFFFFFFFF)


def EncodePng(image):
	"""
	Encode an image as a PNG file. Every scanline uses filter type 0.

	:param image: Image to encode
	:type image: Image
	:return: PNG file data
	:rtype: bytes
	"""
	rowSize = image.width * 4
	raw = bytearray()
	for y in range(image.height):
		raw.append(0)
		raw.extend(image.pixels[y * rowSize:(y + 1) * rowSize])

	header = struct.pack(">IIBBBBB", image.width, image.height, 8, _colorTypeRgba, 0, 0, 0)
	return PNG_SIGNATURE \
		+ _chunk(b"IHDR", header) \
		+ _chunk(b"IDAT", zlib.compress(bytes(raw), 9)) \
		+ _chunk(b"IEND", b"")


def _paeth(a, b, c):
	p = a + b - c
	pa = abs(p - a)
	pb = abs(p - b)
	pc = abs(p - c)
	if pa <= pb and pa <= pc:
		return a
	if pb <= pc:
		return b
	return c


def _unfilter(raw, width, height, bpp):
	stride = width * bpp
	out = bytearray(stride * height)
	prev = bytearray(stride)
	pos = 0
	for y in range(height):
		filterType = raw[pos]
		pos += 1
		line = bytearray(raw[pos:pos + stride])
		pos += stride
		for i in range(stride):
			left = line[i - bpp] if i >= bpp else 0
			up = prev[i]
			upLeft = prev[i - bpp] if i >= bpp else 0
			if filterType == 1:
				line[i] = (line[i] + left) & 0xFF
			elif filterType == 2:
				line[i] = (line[i] + up) & 0xFF
			elif filterType == 3:
				line[i] = (line[i] + ((left + up) >> 1)) & 0xFF
			elif filterType == 4:
				line[i] = (line[i] + _paeth(left, up, upLeft)) & 0xFF
			elif filterType != 0:
				raise ImageFormatError("Unknown PNG filter type {}".format(filterType))
		out[y * stride:(y + 1) * stride] = line
		prev = line
	return out


def DecodePng(data):
	"""
	Decode a PNG file into an RGBA image.

	:param data: PNG file data
	:type data: bytes
	:return: Decoded image
	:rtype: Image
	"""
	if data[:8] != PNG_SIGNATURE:
		raise ImageFormatError("Not a PNG file")

	pos = 8
	width = height = None
	colorType = None
	idat = bytearray()
	while pos < len(data):
		length, chunkType = struct.unpack(">I4s", data[pos:pos + 8])
		chunkData = data[pos + 8:pos + 8 + length]
		pos += 12 + length
		if chunkType == b"IHDR":
			width, height, bitDepth, colorType, _, _, interlace = struct.unpack(">IIBBBBB", chunkData)
			if bitDepth != 8 or colorType not in (_colorTypeRgb, _colorTypeRgba) or interlace != 0:
				raise ImageFormatError("Unsupported PNG layout (depth {}, color type {}, interlace {})".format(bitDepth, colorType, interlace))
		elif chunkType == b"IDAT":
			idat.extend(chunkData)
		elif chunkType == b"IEND":
			break

	if width is None:
		raise ImageFormatError("PNG file has no header chunk")

	bpp = 4 if colorType == _colorTypeRgba else 3
	pixels = _unfilter(zlib.decompress(bytes(idat)), width, height, bpp)
	if bpp == 4:
		return Image(width, height, pixels)

	rgba = bytearray(width * height * 4)
	for i in range(width * height):
		rgba[i * 4:i * 4 + 3] = pixels[i * 3:i * 3 + 3]
		rgba[i * 4 + 3] = 0xFF
	return Image(width, height, rgba)
