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
.. module:: defines
	:synopsis: Preprocessor define parsing, merging, formatting and ${TOKEN} substitution.

.. moduleauthor:: Jaedyn K. Draper
"""

import collections
import re

_tokenRegex = re.compile(R"\$\{(\w+)\}")


def ParsePreprocessorDefines(text):
	"""
	Parse a define list such as "FOO=1 BAR" or "FOO=1;BAR" into an ordered mapping.
	Defines without a value map to an empty string.

	:param text: Define list separated by whitespace, semicolons or newlines
	:type text: str
	:return: Ordered mapping of define name to value
	:rtype: collections.OrderedDict
	"""
	result = collections.OrderedDict()
	if not text:
		return result

	for token in re.split(R"[\s;]+", text):
		if not token:
			continue
		name, _, value = token.partition("=")
		name = name.strip()
		if name:
			result[name] = value.strip()
	return result


def MergePreprocessorDefines(base, overrides):
	"""
	Merge two define mappings. Keys keep the position they were first seen at; on a collision the
	value from overrides wins.

	:param base: Defines merged first
	:type base: collections.OrderedDict
	:param overrides: Defines merged second
	:type overrides: dict
	:return: New merged mapping
	:rtype: collections.OrderedDict
	"""
	merged = collections.OrderedDict(base)
	for key, value in overrides.items():
		merged[key] = value
	return merged


def FormatPreprocessorDefines(defines, joinString=";"):
	"""
	Join a define mapping into a single string in insertion order, as KEY=VALUE, or KEY alone when the value is empty.

	:param defines: Define mapping
	:type defines: dict
	:param joinString: Separator
	:type joinString: str
	:return: Joined define string
	:rtype: str
	"""
	result = []
	for key, value in defines.items():
		if value:
			result.append("{}={}".format(key, value))
		else:
			result.append(key)
	return joinString.join(result)


def ReplacePreprocessorTokens(defines, text):
	"""
	Replace ${NAME} tokens with the value of the matching define. Unknown tokens are left untouched.

	:param defines: Define mapping
	:type defines: dict
	:param text: Text containing tokens
	:type text: str
	:return: Text with known tokens replaced
	:rtype: str
	"""
	if not text:
		return text

	def _replace(match):
		name = match.group(1)
		if name in defines:
			return defines[name]
		return match.group(0)

	return _tokenRegex.sub(_replace, text)


def GetVersionAsHex(version):
	"""
	Convert a dotted version string into the hex form used by version defines: major, minor and build
	occupy one byte each, with an optional fourth component appended as a further byte.

	:param version: Version string, e.g. "1.2.3"
	:type version: str
	:return: Hex string, e.g. "0x10203"
	:rtype: str
	"""
	parts = []
	for piece in re.split(R"[.,]", version):
		piece = piece.strip()
		if piece:
			try:
				parts.append(int(piece))
			except ValueError:
				parts.append(0)

	while len(parts) < 3:
		parts.append(0)

	value = (parts[0] << 16) + (parts[1] << 8) + parts[2]
	if len(parts) >= 4:
		value = (value << 8) + parts[3]
	return "0x{:x}".format(value)
