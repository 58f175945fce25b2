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
.. package:: _utils
	:synopsis: misc internal utility modules

.. moduleauthor:: Jaedyn K. Draper
"""

import collections
import re


def RemoveDuplicates(items):
	"""
	Remove duplicate entries from a sequence, keeping the first occurrence of each.

	:param items: Input sequence
	:type items: iterable
	:return: List with duplicates removed, original order preserved
	:rtype: list
	"""
	return list(collections.OrderedDict.fromkeys(items))


def CleanList(items):
	"""
	Strip whitespace from each string, then drop empty strings and duplicates.

	:param items: Input strings
	:type items: iterable[str]
	:return: Cleaned list of strings in their original order
	:rtype: list[str]
	"""
	return RemoveDuplicates(item.strip() for item in items if item and item.strip())


def SplitAndClean(text, separators=";\n"):
	"""
	Split a string on any of the given separator characters and clean the result.

	:param text: Text to split
	:type text: str
	:param separators: Characters to split on
	:type separators: str
	:return: Cleaned list of tokens
	:rtype: list[str]
	"""
	if not text:
		return []
	return CleanList(re.split("[{}]".format(re.escape(separators)), text))
