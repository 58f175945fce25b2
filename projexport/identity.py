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
.. module:: identity
	:synopsis: Deterministic GUIDs for generated documents and solution folders.

.. moduleauthor:: Brandon Bare
"""

import uuid


def CreateGuid(seed):
	"""
	Derive a stable, Visual Studio formatted GUID from a seed string. The same seed always yields
	the same GUID, so regenerating an unchanged project reproduces identical cross-references.

	:param seed: Seed text, e.g. project id + target name
	:type seed: str
	:return: Upper-case GUID wrapped in braces
	:rtype: str
	"""
	return "{{{}}}".format(str(uuid.uuid5(uuid.NAMESPACE_OID, seed))).upper()
