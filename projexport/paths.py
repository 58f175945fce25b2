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
.. module:: paths
	:synopsis: Root-tagged relative paths and rebasing between the logical project roots.

.. moduleauthor:: Brandon Bare
"""

import re


class RootFolder(object):
	"""
	'enum' representing the logical folder a relative path is anchored to.
	"""
	Unknown = "unknown"
	ProjectFolder = "projectFolder"
	BuildTargetFolder = "buildTargetFolder"


_windowsDriveRegex = re.compile(R"^[A-Za-z]:[/\\]")
_illegalFileNameChars = "\"#@,;:<>*^|?\\/"


def IsAbsolutePath(path):
	"""
	Check whether a path string is absolute on any of the platforms a project may be opened from.

	:param path: Path to check
	:type path: str
	:return: True for drive-letter, UNC, rooted or home-relative paths
	:rtype: bool
	"""
	return path.startswith("/") \
		or path.startswith("\\") \
		or path.startswith("~") \
		or _windowsDriveRegex.match(path) is not None


def WindowsStylePath(path):
	"""Convert forward slashes to backslashes."""
	return path.replace("/", "\\")


def UnixStylePath(path):
	"""Convert backslashes to forward slashes."""
	return path.replace("\\", "/")


def EscapeCString(text):
	"""
	Escape a string so it can be embedded inside a C/C++ string literal.

	:param text: Raw text
	:type text: str
	:return: Escaped text
	:rtype: str
	"""
	out = []
	for c in text:
		if c == "\\":
			out.append("\\\\")
		elif c == "\"":
			out.append("\\\"")
		elif c == "\n":
			out.append("\\n")
		elif c == "\r":
			out.append("\\r")
		elif c == "\t":
			out.append("\\t")
		elif ord(c) < 32 or ord(c) == 127:
			out.append("\\{:03o}".format(ord(c)))
		else:
			out.append(c)
	return "".join(out)


def Quoted(text):
	"""Wrap text in double quotes."""
	return "\"{}\"".format(text)


def PrependDot(fileName):
	"""
	Prefix a relative windows path with the current directory so it reads as relative to the project file.

	:param fileName: Windows-style path
	:type fileName: str
	:return: The path, prefixed with ".\\" unless it is absolute
	:rtype: str
	"""
	return fileName if IsAbsolutePath(fileName) else ".\\" + fileName


def PrependIfNotAbsolute(fileName, prefix):
	"""
	Prefix a path with a build-system folder macro unless it is already absolute or starts with a macro.

	:param fileName: Path to prefix
	:type fileName: str
	:param prefix: Prefix such as "$(OutDir)\\"
	:type prefix: str
	:return: Windows-style prefixed path
	:rtype: str
	"""
	if IsAbsolutePath(fileName) or fileName.startswith("$"):
		prefix = ""
	return prefix + WindowsStylePath(fileName)


def CreateLegalFileName(name):
	"""
	Strip characters that aren't valid in file names on every platform.

	:param name: Proposed file name
	:type name: str
	:return: File name with illegal characters removed
	:rtype: str
	"""
	return "".join(c for c in name if c not in _illegalFileNameChars).strip()


def _splitSegments(path):
	return [segment for segment in UnixStylePath(path).split("/") if segment and segment != "."]


def _joinAbsolute(folder, path):
	"""Join a relative path onto an absolute folder and collapse any ".." segments."""
	segments = _splitSegments(folder)
	for segment in _splitSegments(path):
		if segment == "..":
			if segments:
				segments.pop()
		else:
			segments.append(segment)
	return segments


def _relativeSegments(fromSegments, toSegments):
	common = 0
	while common < len(fromSegments) and common < len(toSegments) and fromSegments[common] == toSegments[common]:
		common += 1
	return [".."] * (len(fromSegments) - common) + toSegments[common:]


class RelativePath(object):
	"""
	A path tagged with the logical root it is relative to. Internally stored with forward slashes.

	:param path: Path string
	:type path: str
	:param root: Logical root folder the path is relative to
	:type root: str
	"""
	def __init__(self, path, root):
		self.path = UnixStylePath(path or "")
		self.root = root

	def __eq__(self, other):
		return isinstance(other, RelativePath) and self.path == other.path and self.root == other.root

	def __ne__(self, other):
		return not self.__eq__(other)

	def __hash__(self):
		return hash((self.path, self.root))

	def __repr__(self):
		return "RelativePath({!r}, {!r})".format(self.path, self.root)

	def IsAbsolute(self):
		"""
		:return: True if the path is absolute and so independent of its root
		:rtype: bool
		"""
		return IsAbsolutePath(self.path)

	def IsOpaque(self):
		"""
		:return: True if the path passes through rebasing untouched (absolute, $(Macro) or %VARIABLE% prefixed)
		:rtype: bool
		"""
		return self.IsAbsolute() or self.path.startswith("$") or self.path.startswith("%")

	def GetChildFile(self, name):
		"""
		:return: A path to a child of this path, anchored to the same root
		:rtype: RelativePath
		"""
		if not self.path:
			return RelativePath(name, self.root)
		return RelativePath("{}/{}".format(self.path.rstrip("/"), name), self.root)

	def GetFileName(self):
		"""
		:return: The final path component
		:rtype: str
		"""
		return self.path.rstrip("/").rsplit("/", 1)[-1]

	def GetFileNameWithoutExtension(self):
		"""
		:return: The final path component without its extension
		:rtype: str
		"""
		fileName = self.GetFileName()
		dot = fileName.rfind(".")
		return fileName[:dot] if dot > 0 else fileName

	def GetFileExtension(self):
		"""
		:return: The lower-cased extension of the final component, including the dot, or an empty string
		:rtype: str
		"""
		fileName = self.GetFileName()
		dot = fileName.rfind(".")
		return fileName[dot:].lower() if dot > 0 else ""

	def HasFileExtension(self, extensions):
		"""
		:param extensions: Collection of lower-case extensions including the dot
		:type extensions: collection[str]
		:return: True if this path's extension is in the collection
		:rtype: bool
		"""
		return self.GetFileExtension() in extensions

	def ToWindowsStyle(self):
		"""
		:return: The path with backslash separators
		:rtype: str
		"""
		return WindowsStylePath(self.path)

	def ToUnixStyle(self):
		"""
		:return: The path with forward slash separators
		:rtype: str
		"""
		return self.path


class PathRebaser(object):
	"""
	Converts paths anchored at one logical root into paths anchored at another.

	:param rootFolders: Absolute folder for each logical root
	:type rootFolders: dict[str, str]
	"""
	def __init__(self, rootFolders):
		self.rootFolders = dict(rootFolders)

	def Rebase(self, path, fromRoot, toRoot):
		"""
		Rebase a path from one root folder to another.

		:param path: Path to rebase. Its root must match fromRoot.
		:type path: RelativePath
		:param fromRoot: Root the path is currently anchored to
		:type fromRoot: str
		:param toRoot: Root to anchor the result to
		:type toRoot: str
		:return: Rebased path. Absolute and macro-prefixed paths are returned unchanged apart from the root tag.
		:rtype: RelativePath
		"""
		assert path.root == fromRoot, "Path {} is anchored to {}, not {}".format(path.path, path.root, fromRoot)

		if path.IsOpaque():
			return RelativePath(path.path, toRoot)

		absoluteSegments = _joinAbsolute(self.rootFolders[fromRoot], path.path)
		toSegments = _joinAbsolute(self.rootFolders[toRoot], "")
		relative = _relativeSegments(toSegments, absoluteSegments)
		return RelativePath("/".join(relative) if relative else ".", toRoot)
