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
.. module:: paths_test
	:synopsis: Tests for root-tagged paths and rebasing.

.. moduleauthor:: Brandon Bare
"""

from .._testing import testcase
from .. import paths
from ..paths import PathRebaser, RelativePath, RootFolder


class TestPaths(testcase.TestCase):
	"""Root-tagged path tests"""
	# pylint: disable=invalid-name

	def setUp(self):
		self.rebaser = PathRebaser({
			RootFolder.ProjectFolder: "/work/MyProject",
			RootFolder.BuildTargetFolder: "/work/MyProject/Builds/VisualStudio2015",
		})

	def testRebaseIntoBuildFolder(self):
		"""Project-relative paths climb out of the build folder"""
		path = RelativePath("Source/Main.cpp", RootFolder.ProjectFolder)
		rebased = self.rebaser.Rebase(path, RootFolder.ProjectFolder, RootFolder.BuildTargetFolder)
		self.assertEqual(RootFolder.BuildTargetFolder, rebased.root)
		self.assertEqual("../../Source/Main.cpp", rebased.ToUnixStyle())
		self.assertEqual("..\\..\\Source\\Main.cpp", rebased.ToWindowsStyle())

	def testRebaseRoundTrip(self):
		"""Rebasing there and back again yields the original path"""
		for original in ("Source/Main.cpp", "../Shared/lib.h", "a/b/c/d.txt", "Builds/VisualStudio2015/icon.ico"):
			path = RelativePath(original, RootFolder.ProjectFolder)
			there = self.rebaser.Rebase(path, RootFolder.ProjectFolder, RootFolder.BuildTargetFolder)
			back = self.rebaser.Rebase(there, RootFolder.BuildTargetFolder, RootFolder.ProjectFolder)
			self.assertEqual(path, back)

	def testRebaseFolderOntoItself(self):
		"""A path naming the destination folder becomes the current directory"""
		path = RelativePath("Builds/VisualStudio2015", RootFolder.ProjectFolder)
		rebased = self.rebaser.Rebase(path, RootFolder.ProjectFolder, RootFolder.BuildTargetFolder)
		self.assertEqual(".", rebased.ToUnixStyle())

	def testOpaquePathsPassThrough(self):
		"""Absolute, macro and environment variable paths are not rewritten"""
		for original in ("C:/SDKs/VST3", "C:\\SDKs\\AAX", "/usr/include", "~/sdk", "$(ProgramFiles)/Thing", "%SDK_ROOT%/inc"):
			path = RelativePath(original, RootFolder.ProjectFolder)
			rebased = self.rebaser.Rebase(path, RootFolder.ProjectFolder, RootFolder.BuildTargetFolder)
			self.assertEqual(path.ToUnixStyle(), rebased.ToUnixStyle())
			self.assertEqual(RootFolder.BuildTargetFolder, rebased.root)

	def testRebaseWrongRootAsserts(self):
		"""Rebasing from a root the path isn't anchored to is a programming error"""
		path = RelativePath("Source/Main.cpp", RootFolder.BuildTargetFolder)
		with self.assertRaises(AssertionError):
			self.rebaser.Rebase(path, RootFolder.ProjectFolder, RootFolder.BuildTargetFolder)

	def testFileNameParts(self):
		"""File name, stem and extension accessors"""
		path = RelativePath("Source\\Wrappers\\wrapper_VST3.CPP", RootFolder.ProjectFolder)
		self.assertEqual("wrapper_VST3.CPP", path.GetFileName())
		self.assertEqual("wrapper_VST3", path.GetFileNameWithoutExtension())
		self.assertEqual(".cpp", path.GetFileExtension())
		self.assertTrue(path.HasFileExtension({".cpp", ".c"}))
		self.assertFalse(path.HasFileExtension({".h"}))
		self.assertEqual("Source/Wrappers/Extra.h", RelativePath("Source/Wrappers", RootFolder.ProjectFolder).GetChildFile("Extra.h").ToUnixStyle())

	def testPrependHelpers(self):
		"""Output folder prefixes are skipped for absolute and macro paths"""
		self.assertEqual(".\\icon.ico", paths.PrependDot("icon.ico"))
		self.assertEqual("C:\\icon.ico", paths.PrependDot("C:\\icon.ico"))
		self.assertEqual("$(OutDir)\\Gain.dll", paths.PrependIfNotAbsolute("Gain.dll", "$(OutDir)\\"))
		self.assertEqual("$(SolutionDir)\\Gain.dll", paths.PrependIfNotAbsolute("$(SolutionDir)/Gain.dll", "$(OutDir)\\"))
		self.assertEqual("D:\\out\\Gain.dll", paths.PrependIfNotAbsolute("D:/out/Gain.dll", "$(OutDir)\\"))

	def testEscapeCString(self):
		"""C string escaping of backslashes, quotes and control characters"""
		self.assertEqual("C:\\\\SDK\\\\Libs", paths.EscapeCString("C:\\SDK\\Libs"))
		self.assertEqual("say \\\"hi\\\"\\n", paths.EscapeCString("say \"hi\"\n"))
		self.assertEqual("bell\\007", paths.EscapeCString("bell\x07"))

	def testCreateLegalFileName(self):
		"""Characters that aren't valid in file names are removed"""
		self.assertEqual("My Plugin v2", paths.CreateLegalFileName("My: Plugin* v2?"))
		self.assertEqual("ab", paths.CreateLegalFileName("a/b"))
