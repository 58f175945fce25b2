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
.. module:: model_test
	:synopsis: Tests for the project model and legacy settings upgrade.

.. moduleauthor:: Jaedyn K. Draper
"""

from .._testing import testcase
from .. import ProjectType
from ..model import ExporterSettings, IsDebugConfiguration, ProjectItem, SettingsTree, TargetOs
from ..target_types import DependencyPath, TargetType
from . import sample_project


class TestSettingsTree(testcase.TestCase):
	"""Settings store tests"""
	# pylint: disable=invalid-name

	def testGetString(self):
		"""String reads strip whitespace and treat None as empty"""
		settings = SettingsTree({"a": "  x ", "b": None, "c": 3})
		self.assertEqual("x", settings.GetString("a"))
		self.assertEqual("", settings.GetString("b"))
		self.assertEqual("", settings.GetString("missing"))
		self.assertEqual("3", settings.GetString("c"))

	def testSaveIfMissing(self):
		"""Existing values are left alone"""
		settings = SettingsTree({"a": "1"})
		settings.SaveIfMissing("a", "2")
		settings.SaveIfMissing("b", "3")
		self.assertEqual("1", settings.Get("a"))
		self.assertEqual("3", settings.Get("b"))
		settings.Delete("a")
		self.assertFalse(settings.Contains("a"))

	def testIsDebugConfiguration(self):
		"""An explicit flag wins over the name"""
		self.assertTrue(IsDebugConfiguration(SettingsTree({"name": "Debug"})))
		self.assertTrue(IsDebugConfiguration(SettingsTree({"name": "MyDEBUGBuild"})))
		self.assertFalse(IsDebugConfiguration(SettingsTree({"name": "Release"})))
		self.assertFalse(IsDebugConfiguration(SettingsTree({"name": "Debug", "isDebug": False})))
		self.assertTrue(IsDebugConfiguration(SettingsTree({"name": "Profile", "isDebug": True})))


class TestLegacyUpgrade(testcase.TestCase):
	"""Legacy settings migration tests"""
	# pylint: disable=invalid-name

	def _createSettings(self):
		return ExporterSettings(
			SettingsTree({
				"prebuildCommand": " echo pre ",
				"libraryName_Debug": "gain_d",
				"libraryName_Release": "gain",
				"extraDefs": "KEEP",
			}),
			[
				SettingsTree({"name": "Debug", "isDebug": True}),
				SettingsTree({"name": "Release", "isDebug": False}),
			],
		)

	def testUpgradeMovesLegacyKeys(self):
		"""Legacy keys move into the configurations and are removed"""
		exporterSettings = self._createSettings()
		exporterSettings.UpgradeLegacySettings()

		debug, release = exporterSettings.configurations
		self.assertEqual("echo pre", debug.Get("prebuildCommand"))
		self.assertEqual("echo pre", release.Get("prebuildCommand"))
		self.assertEqual("gain_d", debug.Get("targetName"))
		self.assertEqual("gain", release.Get("targetName"))

		for key in ("prebuildCommand", "libraryName_Debug", "libraryName_Release"):
			self.assertFalse(exporterSettings.settings.Contains(key))
		self.assertEqual("KEEP", exporterSettings.settings.Get("extraDefs"))

	def testUpgradeIsIdempotent(self):
		"""Running the upgrade a second time changes nothing"""
		exporterSettings = self._createSettings()
		exporterSettings.UpgradeLegacySettings()
		before = [dict(config.dict) for config in exporterSettings.configurations]
		exporterSettings.UpgradeLegacySettings()
		self.assertEqual(before, [dict(config.dict) for config in exporterSettings.configurations])

	def testMalformedLegacyValueIsDropped(self):
		"""Non-string legacy values are discarded without touching the configurations"""
		exporterSettings = ExporterSettings(
			SettingsTree({"libraryName_Debug": 42}),
			[SettingsTree({"name": "Debug"})],
		)
		exporterSettings.UpgradeLegacySettings()
		self.assertFalse(exporterSettings.configurations[0].Contains("targetName"))
		self.assertFalse(exporterSettings.settings.Contains("libraryName_Debug"))


class TestProjectModel(testcase.TestCase):
	"""Project model tests"""
	# pylint: disable=invalid-name

	def testPluginTargetTypes(self):
		"""Plugin projects build their enabled formats, then shared code and the aggregate"""
		project = sample_project.CreatePluginProject("/work/Gain", formats=(TargetType.Aax, TargetType.Vst3))
		self.assertEqual(
			[TargetType.Vst3, TargetType.Aax, TargetType.SharedCode, TargetType.Aggregate],
			project.GetTargetTypes(),
		)

	def testAppTargetTypes(self):
		"""Non-plugin projects build a single target"""
		self.assertEqual([TargetType.ConsoleApp], sample_project.CreateAppProject("/w", ProjectType.ConsoleApplication).GetTargetTypes())
		self.assertEqual([TargetType.StaticLibrary], sample_project.CreateAppProject("/w", ProjectType.StaticLibrary).GetTargetTypes())
		self.assertEqual([TargetType.DynamicLibrary], sample_project.CreateAppProject("/w", ProjectType.DynamicLibrary).GetTargetTypes())

	def testTargetTypeFromFilePath(self):
		"""Wrapper files are matched to their format by name, everything else is shared code"""
		project = sample_project.CreatePluginProject("/work/Gain")
		self.assertEqual(TargetType.Vst3, project.GetTargetTypeFromFilePath(ProjectItem("1", "w", "wrapper_VST3.cpp")))
		self.assertEqual(TargetType.Aax, project.GetTargetTypeFromFilePath(ProjectItem("2", "w", "wrapper_AAX_Utils.cpp")))
		self.assertEqual(TargetType.Vst, project.GetTargetTypeFromFilePath(ProjectItem("3", "w", "wrapper_VST2.cpp")))
		self.assertEqual(TargetType.SharedCode, project.GetTargetTypeFromFilePath(ProjectItem("4", "w", "PluginEditor.cpp")))
		self.assertEqual(
			TargetType.Standalone,
			project.GetTargetTypeFromFilePath(ProjectItem("5", "w", "anything.cpp", targetType=TargetType.Standalone)),
		)

	def testDependencyPaths(self):
		"""Dependency paths are stored per OS"""
		project = sample_project.CreatePluginProject("/work/Gain")
		self.assertEqual("C:/SDKs/VST3", project.GetDependencyPath(DependencyPath.Vst3, TargetOs.Windows))
		self.assertEqual("", project.GetDependencyPath(DependencyPath.Vst3, TargetOs.Osx))
		self.assertEqual("", project.GetDependencyPath(DependencyPath.Rtas, TargetOs.Windows))

	def testBestIconForSize(self):
		"""Exact sizes win, then the smallest larger image, then the largest image"""
		project = sample_project.CreateAppProject("/w")
		self.assertIsNone(project.GetBestIconForSize(16))

		small = sample_project.CreateSolidImage(16, (1, 0, 0, 255))
		medium = sample_project.CreateSolidImage(64, (2, 0, 0, 255))
		large = sample_project.CreateSolidImage(128, (3, 0, 0, 255))
		project.icons = [large, small, medium]

		self.assertEqual((1, 0, 0, 255), project.GetBestIconForSize(16).GetPixel(0, 0))
		self.assertEqual((2, 0, 0, 255), project.GetBestIconForSize(32).GetPixel(0, 0))
		self.assertEqual((2, 0, 0, 255), project.GetBestIconForSize(48).GetPixel(0, 0))

		scaled = project.GetBestIconForSize(256)
		self.assertEqual((256, 256), (scaled.width, scaled.height))
		self.assertEqual((3, 0, 0, 255), scaled.GetPixel(255, 255))

	def testWalk(self):
		"""Walking a group visits every descendant depth-first"""
		source = sample_project.CreateSourceGroups()[0]
		names = [item.name for item in source.Walk()]
		self.assertEqual("Source", names[0])
		self.assertLess(names.index("Wrappers"), names.index("wrapper_VST3.cpp"))
		self.assertEqual(8, len(names))
