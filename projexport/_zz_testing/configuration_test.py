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
.. module:: configuration_test
	:synopsis: Tests for build configuration defaults and naming.

.. moduleauthor:: Brandon Bare
"""

from .._testing import testcase
from ..model import SettingsTree
from ..msvc.configuration import MsvcBuildConfiguration, OptimisationLevel
from ..msvc.platform_handlers.windows import GetPlatformHandler, VsWindowsX64PlatformHandler, VsWindowsX86PlatformHandler
from ..properties import PropertyListBuilder


class TestMsvcBuildConfiguration(testcase.TestCase):
	"""Build configuration tests"""
	# pylint: disable=invalid-name

	def testDefaults(self):
		"""Unset values fall back to their defaults without being written back"""
		settings = SettingsTree({"name": "Release"})
		config = MsvcBuildConfiguration(settings, "Gain")

		self.assertFalse(config.IsDebug())
		self.assertTrue(config.Is64Bit())
		self.assertEqual("Release|x64", config.CreateMsvcConfigName())
		self.assertEqual(OptimisationLevel.MaximiseSpeed, config.GetOptimisationLevel())
		self.assertEqual(4, config.GetWarningLevel())
		self.assertIsNone(config.GetRuntimeLibDllSetting())
		self.assertTrue(config.ShouldGenerateManifest())
		self.assertEqual("Gain", config.GetTargetBinaryName())
		self.assertEqual(["name"], list(settings.dict.keys()))

	def testDebugDefaults(self):
		"""Debug configurations default to no optimisation"""
		config = MsvcBuildConfiguration(SettingsTree({"name": "Debug", "winArchitecture": "32-bit"}))
		self.assertTrue(config.IsDebug())
		self.assertFalse(config.Is64Bit())
		self.assertEqual("Debug|Win32", config.CreateMsvcConfigName())
		self.assertEqual(OptimisationLevel.Off, config.GetOptimisationLevel())

	def testExplicitValues(self):
		"""Explicit settings override the defaults"""
		config = MsvcBuildConfiguration(SettingsTree({
			"name": "Debug",
			"optimisation": 2,
			"winWarningLevel": 3,
			"useRuntimeLibDLL": False,
			"generateManifest": False,
			"headerPath": "inc; ../other\ninc",
			"defines": "A=1 B",
		}))
		self.assertEqual(OptimisationLevel.MinimiseSize, config.GetOptimisationLevel())
		self.assertEqual(3, config.GetWarningLevel())
		self.assertFalse(config.GetRuntimeLibDllSetting())
		self.assertFalse(config.ShouldGenerateManifest())
		self.assertEqual(["inc", "../other"], config.GetHeaderSearchPaths())
		self.assertEqual([("A", "1"), ("B", "")], list(config.GetDefines().items()))

	def testOutputFilename(self):
		"""A forced suffix replaces any extension in the binary name"""
		config = MsvcBuildConfiguration(SettingsTree({"name": "Release", "targetName": "My:Gain"}))
		self.assertEqual("MyGain.dll", config.GetOutputFilename(".dll", True))
		self.assertEqual("MyGain.dll", config.GetOutputFilename(".dll", False))

		config = MsvcBuildConfiguration(SettingsTree({"name": "Release", "targetName": "gain.plugin"}))
		self.assertEqual("gain.plugin", config.GetOutputFilename(".dll", False))
		self.assertEqual("gain.dll", config.GetOutputFilename(".dll", True))
		self.assertEqual("gain", config.GetOutputFilename("", True))

	def testPlatformHandler(self):
		"""The platform handler follows the architecture"""
		self.assertIsInstance(GetPlatformHandler(MsvcBuildConfiguration(SettingsTree({"name": "R"}))), VsWindowsX64PlatformHandler)
		handler = GetPlatformHandler(MsvcBuildConfiguration(SettingsTree({"name": "R", "winArchitecture": "32-bit"})))
		self.assertIsInstance(handler, VsWindowsX86PlatformHandler)
		self.assertEqual("R|Win32", handler.GetBuildTarget("R"))
		self.assertEqual("MachineX86", handler.GetTargetMachine())

	def testConfigProperties(self):
		"""Configuration properties edit the configuration's own settings"""
		settings = SettingsTree({"name": "Debug"})
		props = PropertyListBuilder()
		MsvcBuildConfiguration(settings).CreateConfigProperties(props)

		self.assertIn("Architecture", props.GetLabels())
		self.assertNotIn("Debug Symbols", props.GetLabels())

		props.Find("Binary name").valueCell.Set("gain_debug")
		self.assertEqual("gain_debug", settings.Get("targetName"))
		self.assertEqual(
			[None, False, True],
			[value for _, value in props.Find("Runtime Library").choices],
		)
