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
.. module:: configuration
	:synopsis: Visual Studio build configuration view over a configuration settings tree.

.. moduleauthor:: Brandon Bare
"""

from .. import defines
from .._utils import SplitAndClean
from ..model import IsDebugConfiguration
from ..paths import CreateLegalFileName
from ..properties import ValueCell


class OptimisationLevel(object):
	"""
	'enum' representing compiler optimisation levels.
	"""
	Off = 1
	MinimiseSize = 2
	MaximiseSpeed = 3


class Architecture(object):
	"""
	'enum' representing the stored architecture setting values.
	"""
	X86 = "32-bit"
	X64 = "x64"


_optimisationStrings = {
	OptimisationLevel.MaximiseSpeed: "Full",
	OptimisationLevel.MinimiseSize: "MinSpace",
}


def GetOptimisationLevelString(level):
	"""
	:return: The ClCompile Optimization value for an optimisation level
	:rtype: str
	"""
	return _optimisationStrings.get(level, "Disabled")


def _toInt(value, default=0):
	try:
		return int(value)
	except (TypeError, ValueError):
		return default


class MsvcBuildConfiguration(object):
	"""
	Read-only view of one build configuration. Defaults are computed here rather than written back into the settings.

	:param settings: Configuration settings
	:type settings: projexport.model.SettingsTree
	:param defaultBinaryName: Binary name used when the configuration doesn't set one
	:type defaultBinaryName: str
	"""
	def __init__(self, settings, defaultBinaryName=""):
		self.settings = settings
		self.defaultBinaryName = defaultBinaryName

	def GetName(self):
		"""
		:return: Configuration name, e.g. "Debug"
		:rtype: str
		"""
		return self.settings.GetString("name")

	def IsDebug(self):
		"""
		:return: True for debug configurations
		:rtype: bool
		"""
		return IsDebugConfiguration(self.settings)

	def GetArchitecture(self):
		"""
		:return: The architecture setting, defaulting to 64-bit
		:rtype: str
		"""
		return self.settings.GetString("winArchitecture") or Architecture.X64

	def Is64Bit(self):
		"""
		:return: True if this configuration targets x64
		:rtype: bool
		"""
		return self.GetArchitecture() == Architecture.X64

	def GetPlatformName(self):
		"""
		:return: Visual Studio platform name for this configuration
		:rtype: str
		"""
		return "x64" if self.Is64Bit() else "Win32"

	def CreateMsvcConfigName(self):
		"""
		:return: The composite "Name|Platform" key
		:rtype: str
		"""
		return "{}|{}".format(self.GetName(), self.GetPlatformName())

	def GetOptimisationLevel(self):
		"""
		:return: Optimisation level, defaulting to off for debug and maximise speed otherwise
		:rtype: int
		"""
		level = _toInt(self.settings.Get("optimisation"))
		if level in (OptimisationLevel.Off, OptimisationLevel.MinimiseSize, OptimisationLevel.MaximiseSpeed):
			return level
		return OptimisationLevel.Off if self.IsDebug() else OptimisationLevel.MaximiseSpeed

	def GetWarningLevel(self):
		"""
		:return: Warning level, defaulting to 4 when unset or zero
		:rtype: int
		"""
		level = _toInt(self.settings.Get("winWarningLevel"))
		return level if level else 4

	def AreWarningsTreatedAsErrors(self):
		return bool(self.settings.Get("warningsAreErrors", False))

	def GetRuntimeLibDllSetting(self):
		"""
		:return: True for the DLL runtime, False for the static runtime, None when left at the default
		:rtype: bool or None
		"""
		value = self.settings.Get("useRuntimeLibDLL")
		if value is None:
			return None
		return bool(value)

	def ShouldGenerateDebugSymbols(self):
		return bool(self.settings.Get("alwaysGenerateDebugSymbols", False))

	def ShouldGenerateManifest(self):
		"""
		:return: Whether to generate a manifest, defaulting to True when unset
		:rtype: bool
		"""
		return bool(self.settings.Get("generateManifest", True))

	def ShouldLinkIncremental(self):
		return bool(self.settings.Get("enableIncrementalLinking", False))

	def ShouldDisableWholeProgramOpt(self):
		return _toInt(self.settings.Get("wholeProgramOptimisation")) > 0

	def IsFastMathEnabled(self):
		return bool(self.settings.Get("fastMath", False))

	def GetIntermediatesPath(self):
		return self.settings.GetString("intermediatesPath")

	def GetCharacterSet(self):
		return self.settings.GetString("characterSet")

	def GetModuleDefinitionFile(self):
		return self.settings.GetString("msvcModuleDefinitionFile")

	def GetPrebuildCommand(self):
		return self.settings.GetString("prebuildCommand")

	def GetPostbuildCommand(self):
		return self.settings.GetString("postbuildCommand")

	def GetTargetBinaryName(self):
		"""
		:return: Binary name without suffix, defaulting to the project file name root
		:rtype: str
		"""
		return self.settings.GetString("targetName") or self.defaultBinaryName

	def GetTargetBinaryRelativePath(self):
		"""
		:return: Output folder relative to the project folder, or an empty string for the default
		:rtype: str
		"""
		return self.settings.GetString("binaryPath")

	def GetHeaderSearchPaths(self):
		return SplitAndClean(self.settings.GetString("headerPath"))

	def GetLibrarySearchPaths(self):
		return SplitAndClean(self.settings.GetString("libraryPath"))

	def GetDefines(self):
		"""
		:return: Defines declared on this configuration
		:rtype: collections.OrderedDict
		"""
		return defines.ParsePreprocessorDefines(self.settings.GetString("defines"))

	def GetOutputFilename(self, suffix, forceSuffix):
		"""
		Build the output file name for this configuration.

		:param suffix: Suffix including the dot
		:type suffix: str
		:param forceSuffix: Replace any extension already present in the binary name
		:type forceSuffix: bool
		:return: Output file name
		:rtype: str
		"""
		target = CreateLegalFileName(self.GetTargetBinaryName().strip())

		if forceSuffix or "." not in target:
			if "." in target:
				target = target[:target.rfind(".")]
			return target + suffix

		return target

	def CreateConfigProperties(self, props):
		"""
		Register the editable properties of this configuration.

		:param props: Property list to add to
		:type props: projexport.properties.PropertyListBuilder
		"""
		settings = self.settings
		props.Add(ValueCell(settings, "name"), "Name", description="The name of this configuration")
		props.Add(ValueCell(settings, "isDebug"), "Debug mode", description="Whether this is a debug configuration")
		props.Add(ValueCell(settings, "targetName"), "Binary name", description="The filename to use for the destination binary, without the suffix")
		props.Add(ValueCell(settings, "binaryPath"), "Binary location", description="Folder the binary is written to, relative to the project folder")
		props.Add(ValueCell(settings, "headerPath"), "Header search paths")
		props.Add(ValueCell(settings, "libraryPath"), "Extra library search paths")
		props.Add(ValueCell(settings, "defines"), "Preprocessor definitions", description="Extra definitions, e.g. FOO=1 BAR")
		props.Add(
			ValueCell(settings, "optimisation"), "Optimisation",
			[("No optimisation", OptimisationLevel.Off), ("Minimise size", OptimisationLevel.MinimiseSize), ("Maximise speed", OptimisationLevel.MaximiseSpeed)],
			"The optimisation level for this configuration",
		)
		props.Add(
			ValueCell(settings, "intermediatesPath"), "Intermediates path",
			description="An optional path to a folder to use for the intermediate build files. Visual Studio macros such as "
				"\"$(TEMP)\\MyAppBuildFiles\\$(Configuration)\" are allowed.",
		)
		props.Add(ValueCell(settings, "winWarningLevel"), "Warning Level", [("Low", 2), ("Medium", 3), ("High", 4)])
		props.Add(ValueCell(settings, "warningsAreErrors"), "Warnings", description="Treat warnings as errors")
		props.Add(
			ValueCell(settings, "useRuntimeLibDLL"), "Runtime Library",
			[("(Default)", None), ("Use static runtime", False), ("Use DLL runtime", True)],
			"With the static runtime the binary does not depend on the C++ redistributable being installed. Libraries "
				"linked from other sources must use the same runtime.",
		)
		props.Add(
			ValueCell(settings, "wholeProgramOptimisation"), "Whole Program Optimisation",
			[("Enable link-time code generation when possible", None), ("Always disable link-time code generation", 1)],
		)
		props.Add(ValueCell(settings, "enableIncrementalLinking"), "Incremental Linking", description="Avoid linking from scratch for every build")
		if not self.IsDebug():
			props.Add(ValueCell(settings, "alwaysGenerateDebugSymbols"), "Debug Symbols", description="Force generation of debug symbols")
		props.Add(ValueCell(settings, "prebuildCommand"), "Pre-build Command")
		props.Add(ValueCell(settings, "postbuildCommand"), "Post-build Command")
		props.Add(ValueCell(settings, "generateManifest"), "Manifest", description="Generate Manifest")
		props.Add(ValueCell(settings, "characterSet"), "Character Set", [("Default", None), ("MultiByte", "MultiByte"), ("Unicode", "Unicode")])
		props.Add(ValueCell(settings, "msvcModuleDefinitionFile"), "Module definition file")
		props.Add(ValueCell(settings, "winArchitecture"), "Architecture", [(Architecture.X86, Architecture.X86), (Architecture.X64, Architecture.X64)])
		props.Add(ValueCell(settings, "fastMath"), "Relax IEEE compliance", description="Use non-IEEE fast math mode")
