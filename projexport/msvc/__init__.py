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
.. package:: msvc
	:synopsis: Visual Studio exporter. One exporter class covers every supported Visual Studio version;
		the differences between versions live in the version descriptor table.

.. moduleauthor:: Brandon Bare
"""

import collections
import os

from .. import ExportFailureException, log, defines
from .._utils import RemoveDuplicates, SplitAndClean
from ..model import TargetOs
from ..paths import EscapeCString, PathRebaser, PrependIfNotAbsolute, Quoted, RelativePath, RootFolder
from ..properties import ValueCell
from ..target_types import DependencyPath, GetTraits, TargetType, PLUGIN_TARGET_TYPES
from .configuration import MsvcBuildConfiguration
from .resources import CreateResourcesAndIcon, ResourceFiles
from .solution import WriteSolutionFile
from .target import MsvcTarget
from .target_project import WriteTargetProject


class Version(object):
	"""
	Enum values representing Visual Studio versions.
	"""
	Vs2010 = "2010"
	Vs2012 = "2012"
	Vs2013 = "2013"
	Vs2015 = "2015"


VsVersionInfo = collections.namedtuple(
	"VsVersionInfo",
	[
		"displayName",
		"folderName",
		"versionNumber",
		"toolsVersion",
		"defaultToolset",
		# (display name, stored value) pairs offered for the platform toolset setting.
		"toolsetChoices",
		# False writes the toolset into the 64-bit configuration groups only.
		"toolsetOnEveryPropertyGroup",
	]
)

VERSION_INFO = collections.OrderedDict([
	(Version.Vs2010, VsVersionInfo(
		"Visual Studio 2010", "VisualStudio2010", 10, "4.0", "Windows7.1SDK",
		[("(default)", None), ("v100", "v100"), ("v100_xp", "v100_xp"), ("Windows7.1SDK", "Windows7.1SDK"), ("CTP_Nov2013", "CTP_Nov2013")],
		False,
	)),
	(Version.Vs2012, VsVersionInfo(
		"Visual Studio 2012", "VisualStudio2012", 11, "4.0", "v110",
		[("(default)", None), ("v110", "v110"), ("v110_xp", "v110_xp"), ("Windows7.1SDK", "Windows7.1SDK"), ("CTP_Nov2013", "CTP_Nov2013")],
		True,
	)),
	(Version.Vs2013, VsVersionInfo(
		"Visual Studio 2013", "VisualStudio2013", 12, "12.0", "v120",
		[("(default)", None), ("v120", "v120"), ("v120_xp", "v120_xp"), ("Windows7.1SDK", "Windows7.1SDK"), ("CTP_Nov2013", "CTP_Nov2013")],
		True,
	)),
	(Version.Vs2015, VsVersionInfo(
		"Visual Studio 2015", "VisualStudio2015", 14, "14.0", "v140",
		[("(default)", None), ("v140", "v140"), ("v140_xp", "v140_xp"), ("CTP_Nov2013", "CTP_Nov2013")],
		True,
	)),
])

IPP_LIBRARY_CHOICES = [
	("No", None),
	("Yes (Default Mode)", "true"),
	("Multi-Threaded Static Library", "Parallel_Static"),
	("Single-Threaded Static Library", "Sequential"),
	("Multi-Threaded DLL", "Parallel_Dynamic"),
	("Single-Threaded DLL", "Sequential_Dynamic"),
]

SUPPORTED_TARGET_TYPES = {
	TargetType.Standalone,
	TargetType.GuiApp,
	TargetType.ConsoleApp,
	TargetType.StaticLibrary,
	TargetType.SharedCode,
	TargetType.Aggregate,
	TargetType.Vst,
	TargetType.Vst3,
	TargetType.Aax,
	TargetType.Rtas,
	TargetType.DynamicLibrary,
}

_dependencyPathSettings = {
	DependencyPath.Vst3: "vst3Folder",
	DependencyPath.Aax: "aaxFolder",
	DependencyPath.Rtas: "rtasFolder",
}


def GetVersionInfo(version):
	"""
	:param version: One of the Version values
	:type version: str
	:return: Descriptor for the version
	:rtype: VsVersionInfo
	"""
	if version not in VERSION_INFO:
		raise ExportFailureException("Unsupported Visual Studio version: {}".format(version))
	return VERSION_INFO[version]


class MsvcExporter(object):
	"""
	Exports a project to Visual Studio project and solution files.

	:param project: Project model
	:type project: projexport.model.ProjectModel
	:param exporterSettings: Stored settings for this exporter
	:type exporterSettings: projexport.model.ExporterSettings
	:param version: One of the Version values
	:type version: str
	"""
	def __init__(self, project, exporterSettings, version=Version.Vs2015):
		self.project = project
		self.version = version
		self.versionInfo = GetVersionInfo(version)

		exporterSettings.UpgradeLegacySettings()
		self.exporterSettings = exporterSettings
		self.settings = exporterSettings.settings

		defaultBinaryName = project.GetProjectFilenameRoot()
		self.configs = [MsvcBuildConfiguration(config, defaultBinaryName) for config in exporterSettings.configurations]

		targetLocation = self.settings.GetString("targetLocation") or "Builds/{}".format(self.versionInfo.folderName)
		self.targetFolder = os.path.normpath(os.path.join(project.projectFolder, targetLocation))

		self.rebaser = PathRebaser({
			RootFolder.ProjectFolder: project.projectFolder,
			RootFolder.BuildTargetFolder: self.targetFolder,
		})

		self.msvcExtraPreprocessorDefs = collections.OrderedDict()
		self.msvcExtraPreprocessorDefs["_CRT_SECURE_NO_WARNINGS"] = ""
		if project.IsCommandLineApp():
			self.msvcExtraPreprocessorDefs["_CONSOLE"] = ""

		self.targets = []
		for targetType in project.GetTargetTypes():
			if not self.SupportsTargetType(targetType):
				log.Warn("{} doesn't support {} targets, skipping", self.versionInfo.displayName, targetType)
				continue
			if targetType == TargetType.Aggregate:
				continue
			self.targets.append(MsvcTarget(targetType, self))

		if not self.targets:
			raise ExportFailureException(
				"Project {} has no targets that {} can build".format(project.title, self.versionInfo.displayName)
			)

	@staticmethod
	def SupportsTargetType(targetType):
		"""
		:return: True if this exporter can generate a project for the target type
		:rtype: bool
		"""
		return targetType in SUPPORTED_TARGET_TYPES

	def GetSharedCodeTarget(self):
		"""
		:return: The shared code target, or None if the project doesn't have one
		:rtype: projexport.msvc.target.MsvcTarget or None
		"""
		for target in self.targets:
			if target.IsSharedCode():
				return target
		return None

	def HasTarget(self, targetType):
		"""
		:return: True if this exporter writes a target of the given type
		:rtype: bool
		"""
		return any(target.targetType == targetType for target in self.targets)

	def HasResourceFile(self):
		"""
		:return: True if this project gets a resource script
		:rtype: bool
		"""
		return not self.project.IsStaticLibrary()

	def GetPlatformToolset(self):
		"""
		:return: The configured platform toolset, or the version default
		:rtype: str
		"""
		return self.settings.GetString("toolset") or self.versionInfo.defaultToolset

	def GetIppLibrary(self):
		return self.settings.GetString("IPPLibrary")

	def GetExtraCompilerFlags(self):
		return self.settings.GetString("extraCompilerFlags")

	def GetExtraLinkerFlags(self):
		return self.settings.GetString("extraLinkerFlags")

	def GetExternalLibraries(self):
		"""
		:return: Semicolon-separated extra libraries to link
		:rtype: str
		"""
		return ";".join(SplitAndClean(self.settings.GetString("externalLibraries")))

	def GetExtraSearchPaths(self):
		return SplitAndClean(self.settings.GetString("extraSearchPaths"))

	def GetHeaderSearchPaths(self, config):
		"""
		:return: Header search paths from this exporter and the configuration, with define tokens replaced
		:rtype: list[str]
		"""
		paths = list(config.GetHeaderSearchPaths()) + self.GetExtraSearchPaths()
		return RemoveDuplicates(self.ReplacePreprocessorTokens(config, path) for path in paths)

	def GetDelayLoadedDlls(self):
		return self.settings.GetString("msvcDelayLoadedDLLs")

	def GetModuleLibs(self):
		"""
		:return: Library file names for the project's module libraries
		:rtype: list[str]
		"""
		return [name + ".lib" for name in self.project.moduleLibs]

	def GetMsvcExtraPreprocessorDefines(self):
		return self.msvcExtraPreprocessorDefs

	def _getDefinesWithoutPluginFormats(self, config):
		result = collections.OrderedDict(self.project.defines)
		result = defines.MergePreprocessorDefines(result, defines.ParsePreprocessorDefines(self.settings.GetString("extraDefs")))
		result = defines.MergePreprocessorDefines(result, config.GetDefines())

		version = self.project.version
		if version:
			result["APP_VERSION"] = version
			result["APP_VERSION_HEX"] = defines.GetVersionAsHex(version)

		return result

	def GetAllPreprocessorDefines(self, config, targetType):
		"""
		Merge project, exporter, configuration and version defines, then add one build flag per plugin format.
		Shared code and aggregate targets build every enabled format; other targets only their own.

		:param config: Build configuration
		:type config: projexport.msvc.configuration.MsvcBuildConfiguration
		:param targetType: Target being built
		:type targetType: str
		:return: Ordered define mapping
		:rtype: collections.OrderedDict
		"""
		result = self._getDefinesWithoutPluginFormats(config)

		if self.project.IsAudioPlugin():
			buildsEverything = targetType in (TargetType.SharedCode, TargetType.Aggregate)
			for pluginType in PLUGIN_TARGET_TYPES:
				if buildsEverything:
					enabled = self.project.IsPluginFormatEnabled(pluginType)
				else:
					enabled = pluginType == targetType
				result["Plugin_Build_{}".format(GetTraits(pluginType).pluginFormat)] = "1" if enabled else "0"

		return result

	def ReplacePreprocessorTokens(self, config, text):
		"""
		:return: The text with ${NAME} tokens replaced by the configuration's define values
		:rtype: str
		"""
		return defines.ReplacePreprocessorTokens(self._getDefinesWithoutPluginFormats(config), text)

	def GetDependencyPathValue(self, pathId):
		"""
		:return: The SDK path for an id: this exporter's override if set, else the global Windows path, else empty
		:rtype: str
		"""
		if pathId is None:
			return ""
		value = self.settings.GetString(_dependencyPathSettings.get(pathId, pathId))
		if value:
			return value
		return self.project.GetDependencyPath(pathId, TargetOs.Windows)

	def GetDependencyPathAsRelativePath(self, pathId):
		"""
		:return: The SDK path for an id, anchored to the project folder
		:rtype: projexport.paths.RelativePath
		"""
		return RelativePath(self.GetDependencyPathValue(pathId), RootFolder.ProjectFolder)

	def RebaseFromProjectFolderToBuildTarget(self, path):
		"""
		:param path: Path anchored to the project folder
		:type path: projexport.paths.RelativePath
		:return: The same location anchored to the build folder
		:rtype: projexport.paths.RelativePath
		"""
		return self.rebaser.Rebase(path, RootFolder.ProjectFolder, RootFolder.BuildTargetFolder)

	def CreateRebasedPath(self, path):
		"""
		:return: A project-folder path rebased to the build folder, escaped and quoted for use in a define
		:rtype: str
		"""
		return Quoted(EscapeCString(self.RebaseFromProjectFolderToBuildTarget(path).ToWindowsStyle()))

	def GetOutDirFile(self, config, fileName):
		return PrependIfNotAbsolute(self.ReplacePreprocessorTokens(config, fileName), "$(OutDir)\\")

	def GetIntDirFile(self, config, fileName):
		return PrependIfNotAbsolute(self.ReplacePreprocessorTokens(config, fileName), "$(IntDir)\\")

	def GetProjectFile(self, extension, targetName):
		"""
		:param extension: File extension including the dot
		:type extension: str
		:param targetName: Target display name, or an empty string for project-wide files
		:type targetName: str
		:return: Absolute path of a generated file in the build folder
		:rtype: str
		"""
		fileName = self.project.GetProjectFilenameRoot()
		if targetName:
			fileName += " ({})".format(targetName)
		return os.path.join(self.targetFolder, fileName + extension)

	def GetSolutionFile(self):
		return self.GetProjectFile(".sln", "")

	def CreateExporterProperties(self, props):
		"""
		Register the editable properties of this exporter.

		:param props: Property list to add to
		:type props: projexport.properties.PropertyListBuilder
		"""
		settings = self.settings
		props.Add(ValueCell(settings, "targetLocation"), "Target Project Folder", description="The location of the folder in which the project will be created, relative to the project folder")
		props.Add(ValueCell(settings, "extraDefs"), "Extra Preprocessor Definitions", description="Extra definitions, e.g. FOO=1 BAR")
		props.Add(ValueCell(settings, "extraCompilerFlags"), "Extra compiler flags")
		props.Add(ValueCell(settings, "extraLinkerFlags"), "Extra linker flags", description="${NAME} tokens are replaced by the matching preprocessor definition")
		props.Add(ValueCell(settings, "externalLibraries"), "External libraries to link", description="Library names separated by semicolons or new lines")
		props.Add(ValueCell(settings, "extraSearchPaths"), "Extra header search paths")
		props.Add(ValueCell(settings, "msvcDelayLoadedDLLs"), "Delay-loaded DLLs", description="Semicolon-separated list of DLLs to delay load")

		for pathId, key in sorted(_dependencyPathSettings.items()):
			if any(GetTraits(target.targetType).sdkPath == pathId for target in self.targets):
				props.Add(ValueCell(settings, key), "{} SDK Folder".format(pathId[:-len("Path")].upper()), description="Overrides the global SDK location for this exporter")

		props.Add(ValueCell(settings, "toolset"), "Platform Toolset", self.versionInfo.toolsetChoices)
		props.Add(ValueCell(settings, "IPPLibrary"), "Use IPP Library", IPP_LIBRARY_CHOICES)

	def Create(self):
		"""
		Write every generated file: the icon and resource script, one project per target, then the solution.
		Files whose content hasn't changed are left untouched.
		"""
		log.Build("Exporting {} to {}", self.project.title, self.versionInfo.displayName)

		if self.HasResourceFile():
			resources = CreateResourcesAndIcon(self.project, self.targetFolder)
		else:
			resources = ResourceFiles(None, None)

		for target in self.targets:
			WriteTargetProject(self, target, resources)

		WriteSolutionFile(self)
