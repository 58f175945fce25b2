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
.. module:: target
	:synopsis: One Visual Studio target project: its identity, output naming, output folders and the
		target-type specific search paths, libraries and build steps.

.. moduleauthor:: Brandon Bare
"""

import os

from .. import identity
from ..paths import PrependDot, RelativePath, RootFolder, WindowsStylePath
from ..target_types import GetTraits, TargetFileType, TargetType


def JoinBuildSteps(userCommand, extraSteps):
	"""
	Join a user build command with injected steps. The line break separator is only added when both are present.

	:param userCommand: User-specified command
	:type userCommand: str
	:param extraSteps: Steps injected for the target type
	:type extraSteps: str
	:return: Combined command
	:rtype: str
	"""
	separator = "\r\n" if userCommand and extraSteps else ""
	return userCommand + separator + extraSteps


class MsvcTarget(object):
	"""
	A single target project within a Visual Studio export.

	:param targetType: Target type
	:type targetType: str
	:param exporter: Owning exporter
	:type exporter: projexport.msvc.MsvcExporter
	"""
	def __init__(self, targetType, exporter):
		self.targetType = targetType
		self.exporter = exporter
		self.traits = GetTraits(targetType)
		self.guid = identity.CreateGuid(exporter.project.projectUid + self.GetName())

	def __repr__(self):
		return "MsvcTarget({!r})".format(self.GetName())

	def GetName(self):
		"""
		:return: Display name of the target
		:rtype: str
		"""
		return self.traits.displayName

	def GetProjectGuid(self):
		"""
		:return: GUID of the target document
		:rtype: str
		"""
		return self.guid

	def GetTargetFileType(self):
		return self.traits.fileType

	def GetTargetSuffix(self):
		"""
		:return: Output file suffix including the dot
		:rtype: str
		"""
		return self.traits.suffix

	def IsSharedCode(self):
		return self.targetType == TargetType.SharedCode

	def GetConfigurationType(self):
		"""
		:return: The ConfigurationType value for this target
		:rtype: str
		"""
		fileType = self.GetTargetFileType()
		if fileType == TargetFileType.Executable:
			return "Application"
		if fileType == TargetFileType.StaticLibrary:
			return "StaticLibrary"
		return "DynamicLibrary"

	def GetVcxProjFile(self):
		"""
		:return: Absolute path of this target's project document
		:rtype: str
		"""
		return self.exporter.GetProjectFile(".vcxproj", self.GetName())

	def GetVcxProjFileName(self):
		return os.path.basename(self.GetVcxProjFile())

	def GetSolutionTargetPath(self, config):
		"""
		:return: Output folder of the solution for a configuration, relative to the build folder
		:rtype: str
		"""
		binaryPath = config.GetTargetBinaryRelativePath()
		if not binaryPath:
			return "$(SolutionDir)$(Configuration)"

		binaryRelPath = RelativePath(binaryPath, RootFolder.ProjectFolder)
		if binaryRelPath.IsAbsolute():
			return binaryRelPath.ToWindowsStyle()

		return PrependDot(self.exporter.RebaseFromProjectFolderToBuildTarget(binaryRelPath).ToWindowsStyle())

	def GetConfigTargetPath(self, config):
		"""
		:return: Output folder of this target for a configuration
		:rtype: str
		"""
		return "{}\\{}".format(self.GetSolutionTargetPath(config), self.GetName())

	def GetIntermediatesPath(self, config):
		"""
		:return: Intermediate folder of this target for a configuration, ending in a backslash
		:rtype: str
		"""
		intDir = config.GetIntermediatesPath() or "$(Configuration)"
		if not intDir.endswith("\\"):
			intDir += "\\"
		return WindowsStylePath("{}{}\\".format(intDir, self.GetName()))

	def GetBinaryNameWithSuffix(self, config):
		return config.GetOutputFilename(self.GetTargetSuffix(), True)

	def GetOutputFilePath(self, config):
		"""
		:return: The linker output file for a configuration
		:rtype: str
		"""
		return self.exporter.GetOutDirFile(config, self.GetBinaryNameWithSuffix(config))

	def _getSdkRoot(self):
		return self.exporter.GetDependencyPathAsRelativePath(self.traits.sdkPath)

	def GetExtraSearchPaths(self):
		"""
		:return: Quoted, rebased header search paths required by the target type's SDK
		:rtype: list[str]
		"""
		if not self.traits.sdkSearchPaths:
			return []
		sdkRoot = self._getSdkRoot()
		return [
			self.exporter.CreateRebasedPath(sdkRoot.GetChildFile(subPath) if subPath else sdkRoot)
			for subPath in self.traits.sdkSearchPaths
		]

	def GetExtraLinkerFlags(self):
		return self.traits.extraLinkerFlags

	def GetLibrarySearchPaths(self, config):
		"""
		:return: Library search paths, including the shared code output folder for dependent targets
		:rtype: list[str]
		"""
		searchPaths = list(config.GetLibrarySearchPaths())

		shared = self.exporter.GetSharedCodeTarget()
		if shared is not None and not self.IsSharedCode():
			searchPaths.append(shared.GetConfigTargetPath(config))

		return searchPaths

	def GetExternalLibraries(self, config):
		"""
		:return: Semicolon-separated extra libraries, module libraries and the shared code library
		:rtype: str
		"""
		libraries = []

		otherLibs = self.exporter.GetExternalLibraries()
		if otherLibs:
			libraries.append(otherLibs)

		libraries.extend(self.exporter.GetModuleLibs())

		shared = self.exporter.GetSharedCodeTarget()
		if shared is not None and not self.IsSharedCode():
			libraries.append(shared.GetBinaryNameWithSuffix(config))

		return ";".join(libraries)

	def GetDelayLoadedDlls(self):
		return self.exporter.GetDelayLoadedDlls() + self.traits.delayLoadedDlls

	def _getBundleFolders(self, config, forceSuffix):
		bundleDir = self.exporter.GetOutDirFile(config, config.GetOutputFilename(".aaxplugin", forceSuffix))
		bundleContents = bundleDir + "\\Contents"
		platformDir = "{}\\{}".format(bundleContents, config.GetPlatformName())
		return bundleDir, bundleContents, platformDir

	def GetBundleIconFile(self, resources):
		"""
		:param resources: Files produced by the resource emitter
		:type resources: projexport.msvc.resources.ResourceFiles
		:return: Icon used when packaging a bundle, relative to the project folder
		:rtype: projexport.paths.RelativePath
		"""
		if resources.iconFile is not None:
			projectIcon = RelativePath(os.path.basename(resources.iconFile), RootFolder.BuildTargetFolder)
			return self.exporter.rebaser.Rebase(projectIcon, RootFolder.BuildTargetFolder, RootFolder.ProjectFolder)
		return self._getSdkRoot().GetChildFile("Utilities").GetChildFile("PlugIn.ico")

	def GetExtraPreBuildSteps(self, config):
		"""
		:return: Commands injected before the build for this target type
		:rtype: str
		"""
		if not self.traits.bundleSteps:
			return ""

		script = ""
		for folder in self._getBundleFolders(config, False):
			script += "if not exist \"{0}\" mkdir \"{0}\"\r\n".format(folder)
		return script

	def GetExtraPostBuildSteps(self, config, resources):
		"""
		:return: Commands injected after the build for this target type
		:rtype: str
		"""
		if not self.traits.bundleSteps:
			return ""

		bundleScript = self._getSdkRoot().GetChildFile("Utilities").GetChildFile("CreatePackage.bat")
		_, _, platformDir = self._getBundleFolders(config, True)
		executable = "{}\\{}".format(platformDir, config.GetOutputFilename(".aaxplugin", True))

		return "copy /Y \"{}\" \"{}\"\r\n{} \"{}\" {}".format(
			self.GetOutputFilePath(config),
			executable,
			self.exporter.CreateRebasedPath(bundleScript),
			platformDir,
			self.exporter.CreateRebasedPath(self.GetBundleIconFile(resources)),
		)

	def GetPreBuildSteps(self, config):
		return JoinBuildSteps(config.GetPrebuildCommand(), self.GetExtraPreBuildSteps(config))

	def GetPostBuildSteps(self, config, resources):
		return JoinBuildSteps(config.GetPostbuildCommand(), self.GetExtraPostBuildSteps(config, resources))
