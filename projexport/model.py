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
.. module:: model
	:synopsis: In-memory project description consumed by the exporters: file groups, settings trees,
		dependency paths, icons and the one-time legacy settings upgrade.

.. moduleauthor:: Jaedyn K. Draper
"""

import collections

from . import ProjectType, log
from .paths import CreateLegalFileName, RelativePath, RootFolder
from .target_types import TargetType, TARGET_TRAITS, PLUGIN_TARGET_TYPES


class TargetOs(object):
	"""
	'enum' representing the operating system a dependency path applies to.
	"""
	Windows = "windows"
	Osx = "osx"
	Linux = "linux"


class SettingsTree(object):
	"""
	Ordered key/value settings store used for exporter-wide and per-configuration settings.

	:param values: Initial values
	:type values: dict
	"""
	def __init__(self, values=None):
		self.dict = collections.OrderedDict(values or {})

	def Get(self, key, default=None):
		"""
		Get a value from the dict

		:param key: key
		:type key: str
		:param default: value returned if missing
		:type default: any
		:return: the value for this key, or default
		:rtype: any
		"""
		return self.dict.get(key, default)

	def GetString(self, key):
		"""
		Get a value as a stripped string, treating missing and None values as empty.

		:param key: key
		:type key: str
		:return: String value
		:rtype: str
		"""
		value = self.dict.get(key, None)
		if value is None:
			return ""
		return str(value).strip()

	def Save(self, key, value):
		"""
		Save a value to the dict

		:param key: The key
		:type key: str
		:param value: The value
		:type value: any
		"""
		self.dict[key] = value

	def SaveIfMissing(self, key, value):
		"""
		Save a value only if the key has no value yet.

		:param key: The key
		:type key: str
		:param value: The value
		:type value: any
		"""
		if self.dict.get(key, None) is None:
			self.dict[key] = value

	def Delete(self, key):
		"""
		Remove a key from the dict if it exists, nop otherwise

		:param key: key to remove
		:type key: str
		"""
		self.dict.pop(key, None)

	def Contains(self, key):
		"""
		:return: True if the key has a non-None value
		:rtype: bool
		"""
		return self.dict.get(key, None) is not None


def IsDebugConfiguration(configSettings):
	"""
	Determine whether a configuration is a debug configuration. An explicit "isDebug" setting wins,
	otherwise any configuration with "debug" in its name is treated as debug.

	:param configSettings: Configuration settings
	:type configSettings: SettingsTree
	:return: True for debug configurations
	:rtype: bool
	"""
	explicit = configSettings.Get("isDebug")
	if explicit is not None:
		return bool(explicit)
	return "debug" in configSettings.GetString("name").lower()


class ExporterSettings(object):
	"""
	Stored settings for one exporter: the exporter-wide settings plus one settings tree per build configuration.

	:param settings: Exporter-wide settings
	:type settings: SettingsTree
	:param configurations: Per-configuration settings, in declaration order
	:type configurations: list[SettingsTree]
	"""
	def __init__(self, settings=None, configurations=None):
		self.settings = settings if settings is not None else SettingsTree()
		self.configurations = list(configurations or [])

	def _takeLegacyString(self, key):
		value = self.settings.Get(key)
		self.settings.Delete(key)
		if value is None:
			return ""
		if not isinstance(value, str):
			log.Info("Ignoring malformed legacy setting {} = {!r}", key, value)
			return ""
		return value.strip()

	def UpgradeLegacySettings(self):
		"""
		Migrate single-key settings from older project files into per-configuration values.
		Running this more than once is a no-op, since migrated keys are removed.

		- "prebuildCommand" moves into every configuration.
		- "libraryName_Debug" becomes the binary name of every debug configuration.
		- "libraryName_Release" becomes the binary name of every non-debug configuration.
		"""
		prebuildCommand = self._takeLegacyString("prebuildCommand")
		if prebuildCommand:
			for config in self.configurations:
				config.Save("prebuildCommand", prebuildCommand)

		debugLibName = self._takeLegacyString("libraryName_Debug")
		if debugLibName:
			for config in self.configurations:
				if IsDebugConfiguration(config):
					config.Save("targetName", debugLibName)

		releaseLibName = self._takeLegacyString("libraryName_Release")
		if releaseLibName:
			for config in self.configurations:
				if not IsDebugConfiguration(config):
					config.Save("targetName", releaseLibName)


class ProjectItem(object):
	"""
	A node in the project's file tree: either a group or a file.

	:param itemId: Stable identifier of this item
	:type itemId: str
	:param name: Display name
	:type name: str
	:param filePath: For files, the path relative to the project folder. None for groups.
	:type filePath: str or None
	:param shouldCompile: Whether the file should be compiled
	:type shouldCompile: bool
	:param addToTarget: Whether the file belongs in the generated target projects at all
	:type addToTarget: bool
	:param targetType: Explicit target the file belongs to, overriding the file-name based lookup
	:type targetType: str or None
	"""
	def __init__(self, itemId, name, filePath=None, shouldCompile=True, addToTarget=True, targetType=None):
		self.itemId = itemId
		self.name = name
		self.filePath = filePath
		self.shouldCompile = shouldCompile
		self.addToTarget = addToTarget
		self.targetType = targetType
		self.children = []

	@staticmethod
	def CreateGroup(itemId, name, children=None):
		"""
		Create a group item.

		:return: New group
		:rtype: ProjectItem
		"""
		group = ProjectItem(itemId, name)
		group.children.extend(children or [])
		return group

	def IsGroup(self):
		"""
		:return: True if this item is a group
		:rtype: bool
		"""
		return self.filePath is None

	def IsFile(self):
		"""
		:return: True if this item is a file
		:rtype: bool
		"""
		return self.filePath is not None

	def GetRelativePath(self):
		"""
		:return: The file path anchored to the project folder
		:rtype: RelativePath
		"""
		assert self.IsFile(), "Groups have no file path"
		return RelativePath(self.filePath, RootFolder.ProjectFolder)

	def Walk(self):
		"""
		Iterate over this item and all of its descendants, depth-first.
		"""
		yield self
		for child in self.children:
			for item in child.Walk():
				yield item


class ProjectModel(object):
	"""
	In-memory description of a project.

	:param title: Project name
	:type title: str
	:param projectUid: Project-unique id used to seed generated GUIDs
	:type projectUid: str
	:param projectFolder: Absolute path of the folder holding the project
	:type projectFolder: str
	:param projectType: One of the projexport.ProjectType values
	:type projectType: str
	"""
	def __init__(self, title, projectUid, projectFolder, projectType=ProjectType.GuiApplication):
		self.title = title
		self.projectUid = projectUid
		self.projectFolder = projectFolder
		self.projectType = projectType
		self.pluginFormats = []
		self.version = ""
		self.companyName = ""
		self.groups = []
		self.defines = collections.OrderedDict()
		self.headerSearchPaths = []
		self.moduleLibs = []
		self.dependencyPaths = {}
		self.icons = []
		self.exporters = collections.OrderedDict()

	def IsAudioPlugin(self):
		"""
		:return: True if the project builds audio plugins
		:rtype: bool
		"""
		return self.projectType == ProjectType.AudioPlugin

	def IsStaticLibrary(self):
		"""
		:return: True if the project builds a static library
		:rtype: bool
		"""
		return self.projectType == ProjectType.StaticLibrary

	def IsCommandLineApp(self):
		"""
		:return: True if the project builds a console application
		:rtype: bool
		"""
		return self.projectType == ProjectType.ConsoleApplication

	def GetProjectFilenameRoot(self):
		"""
		:return: The project title made safe for use as a file name
		:rtype: str
		"""
		return CreateLegalFileName(self.title)

	def GetTargetTypes(self):
		"""
		List the target types this project builds, in solution order.

		:return: Target types
		:rtype: list[str]
		"""
		if self.projectType == ProjectType.GuiApplication:
			return [TargetType.GuiApp]
		if self.projectType == ProjectType.ConsoleApplication:
			return [TargetType.ConsoleApp]
		if self.projectType == ProjectType.StaticLibrary:
			return [TargetType.StaticLibrary]
		if self.projectType == ProjectType.DynamicLibrary:
			return [TargetType.DynamicLibrary]
		if self.projectType == ProjectType.AudioPlugin:
			formats = [targetType for targetType in PLUGIN_TARGET_TYPES if targetType in self.pluginFormats]
			return formats + [TargetType.SharedCode, TargetType.Aggregate]
		return []

	def IsPluginFormatEnabled(self, targetType):
		"""
		:return: True if the given plugin format is enabled in this project
		:rtype: bool
		"""
		return targetType in self.pluginFormats

	def GetAllGroups(self):
		"""
		:return: Top-level file groups
		:rtype: list[ProjectItem]
		"""
		return self.groups

	def GetTargetTypeFromFilePath(self, item):
		"""
		Determine which target a source file belongs to. Plugin wrapper files are recognised by a format suffix
		at the end of their name or followed by another underscore, e.g. "wrapper_VST3.cpp" or "wrapper_AAX_Utils.cpp".
		Everything else belongs to the shared code target.

		:param item: File item
		:type item: ProjectItem
		:return: Target type the file belongs to
		:rtype: str
		"""
		if item.targetType is not None:
			return item.targetType

		name = item.GetRelativePath().GetFileNameWithoutExtension().lower()
		for targetType in PLUGIN_TARGET_TYPES:
			suffix = TARGET_TRAITS[targetType].sourceSuffix.lower()
			if name.endswith(suffix) or (suffix + "_") in name:
				return targetType
		return TargetType.SharedCode

	def SetDependencyPath(self, pathId, targetOs, value):
		"""
		Set a global dependency path, e.g. a plugin SDK location.

		:param pathId: Dependency path id
		:type pathId: str
		:param targetOs: Operating system it applies to
		:type targetOs: str
		:param value: Path
		:type value: str
		"""
		self.dependencyPaths[(pathId, targetOs)] = value

	def GetDependencyPath(self, pathId, targetOs):
		"""
		:return: The global dependency path for an id and OS, or an empty string if unset
		:rtype: str
		"""
		return self.dependencyPaths.get((pathId, targetOs), "") or ""

	def GetBestIconForSize(self, size):
		"""
		Pick the source icon best suited to the given size and scale it to fit. An exact match wins,
		then the smallest larger image, then the largest image.

		:param size: Edge length in pixels
		:type size: int
		:return: Square image of the requested size, or None if the project has no icon
		:rtype: projexport._utils.image.Image or None
		"""
		if not self.icons:
			return None

		best = None
		for image in self.icons:
			if image.width == size and image.height == size:
				best = image
				break
			if image.width >= size:
				if best is None or best.width < size or image.width < best.width:
					best = image
			elif best is None or (best.width < size and image.width > best.width):
				best = image

		return best.Rescaled(size, size)
