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
.. module:: loader
	:synopsis: Reads a JSON project description into a ProjectModel.

.. moduleauthor:: Jaedyn K. Draper

The project file is a JSON object. Every key except "name" is optional:

.. code-block:: json

	{
		"name": "Gain",
		"id": "a1B2c3",
		"projectType": "audioplug",
		"pluginFormats": ["VST3", "AAX"],
		"version": "1.2.0",
		"companyName": "Example Audio",
		"defines": "FOO=1 BAR",
		"headerSearchPaths": ["../Shared"],
		"moduleLibs": ["dsp"],
		"icon": "Resources/icon.png",
		"dependencyPaths": {"vst3Path": {"windows": "C:/SDKs/VST3"}},
		"groups": [
			{"id": "g1", "name": "Source", "children": [
				{"id": "f1", "name": "Main.cpp", "file": "Source/Main.cpp"}
			]}
		],
		"exporters": {
			"VS2015": {
				"settings": {"extraDefs": "BAZ"},
				"configurations": [{"name": "Debug", "isDebug": true}, {"name": "Release"}]
			}
		}
	}
"""

import collections
import json
import os

from . import ExportFailureException, ProjectType, log
from ._utils.image import DecodePng, ImageFormatError
from .defines import ParsePreprocessorDefines
from .model import ExporterSettings, ProjectItem, ProjectModel, SettingsTree
from .target_types import TARGET_TRAITS, PLUGIN_TARGET_TYPES


def CreateDefaultExporterSettings():
	"""
	:return: Exporter settings with the standard Debug and Release configurations
	:rtype: projexport.model.ExporterSettings
	"""
	return ExporterSettings(
		SettingsTree(),
		[
			SettingsTree({"name": "Debug", "isDebug": True}),
			SettingsTree({"name": "Release", "isDebug": False}),
		],
	)


def _resolvePluginFormat(name):
	for targetType in PLUGIN_TARGET_TYPES:
		if name == targetType or name == TARGET_TRAITS[targetType].pluginFormat:
			return targetType
	log.Warn("Unknown plugin format {}, ignoring", name)
	return None


def _loadItem(data, parentId=None):
	name = data.get("name") or os.path.basename(data.get("file", ""))
	itemId = data.get("id") or data.get("file")
	if not itemId:
		# Groups without an id are keyed by their path so same-named groups in different parents stay distinct.
		itemId = name if parentId is None else "{}/{}".format(parentId, name)
	itemId = str(itemId)

	if "file" in data:
		return ProjectItem(
			itemId,
			name,
			filePath=data["file"],
			shouldCompile=bool(data.get("compile", True)),
			addToTarget=not data.get("resource", False),
			targetType=data.get("target"),
		)

	return ProjectItem.CreateGroup(itemId, name, [_loadItem(child, itemId) for child in data.get("children", [])])


def _loadIcon(project, iconPath):
	fullPath = os.path.join(project.projectFolder, iconPath)
	try:
		with open(fullPath, "rb") as f:
			project.icons.append(DecodePng(f.read()))
	except (IOError, OSError) as e:
		log.Warn("Could not read icon {}: {}", fullPath, e)
	except ImageFormatError as e:
		log.Warn("Could not decode icon {}: {}", fullPath, e)


def _loadExporterSettings(data):
	configs = data.get("configurations")
	if configs is None:
		exporterSettings = CreateDefaultExporterSettings()
		exporterSettings.settings = SettingsTree(data.get("settings", {}))
		return exporterSettings

	return ExporterSettings(
		SettingsTree(data.get("settings", {})),
		[SettingsTree(config) for config in configs],
	)


def ParseProject(data, projectFolder):
	"""
	Build a project model from already-parsed JSON data.

	:param data: Project description
	:type data: dict
	:param projectFolder: Absolute folder the project's relative paths are anchored to
	:type projectFolder: str
	:return: Project model with legacy exporter settings upgraded
	:rtype: projexport.model.ProjectModel
	"""
	if not isinstance(data, dict) or not data.get("name"):
		raise ExportFailureException("Project description must be an object with a \"name\"")

	project = ProjectModel(
		data["name"],
		str(data.get("id", data["name"])),
		projectFolder,
		data.get("projectType", ProjectType.GuiApplication),
	)
	project.version = data.get("version", "")
	project.companyName = data.get("companyName", "")

	for name in data.get("pluginFormats", []):
		targetType = _resolvePluginFormat(name)
		if targetType is not None:
			project.pluginFormats.append(targetType)

	projectDefines = data.get("defines", "")
	if isinstance(projectDefines, dict):
		project.defines = collections.OrderedDict((key, str(value)) for key, value in projectDefines.items())
	else:
		project.defines = ParsePreprocessorDefines(projectDefines)

	project.headerSearchPaths = list(data.get("headerSearchPaths", []))
	project.moduleLibs = list(data.get("moduleLibs", []))
	project.groups = [_loadItem(group) for group in data.get("groups", [])]

	groupIds = set()
	for topLevelGroup in project.groups:
		for item in topLevelGroup.Walk():
			if not item.IsGroup():
				continue
			if item.itemId in groupIds:
				raise ExportFailureException("Duplicate group id \"{}\"".format(item.itemId))
			groupIds.add(item.itemId)

	for pathId, values in data.get("dependencyPaths", {}).items():
		for targetOs, value in values.items():
			project.SetDependencyPath(pathId, targetOs, value)

	icons = data.get("icons", [])
	if data.get("icon"):
		icons = [data["icon"]] + list(icons)
	for iconPath in icons:
		_loadIcon(project, iconPath)

	for exporterName, exporterData in data.get("exporters", {}).items():
		exporterSettings = _loadExporterSettings(exporterData)
		exporterSettings.UpgradeLegacySettings()
		project.exporters[exporterName] = exporterSettings

	return project


def LoadProject(path):
	"""
	Load a JSON project file. Relative paths inside it are anchored to the folder holding the file.

	:param path: Path of the project file
	:type path: str
	:return: Project model
	:rtype: projexport.model.ProjectModel
	"""
	path = os.path.abspath(path)
	log.Info("Loading project {}", path)

	try:
		with open(path, "r", encoding="utf-8") as f:
			data = json.load(f, object_pairs_hook=collections.OrderedDict)
	except (IOError, OSError) as e:
		raise ExportFailureException("Could not read project file {}: {}".format(path, e))
	except ValueError as e:
		raise ExportFailureException("Project file {} is not valid JSON: {}".format(path, e))

	return ParseProject(data, os.path.dirname(path))
