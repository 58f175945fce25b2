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
.. module:: sample_project
	:synopsis: Builds the small projects shared by the exporter tests.

.. moduleauthor:: Brandon Bare
"""

from .. import ProjectType
from .._utils.image import Image
from ..model import ExporterSettings, ProjectItem, ProjectModel, SettingsTree, TargetOs
from ..target_types import DependencyPath, TargetType

PROJECT_UID = "Xy12Ab"


def CreateSolidImage(size, rgba=(255, 0, 0, 255)):
	"""
	:return: A square image filled with one colour
	:rtype: projexport._utils.image.Image
	"""
	return Image(size, size, bytearray(rgba) * (size * size))


def CreateSourceGroups():
	"""
	:return: A "Source" group holding shared code and a nested "Wrappers" group, plus a "Resources" group
	:rtype: list[projexport.model.ProjectItem]
	"""
	wrappers = ProjectItem.CreateGroup("grp_wrappers", "Wrappers", [
		ProjectItem("f_vst3", "wrapper_VST3.cpp", "Source/Wrappers/wrapper_VST3.cpp"),
		ProjectItem("f_aax", "wrapper_AAX.cpp", "Source/Wrappers/wrapper_AAX.cpp"),
		ProjectItem("f_rtas", "plugin_client_RTAS_1.cpp", "Source/Wrappers/plugin_client_RTAS_1.cpp"),
	])
	source = ProjectItem.CreateGroup("grp_source", "Source", [
		ProjectItem("f_proc", "PluginProcessor.cpp", "Source/PluginProcessor.cpp"),
		ProjectItem("f_proc_h", "PluginProcessor.h", "Source/PluginProcessor.h"),
		ProjectItem("f_off", "Disabled.cpp", "Source/Disabled.cpp", shouldCompile=False),
		wrappers,
	])
	resources = ProjectItem.CreateGroup("grp_resources", "Resources", [
		ProjectItem("f_notes", "notes.txt", "Resources/notes.txt", addToTarget=False),
	])
	return [source, resources]


def CreateExporterSettings(settings=None, configurations=None):
	"""
	:return: Exporter settings with a 64-bit Debug and a 32-bit Release configuration unless others are given
	:rtype: projexport.model.ExporterSettings
	"""
	if configurations is None:
		configurations = [
			{"name": "Debug", "isDebug": True},
			{"name": "Release", "isDebug": False, "winArchitecture": "32-bit"},
		]
	return ExporterSettings(SettingsTree(settings or {}), [SettingsTree(config) for config in configurations])


def CreatePluginProject(projectFolder, formats=(TargetType.Vst3, TargetType.Aax)):
	"""
	:return: An audio plugin project building the given formats plus shared code
	:rtype: projexport.model.ProjectModel
	"""
	project = ProjectModel("Gain Plugin", PROJECT_UID, projectFolder, ProjectType.AudioPlugin)
	project.pluginFormats = list(formats)
	project.version = "1.2.3"
	project.companyName = "Example Audio"
	project.groups = CreateSourceGroups()
	project.headerSearchPaths = ["Source"]
	project.SetDependencyPath(DependencyPath.Vst3, TargetOs.Windows, "C:/SDKs/VST3")
	project.SetDependencyPath(DependencyPath.Aax, TargetOs.Windows, "C:/SDKs/AAX")
	return project


def CreateAppProject(projectFolder, projectType=ProjectType.GuiApplication):
	"""
	:return: A single-target application or library project
	:rtype: projexport.model.ProjectModel
	"""
	project = ProjectModel("Hello App", "AppUid42", projectFolder, projectType)
	project.version = "2.0"
	project.groups = [ProjectItem.CreateGroup("grp_app", "App", [
		ProjectItem.CreateGroup("grp_app_source", "Source", [
			ProjectItem("f_main", "Main.cpp", "Source/Main.cpp"),
			ProjectItem("f_asm", "fast.asm", "Source/fast.asm"),
		]),
	])]
	return project
