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
.. module:: target_project
	:synopsis: Builds the .vcxproj document for one target. The document is assembled in a fixed sequence of
		sections; each step checks that the previous one has run so sections always land in the order
		MSBuild expects.

.. moduleauthor:: Brandon Bare
"""

from xml.etree import ElementTree as ET
from xml.dom import minidom

from .._utils.file_proxy import FileProxy
from ..paths import PrependDot, RootFolder
from ..target_types import TargetFileType, TargetType
from .platform_handlers.windows import GetPlatformHandler
from .resolver import ResolveConfiguration

C_OR_CPP_FILE_EXTENSIONS = {".cpp", ".cc", ".cxx", ".c"}
ASM_FILE_EXTENSIONS = {".asm"}

# Legacy RTAS wrapper sources must be compiled with the stdcall convention. They are named
# plugin_client_RTAS_<n> or juce_audio_plugin_client_RTAS_<n>; the match is case-insensitive.
RTAS_WRAPPER_PATTERN = "plugin_client_rtas_"

MSBUILD_NAMESPACE = "http://schemas.microsoft.com/developer/msbuild/2003"

_createRootXmlNode = ET.Element
_addXmlNode = ET.SubElement


def _addTextNode(parentXmlNode, tag, text):
	node = _addXmlNode(parentXmlNode, tag)
	node.text = text
	return node


def ShouldUseStdCall(path):
	"""
	:param path: Source file path
	:type path: projexport.paths.RelativePath
	:return: True if the file is a legacy RTAS wrapper that needs the stdcall calling convention
	:rtype: bool
	"""
	fileName = path.GetFileNameWithoutExtension().lower()
	return fileName.startswith(RTAS_WRAPPER_PATTERN) or fileName.startswith("juce_audio_" + RTAS_WRAPPER_PATTERN)


class BuilderState(object):
	"""
	'enum' representing how far a target document has been built.
	"""
	Init = 0
	ConfigurationsEmitted = 1
	CompileSettingsEmitted = 2
	LinkSettingsEmitted = 3
	FileListEmitted = 4
	Finalized = 5


class VcxProjBuilder(object):
	"""
	Builds the project document for one target.

	:param exporter: Owning exporter
	:type exporter: projexport.msvc.MsvcExporter
	:param target: Target being written
	:type target: projexport.msvc.target.MsvcTarget
	:param resources: Files produced by the resource emitter
	:type resources: projexport.msvc.resources.ResourceFiles
	"""
	def __init__(self, exporter, target, resources):
		self.exporter = exporter
		self.target = target
		self.resources = resources
		self.state = BuilderState.Init
		self.rootXmlNode = None
		self._itemDefinitionGroups = {}

		self._configs = [
			(config, GetPlatformHandler(config), ResolveConfiguration(exporter, target, config))
			for config in exporter.configs
		]

	def _advance(self, expectedState, newState):
		assert self.state == expectedState, \
			"Target document section out of order: expected state {}, currently {}".format(expectedState, self.state)
		self.state = newState

	def EmitConfigurations(self):
		"""
		Write the project header: configuration list, globals, per-configuration property groups,
		property imports and the output folder properties.
		"""
		self._advance(BuilderState.Init, BuilderState.ConfigurationsEmitted)

		versionInfo = self.exporter.versionInfo
		target = self.target

		rootXmlNode = _createRootXmlNode("Project")
		rootXmlNode.set("DefaultTargets", "Build")
		rootXmlNode.set("ToolsVersion", versionInfo.toolsVersion)
		rootXmlNode.set("xmlns", MSBUILD_NAMESPACE)
		self.rootXmlNode = rootXmlNode

		itemGroupXmlNode = _addXmlNode(rootXmlNode, "ItemGroup")
		itemGroupXmlNode.set("Label", "ProjectConfigurations")
		for config, handler, _ in self._configs:
			handler.WriteProjectConfiguration(itemGroupXmlNode, config.GetName())

		globalsXmlNode = _addXmlNode(rootXmlNode, "PropertyGroup")
		globalsXmlNode.set("Label", "Globals")
		_addTextNode(globalsXmlNode, "ProjectGuid", target.GetProjectGuid())

		importXmlNode = _addXmlNode(rootXmlNode, "Import")
		importXmlNode.set("Project", r"$(VCTargetsPath)\Microsoft.Cpp.Default.props")

		for config, handler, resolved in self._configs:
			propertyGroupXmlNode = handler.WriteConfigPropertyGroup(rootXmlNode, config.GetName(), target.GetConfigurationType())

			charSet = config.GetCharacterSet()
			if charSet:
				_addTextNode(propertyGroupXmlNode, "CharacterSet", charSet)

			if not (resolved.isDebug or config.ShouldDisableWholeProgramOpt()):
				_addTextNode(propertyGroupXmlNode, "WholeProgramOptimization", "true")

			if config.ShouldLinkIncremental():
				_addTextNode(propertyGroupXmlNode, "LinkIncremental", "true")

			# Newer versions stamp the toolset onto every property group when the document is finalized.
			if resolved.is64Bit and not versionInfo.toolsetOnEveryPropertyGroup:
				_addTextNode(propertyGroupXmlNode, "PlatformToolset", self.exporter.GetPlatformToolset())

		importXmlNode = _addXmlNode(rootXmlNode, "Import")
		importXmlNode.set("Project", r"$(VCTargetsPath)\Microsoft.Cpp.props")

		importGroupXmlNode = _addXmlNode(rootXmlNode, "ImportGroup")
		importGroupXmlNode.set("Label", "ExtensionSettings")

		importGroupXmlNode = _addXmlNode(rootXmlNode, "ImportGroup")
		importGroupXmlNode.set("Label", "PropertySheets")
		importXmlNode = _addXmlNode(importGroupXmlNode, "Import")
		importXmlNode.set("Project", r"$(UserRootDir)\Microsoft.Cpp.$(Platform).user.props")
		importXmlNode.set("Condition", r"exists('$(UserRootDir)\Microsoft.Cpp.$(Platform).user.props')")
		importXmlNode.set("Label", "LocalAppDataPlatform")

		userMacrosXmlNode = _addXmlNode(rootXmlNode, "PropertyGroup")
		userMacrosXmlNode.set("Label", "UserMacros")

		propsXmlNode = _addXmlNode(rootXmlNode, "PropertyGroup")
		_addTextNode(propsXmlNode, "_ProjectFileVersion", "10.0.30319.1")
		_addTextNode(propsXmlNode, "TargetExt", target.GetTargetSuffix())

		for config, handler, resolved in self._configs:
			vsConfig = config.GetName()

			outDirXmlNode = _addTextNode(propsXmlNode, "OutDir", target.GetConfigTargetPath(config) + "\\")
			handler.SetConditionAttribute(outDirXmlNode, vsConfig)

			intDirXmlNode = _addTextNode(propsXmlNode, "IntDir", target.GetIntermediatesPath(config))
			handler.SetConditionAttribute(intDirXmlNode, vsConfig)

			targetNameXmlNode = _addTextNode(propsXmlNode, "TargetName", config.GetOutputFilename("", False))
			handler.SetConditionAttribute(targetNameXmlNode, vsConfig)

			manifestXmlNode = _addTextNode(propsXmlNode, "GenerateManifest", "true" if config.ShouldGenerateManifest() else "false")
			handler.SetConditionAttribute(manifestXmlNode, vsConfig)

			if resolved.librarySearchPaths:
				libPathXmlNode = _addTextNode(propsXmlNode, "LibraryPath", "$(LibraryPath);" + ";".join(resolved.librarySearchPaths))
				handler.SetConditionAttribute(libPathXmlNode, vsConfig)

	def EmitCompileSettings(self):
		"""
		Open one item definition group per configuration and write the MIDL, compiler and resource compiler settings.
		"""
		self._advance(BuilderState.ConfigurationsEmitted, BuilderState.CompileSettingsEmitted)

		for config, handler, resolved in self._configs:
			groupXmlNode = _addXmlNode(self.rootXmlNode, "ItemDefinitionGroup")
			handler.SetConditionAttribute(groupXmlNode, config.GetName())
			self._itemDefinitionGroups[resolved.configName] = groupXmlNode

			debugMarker = "_DEBUG;%(PreprocessorDefinitions)" if resolved.isDebug else "NDEBUG;%(PreprocessorDefinitions)"

			midlXmlNode = _addXmlNode(groupXmlNode, "Midl")
			_addTextNode(midlXmlNode, "PreprocessorDefinitions", debugMarker)
			_addTextNode(midlXmlNode, "MkTypLibCompatible", "true")
			_addTextNode(midlXmlNode, "SuppressStartupBanner", "true")
			_addTextNode(midlXmlNode, "TargetEnvironment", "Win32")
			_addXmlNode(midlXmlNode, "HeaderFileName")

			clXmlNode = _addXmlNode(groupXmlNode, "ClCompile")
			_addTextNode(clXmlNode, "Optimization", resolved.optimisation)

			if resolved.debugInformationFormat is not None:
				_addTextNode(clXmlNode, "DebugInformationFormat", resolved.debugInformationFormat)

			includePaths = list(resolved.includePaths) + ["%(AdditionalIncludeDirectories)"]
			_addTextNode(clXmlNode, "AdditionalIncludeDirectories", ";".join(includePaths))
			_addTextNode(clXmlNode, "PreprocessorDefinitions", resolved.definesString + ";%(PreprocessorDefinitions)")
			_addTextNode(clXmlNode, "RuntimeLibrary", resolved.runtimeLibrary)
			_addTextNode(clXmlNode, "RuntimeTypeInfo", "true")
			_addXmlNode(clXmlNode, "PrecompiledHeader")
			_addTextNode(clXmlNode, "AssemblerListingLocation", "$(IntDir)\\")
			_addTextNode(clXmlNode, "ObjectFileName", "$(IntDir)\\")
			_addTextNode(clXmlNode, "ProgramDataBaseFileName", "$(IntDir)\\")
			_addTextNode(clXmlNode, "WarningLevel", resolved.warningLevel)
			_addTextNode(clXmlNode, "SuppressStartupBanner", "true")
			_addTextNode(clXmlNode, "MultiProcessorCompilation", "true")

			if resolved.fastMath:
				_addTextNode(clXmlNode, "FloatingPointModel", "Fast")

			if resolved.extraCompilerFlags:
				_addTextNode(clXmlNode, "AdditionalOptions", resolved.extraCompilerFlags + " %(AdditionalOptions)")

			if resolved.treatWarningsAsErrors:
				_addTextNode(clXmlNode, "TreatWarningAsError", "true")

			resXmlNode = _addXmlNode(groupXmlNode, "ResourceCompile")
			_addTextNode(resXmlNode, "PreprocessorDefinitions", debugMarker)

	def EmitLinkSettings(self):
		"""
		Write the linker, browse information, librarian and build event settings into each configuration's item definition group.
		"""
		self._advance(BuilderState.CompileSettingsEmitted, BuilderState.LinkSettingsEmitted)

		exporter = self.exporter
		target = self.target

		for config, handler, resolved in self._configs:
			groupXmlNode = self._itemDefinitionGroups[resolved.configName]
			isDebug = resolved.isDebug

			linkXmlNode = _addXmlNode(groupXmlNode, "Link")
			_addTextNode(linkXmlNode, "OutputFile", target.GetOutputFilePath(config))
			_addTextNode(linkXmlNode, "SuppressStartupBanner", "true")
			_addTextNode(
				linkXmlNode,
				"IgnoreSpecificDefaultLibraries",
				"libcmt.lib; msvcrt.lib;;%(IgnoreSpecificDefaultLibraries)" if isDebug else "%(IgnoreSpecificDefaultLibraries)",
			)
			_addTextNode(linkXmlNode, "GenerateDebugInformation", "true" if resolved.generateDebugInformation else "false")
			_addTextNode(linkXmlNode, "ProgramDatabaseFile", exporter.GetIntDirFile(config, config.GetOutputFilename(".pdb", True)))
			_addTextNode(linkXmlNode, "SubSystem", "Console" if target.targetType == TargetType.ConsoleApp else "Windows")

			targetMachine = handler.GetTargetMachine()
			if targetMachine:
				_addTextNode(linkXmlNode, "TargetMachine", targetMachine)

			if resolved.debugInformationFormat == "EditAndContinue":
				_addTextNode(linkXmlNode, "ImageHasSafeExceptionHandlers", "false")

			if not isDebug:
				_addTextNode(linkXmlNode, "OptimizeReferences", "true")
				_addTextNode(linkXmlNode, "EnableCOMDATFolding", "true")

			if resolved.librarySearchPaths:
				_addTextNode(
					linkXmlNode,
					"AdditionalLibraryDirectories",
					";".join(resolved.librarySearchPaths) + ";%(AdditionalLibraryDirectories)",
				)

			_addTextNode(linkXmlNode, "LargeAddressAware", "true")

			if resolved.externalLibraries:
				_addTextNode(linkXmlNode, "AdditionalDependencies", resolved.externalLibraries + ";%(AdditionalDependencies)")

			if resolved.extraLinkerFlags:
				_addTextNode(linkXmlNode, "AdditionalOptions", resolved.extraLinkerFlags + " %(AdditionalOptions)")

			if resolved.delayLoadedDlls:
				_addTextNode(linkXmlNode, "DelayLoadDLLs", resolved.delayLoadedDlls)

			moduleDefinitionFile = config.GetModuleDefinitionFile()
			if moduleDefinitionFile:
				_addTextNode(linkXmlNode, "ModuleDefinitionFile", moduleDefinitionFile)

			bscXmlNode = _addXmlNode(groupXmlNode, "Bscmake")
			_addTextNode(bscXmlNode, "SuppressStartupBanner", "true")
			_addTextNode(bscXmlNode, "OutputFile", exporter.GetIntDirFile(config, config.GetOutputFilename(".bsc", True)))

			if target.GetTargetFileType() == TargetFileType.StaticLibrary and targetMachine:
				libXmlNode = _addXmlNode(groupXmlNode, "Lib")
				_addTextNode(libXmlNode, "TargetMachine", targetMachine)

			preBuild = target.GetPreBuildSteps(config)
			if preBuild:
				_addTextNode(_addXmlNode(groupXmlNode, "PreBuildEvent"), "Command", preBuild)

			postBuild = target.GetPostBuildSteps(config, self.resources)
			if postBuild:
				_addTextNode(_addXmlNode(groupXmlNode, "PostBuildEvent"), "Command", postBuild)

	def _addFilesToCompile(self, projectItem, cppsXmlNode, targetType):
		if projectItem.IsGroup():
			for child in projectItem.children:
				self._addFilesToCompile(child, cppsXmlNode, targetType)
			return

		if not projectItem.addToTarget:
			return

		path = self.exporter.RebaseFromProjectFolderToBuildTarget(projectItem.GetRelativePath())
		assert path.root == RootFolder.BuildTargetFolder

		if projectItem.shouldCompile \
				and (path.HasFileExtension(C_OR_CPP_FILE_EXTENSIONS) or path.HasFileExtension(ASM_FILE_EXTENSIONS)) \
				and self.exporter.project.GetTargetTypeFromFilePath(projectItem) == targetType:
			fileXmlNode = _addXmlNode(cppsXmlNode, "ClCompile")
			fileXmlNode.set("Include", path.ToWindowsStyle())

			if ShouldUseStdCall(path):
				_addTextNode(fileXmlNode, "CallingConvention", "StdCall")

	def EmitFileList(self):
		"""
		Write the compiled source files belonging to this target, followed by the icon and resource script.
		"""
		self._advance(BuilderState.LinkSettingsEmitted, BuilderState.FileListEmitted)

		project = self.exporter.project
		targetType = self.target.targetType if project.IsAudioPlugin() else TargetType.SharedCode

		cppsXmlNode = _addXmlNode(self.rootXmlNode, "ItemGroup")
		for group in project.GetAllGroups():
			if group.children:
				self._addFilesToCompile(group, cppsXmlNode, targetType)

		if self.resources.iconFile is not None:
			otherFilesXmlNode = _addXmlNode(self.rootXmlNode, "ItemGroup")
			iconXmlNode = _addXmlNode(otherFilesXmlNode, "None")
			iconXmlNode.set("Include", PrependDot("icon.ico"))

		if self.resources.rcFile is not None:
			rcGroupXmlNode = _addXmlNode(self.rootXmlNode, "ItemGroup")
			rcXmlNode = _addXmlNode(rcGroupXmlNode, "ResourceCompile")
			rcXmlNode.set("Include", PrependDot("resources.rc"))

	def Finalize(self):
		"""
		Write the closing imports, then stamp the platform toolset and IPP settings onto the property groups where the version requires it.
		"""
		self._advance(BuilderState.FileListEmitted, BuilderState.Finalized)

		importXmlNode = _addXmlNode(self.rootXmlNode, "Import")
		importXmlNode.set("Project", r"$(VCTargetsPath)\Microsoft.Cpp.targets")

		importGroupXmlNode = _addXmlNode(self.rootXmlNode, "ImportGroup")
		importGroupXmlNode.set("Label", "ExtensionTargets")

		if self.exporter.versionInfo.toolsetOnEveryPropertyGroup:
			toolset = self.exporter.GetPlatformToolset()
			for propertyGroupXmlNode in self.rootXmlNode.findall("PropertyGroup"):
				_addTextNode(propertyGroupXmlNode, "PlatformToolset", toolset)

		ippLibrary = self.exporter.GetIppLibrary()
		if ippLibrary:
			for propertyGroupXmlNode in self.rootXmlNode.findall("PropertyGroup"):
				_addTextNode(propertyGroupXmlNode, "UseIntelIPP", ippLibrary)

	def Build(self):
		"""
		Run every section in order.

		:return: Root node of the finished document
		:rtype: xml.etree.ElementTree.Element
		"""
		self.EmitConfigurations()
		self.EmitCompileSettings()
		self.EmitLinkSettings()
		self.EmitFileList()
		self.Finalize()
		return self.rootXmlNode

	def GetDocumentData(self):
		"""
		:return: The finished document, pretty printed as UTF-8 XML
		:rtype: bytes
		"""
		assert self.state == BuilderState.Finalized, "Target document hasn't been finalized"

		# Use minidom to reformat the XML since ElementTree doesn't do it for us.
		xmlString = ET.tostring(self.rootXmlNode)
		return minidom.parseString(xmlString).toprettyxml("\t", "\n", encoding="utf-8")


def WriteTargetProject(exporter, target, resources):
	"""
	Build a target's project document and write it if it changed.

	:param exporter: Owning exporter
	:type exporter: projexport.msvc.MsvcExporter
	:param target: Target to write
	:type target: projexport.msvc.target.MsvcTarget
	:param resources: Files produced by the resource emitter
	:type resources: projexport.msvc.resources.ResourceFiles
	:return: True if the file was written
	:rtype: bool
	"""
	builder = VcxProjBuilder(exporter, target, resources)
	builder.Build()
	return FileProxy(target.GetVcxProjFile(), builder.GetDocumentData()).Check()
