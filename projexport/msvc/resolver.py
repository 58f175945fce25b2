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
.. module:: resolver
	:synopsis: Resolves exporter, project, target and configuration settings into the immutable set of
		values written for one (target, configuration) pair.

.. moduleauthor:: Brandon Bare
"""

import collections

from .. import defines
from .._utils import RemoveDuplicates
from ..paths import RelativePath, RootFolder
from ..target_types import TargetFileType, TargetType
from .configuration import GetOptimisationLevelString, OptimisationLevel
from .platform_handlers.windows import GetPlatformHandler

ResolvedConfiguration = collections.namedtuple(
	"ResolvedConfiguration",
	[
		"configName",
		"isDebug",
		"is64Bit",
		# Tuple of (name, value) pairs, in emission order.
		"defines",
		"definesString",
		"includePaths",
		"librarySearchPaths",
		"externalLibraries",
		"useRuntimeDll",
		"runtimeLibrary",
		"optimisation",
		"warningLevel",
		"treatWarningsAsErrors",
		"fastMath",
		# None when no explicit format is written.
		"debugInformationFormat",
		"generateDebugInformation",
		"extraCompilerFlags",
		"extraLinkerFlags",
		"delayLoadedDlls",
	]
)


def GetRuntimeLibraryToken(useRuntimeDll, isDebug):
	"""
	:return: The ClCompile RuntimeLibrary value
	:rtype: str
	"""
	if useRuntimeDll:
		return "MultiThreadedDebugDLL" if isDebug else "MultiThreadedDLL"
	return "MultiThreadedDebug" if isDebug else "MultiThreaded"


def ShouldUseRuntimeDll(exporter, config):
	"""
	Decide whether to link the DLL runtime. An explicit configuration choice wins; otherwise projects that
	build AAX or RTAS plugins use the static runtime and everything else uses the DLL runtime.

	:param exporter: Owning exporter
	:type exporter: projexport.msvc.MsvcExporter
	:param config: Build configuration
	:type config: projexport.msvc.configuration.MsvcBuildConfiguration
	:return: True for the DLL runtime
	:rtype: bool
	"""
	explicit = config.GetRuntimeLibDllSetting()
	if explicit is not None:
		return explicit
	return not (exporter.HasTarget(TargetType.Aax) or exporter.HasTarget(TargetType.Rtas))


def ResolveDefines(exporter, target, config):
	"""
	Build the ordered define set for a target and configuration.

	Order: exporter-mandated defines, platform markers, debug/release markers, the merged project, exporter,
	configuration and plugin defines, target type SDK path defines, then the library marker.
	A define set again later keeps its original position and takes the later value.

	:return: Ordered define mapping
	:rtype: collections.OrderedDict
	"""
	result = collections.OrderedDict(exporter.GetMsvcExtraPreprocessorDefines())
	result["WIN32"] = ""
	result["_WINDOWS"] = ""

	if config.IsDebug():
		result["DEBUG"] = ""
		result["_DEBUG"] = ""
	else:
		result["NDEBUG"] = ""

	result = defines.MergePreprocessorDefines(result, exporter.GetAllPreprocessorDefines(config, target.targetType))

	traits = target.traits
	if traits.sdkDefines:
		sdkRoot = exporter.GetDependencyPathAsRelativePath(traits.sdkPath)
		for name, subPath in traits.sdkDefines:
			result[name] = exporter.CreateRebasedPath(sdkRoot.GetChildFile(subPath))

	if traits.fileType in (TargetFileType.StaticLibrary, TargetFileType.SharedLibrary):
		result["_LIB"] = ""

	return result


def ResolveIncludePaths(exporter, target, config):
	"""
	Collect header search paths: project-wide paths rebased into the build folder, then exporter and
	configuration paths, then target type SDK paths. Duplicates are removed, first occurrence wins.

	:return: Include paths
	:rtype: list[str]
	"""
	paths = []
	for path in exporter.project.headerSearchPaths:
		rebased = exporter.RebaseFromProjectFolderToBuildTarget(RelativePath(path, RootFolder.ProjectFolder))
		paths.append(rebased.ToWindowsStyle())

	paths.extend(exporter.GetHeaderSearchPaths(config))
	paths.extend(target.GetExtraSearchPaths())
	return RemoveDuplicates(path for path in paths if path)


def ResolveConfiguration(exporter, target, config):
	"""
	Resolve everything the document builder needs for one (target, configuration) pair.

	:param exporter: Owning exporter
	:type exporter: projexport.msvc.MsvcExporter
	:param target: Target being written
	:type target: projexport.msvc.target.MsvcTarget
	:param config: Build configuration
	:type config: projexport.msvc.configuration.MsvcBuildConfiguration
	:return: Resolved values
	:rtype: ResolvedConfiguration
	"""
	isDebug = config.IsDebug()
	optimisationLevel = config.GetOptimisationLevel()
	handler = GetPlatformHandler(config)

	debugInformationFormat = None
	if isDebug and optimisationLevel <= OptimisationLevel.Off:
		debugInformationFormat = "EditAndContinue" if handler.SupportsEditAndContinue() else "ProgramDatabase"

	resolvedDefines = ResolveDefines(exporter, target, config)
	useRuntimeDll = ShouldUseRuntimeDll(exporter, config)

	extraLinkerFlags = " ".join(flag for flag in (
		exporter.ReplacePreprocessorTokens(config, exporter.GetExtraLinkerFlags()).strip(),
		target.GetExtraLinkerFlags(),
	) if flag)

	return ResolvedConfiguration(
		configName=config.CreateMsvcConfigName(),
		isDebug=isDebug,
		is64Bit=config.Is64Bit(),
		defines=tuple(resolvedDefines.items()),
		definesString=defines.FormatPreprocessorDefines(resolvedDefines, ";"),
		includePaths=tuple(ResolveIncludePaths(exporter, target, config)),
		librarySearchPaths=tuple(
			exporter.ReplacePreprocessorTokens(config, path) for path in target.GetLibrarySearchPaths(config)
		),
		externalLibraries=exporter.ReplacePreprocessorTokens(config, target.GetExternalLibraries(config)).strip(),
		useRuntimeDll=useRuntimeDll,
		runtimeLibrary=GetRuntimeLibraryToken(useRuntimeDll, isDebug),
		optimisation=GetOptimisationLevelString(optimisationLevel),
		warningLevel="Level{}".format(config.GetWarningLevel()),
		treatWarningsAsErrors=config.AreWarningsTreatedAsErrors(),
		fastMath=config.IsFastMathEnabled(),
		debugInformationFormat=debugInformationFormat,
		generateDebugInformation=isDebug or config.ShouldGenerateDebugSymbols(),
		extraCompilerFlags=exporter.ReplacePreprocessorTokens(config, exporter.GetExtraCompilerFlags()).strip(),
		extraLinkerFlags=extraLinkerFlags,
		delayLoadedDlls=target.GetDelayLoadedDlls(),
	)
