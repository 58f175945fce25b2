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
.. module:: target_types
	:synopsis: Target types and the table of per-type build traits consulted by the exporters.

.. moduleauthor:: Brandon Bare
"""

import collections


class TargetType(object):
	"""
	'enum' representing the kind of buildable unit a target produces.
	"""
	GuiApp = "GUIApp"
	ConsoleApp = "ConsoleApp"
	StaticLibrary = "StaticLibrary"
	DynamicLibrary = "DynamicLibrary"
	Vst = "VSTPlugIn"
	Vst3 = "VST3PlugIn"
	Aax = "AAXPlugIn"
	Rtas = "RTASPlugIn"
	AudioUnit = "AudioUnitPlugIn"
	AudioUnitV3 = "AudioUnitv3PlugIn"
	Standalone = "StandalonePlugIn"
	SharedCode = "SharedCodeTarget"
	Aggregate = "AggregateTarget"


class TargetFileType(object):
	"""
	'enum' representing the kind of binary a target type links into.
	"""
	Unknown = 0
	Executable = 1
	StaticLibrary = 2
	SharedLibrary = 3
	PluginBundle = 4


class DependencyPath(object):
	"""
	'enum' of the plugin SDK locations a target type may depend on. Values are the global dependency path ids.
	"""
	Vst3 = "vst3Path"
	Aax = "aaxPath"
	Rtas = "rtasPath"


TargetTraits = collections.namedtuple(
	"TargetTraits",
	[
		# Name shown in the solution and used in document file names.
		"displayName",
		"fileType",
		# Output file suffix, including the dot.
		"suffix",
		# Plugin format tag used for the per-format build defines, or None for non-plugin targets.
		"pluginFormat",
		# Suffix appended to wrapper source file names that belong to this target.
		"sourceSuffix",
		# Which SDK the type-specific settings below are relative to, or None.
		"sdkPath",
		# (define name, SDK-relative sub path) pairs added as quoted paths.
		"sdkDefines",
		# SDK-relative header search paths.
		"sdkSearchPaths",
		"extraLinkerFlags",
		"delayLoadedDlls",
		# True if the target is packaged as an AAX bundle by pre/post-build steps.
		"bundleSteps",
	]
)

_rtasSearchPaths = (
	"AlturaPorts/TDMPlugins/PluginLibrary/EffectClasses",
	"AlturaPorts/TDMPlugins/PluginLibrary/ProcessClasses",
	"AlturaPorts/TDMPlugins/PluginLibrary/ProcessClasses/Interfaces",
	"AlturaPorts/TDMPlugins/PluginLibrary/Utilities",
	"AlturaPorts/TDMPlugins/PluginLibrary/RTASP_Adapt",
	"AlturaPorts/TDMPlugins/PluginLibrary/CoreClasses",
	"AlturaPorts/TDMPlugins/PluginLibrary/Controls",
	"AlturaPorts/TDMPlugins/PluginLibrary/Meters",
	"AlturaPorts/TDMPlugins/PluginLibrary/ViewClasses",
	"AlturaPorts/TDMPlugins/PluginLibrary/DSPClasses",
	"AlturaPorts/TDMPlugins/PluginLibrary/Interfaces",
	"AlturaPorts/TDMPlugins/common",
	"AlturaPorts/TDMPlugins/common/Platform",
	"AlturaPorts/TDMPlugins/common/Macros",
	"AlturaPorts/TDMPlugins/SignalProcessing/Public",
	"AlturaPorts/TDMPlugIns/DSPManager/Interfaces",
	"AlturaPorts/SADriver/Interfaces",
	"AlturaPorts/DigiPublic/Interfaces",
	"AlturaPorts/DigiPublic",
	"AlturaPorts/Fic/Interfaces/DAEClient",
	"AlturaPorts/NewFileLibs/Cmn",
	"AlturaPorts/NewFileLibs/DOA",
	"AlturaPorts/AlturaSource/PPC_H",
	"AlturaPorts/AlturaSource/AppSupport",
	"AvidCode/AVX2sdk/AVX/avx2/avx2sdk/inc",
	"xplat/AVX/avx2/avx2sdk/inc",
)

_rtasDelayLoadedDlls = "DAE.dll; DigiExt.dll; DSI.dll; PluginLib.dll; " \
	"DSPManager.dll; DSPManager.dll; DSPManagerClientLib.dll; RTASClientLib.dll"


def _traits(displayName, fileType, suffix, pluginFormat=None, sourceSuffix=None, sdkPath=None, sdkDefines=(),
		sdkSearchPaths=(), extraLinkerFlags="", delayLoadedDlls="", bundleSteps=False):
	return TargetTraits(displayName, fileType, suffix, pluginFormat, sourceSuffix, sdkPath, sdkDefines,
		sdkSearchPaths, extraLinkerFlags, delayLoadedDlls, bundleSteps)


TARGET_TRAITS = collections.OrderedDict([
	(TargetType.GuiApp, _traits("App", TargetFileType.Executable, ".exe")),
	(TargetType.ConsoleApp, _traits("ConsoleApp", TargetFileType.Executable, ".exe")),
	(TargetType.StaticLibrary, _traits("Static Library", TargetFileType.StaticLibrary, ".lib")),
	(TargetType.DynamicLibrary, _traits("Dynamic Library", TargetFileType.SharedLibrary, ".dll")),
	(TargetType.Vst, _traits("VST", TargetFileType.PluginBundle, ".dll", pluginFormat="VST", sourceSuffix="_VST2")),
	(TargetType.Vst3, _traits(
		"VST3", TargetFileType.PluginBundle, ".vst3",
		pluginFormat="VST3",
		sourceSuffix="_VST3",
		sdkPath=DependencyPath.Vst3,
		sdkSearchPaths=("",),
	)),
	(TargetType.Aax, _traits(
		"AAX", TargetFileType.PluginBundle, ".aaxdll",
		pluginFormat="AAX",
		sourceSuffix="_AAX",
		sdkPath=DependencyPath.Aax,
		sdkDefines=(("Plugin_AAXLibs_path", "Libs"),),
		bundleSteps=True,
	)),
	(TargetType.Rtas, _traits(
		"RTAS", TargetFileType.PluginBundle, ".dpm",
		pluginFormat="RTAS",
		sourceSuffix="_RTAS",
		sdkPath=DependencyPath.Rtas,
		sdkDefines=(("Plugin_WinBag_path", "WinBag"),),
		sdkSearchPaths=_rtasSearchPaths,
		extraLinkerFlags="/FORCE:multiple",
		delayLoadedDlls=_rtasDelayLoadedDlls,
	)),
	(TargetType.AudioUnit, _traits("AU", TargetFileType.PluginBundle, ".component", pluginFormat="AU", sourceSuffix="_AU")),
	(TargetType.AudioUnitV3, _traits("AUv3 AppExtension", TargetFileType.PluginBundle, ".appex", pluginFormat="AUv3", sourceSuffix="_AUv3")),
	(TargetType.Standalone, _traits("Standalone Plugin", TargetFileType.Executable, ".exe", pluginFormat="Standalone", sourceSuffix="_Standalone")),
	(TargetType.SharedCode, _traits("Shared Code", TargetFileType.StaticLibrary, ".lib")),
	(TargetType.Aggregate, _traits("All", TargetFileType.Unknown, "")),
])

PLUGIN_TARGET_TYPES = [targetType for targetType, traits in TARGET_TRAITS.items() if traits.pluginFormat is not None]


def GetTraits(targetType):
	"""
	Look up the build traits for a target type.

	:param targetType: Target type
	:type targetType: str
	:return: Traits for the type
	:rtype: TargetTraits
	"""
	return TARGET_TRAITS[targetType]
