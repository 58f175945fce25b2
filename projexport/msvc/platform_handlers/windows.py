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
.. module:: windows
	:synopsis: Visual Studio platform handlers for 32-bit and 64-bit Windows configurations.

.. moduleauthor:: Brandon Bare
"""

from . import VsBasePlatformHandler


class VsBaseWindowsPlatformHandler(VsBasePlatformHandler):
	"""
	Visual Studio platform handler as a base class, containing project writing functionality for all Windows platforms.
	"""
	@staticmethod
	def GetVisualStudioPlatformName():
		"""
		Get the name that is recognizeable by Visual Studio for the current platform.

		:return: Visual Studio platform name.
		:rtype: str
		"""
		raise NotImplementedError

	@staticmethod
	def GetTargetMachine():
		"""
		:return: The explicit linker TargetMachine value for this platform, or None to use the toolchain default
		:rtype: str or None
		"""
		return None

	@staticmethod
	def SupportsEditAndContinue():
		"""
		:return: True if debug builds on this platform can use the edit-and-continue debug format
		:rtype: bool
		"""
		return False

	def WriteConfigPropertyGroup(self, parentXmlNode, vsConfig, configurationType):
		"""
		Write the "Configuration" property group for this platform and return it so the caller can fill it in.

		:param parentXmlNode: Parent project XML node.
		:type parentXmlNode: xml.etree.ElementTree.SubElement

		:param vsConfig: Visual Studio configuration being written.
		:type vsConfig: str

		:param configurationType: Application, StaticLibrary or DynamicLibrary
		:type configurationType: str

		:return: The new property group node
		:rtype: xml.etree.ElementTree.Element
		"""
		propertyGroupXmlNode = self._addXmlNode(parentXmlNode, "PropertyGroup")
		self.SetConditionAttribute(propertyGroupXmlNode, vsConfig)
		propertyGroupXmlNode.set("Label", "Configuration")

		configTypeNode = self._addXmlNode(propertyGroupXmlNode, "ConfigurationType")
		configTypeNode.text = configurationType

		useOfMfcNode = self._addXmlNode(propertyGroupXmlNode, "UseOfMfc")
		useOfMfcNode.text = "false"

		return propertyGroupXmlNode


class VsWindowsX86PlatformHandler(VsBaseWindowsPlatformHandler):
	"""
	Visual Studio x86 platform handler implementation.
	"""
	@staticmethod
	def GetVisualStudioPlatformName():
		"""
		Get the name that is recognizeable by Visual Studio for the current platform.

		:return: Visual Studio platform name.
		:rtype: str
		"""
		return "Win32"

	@staticmethod
	def GetTargetMachine():
		return "MachineX86"

	@staticmethod
	def SupportsEditAndContinue():
		return True


class VsWindowsX64PlatformHandler(VsBaseWindowsPlatformHandler):
	"""
	Visual Studio x64 platform handler implementation.
	"""
	@staticmethod
	def GetVisualStudioPlatformName():
		"""
		Get the name that is recognizeable by Visual Studio for the current platform.

		:return: Visual Studio platform name.
		:rtype: str
		"""
		return "x64"


def GetPlatformHandler(config):
	"""
	Pick the platform handler matching a configuration's architecture.

	:param config: Build configuration
	:type config: projexport.msvc.configuration.MsvcBuildConfiguration
	:return: Platform handler
	:rtype: VsBaseWindowsPlatformHandler
	"""
	if config.Is64Bit():
		return VsWindowsX64PlatformHandler()
	return VsWindowsX86PlatformHandler()
