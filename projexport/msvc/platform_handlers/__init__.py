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
.. package:: platform_handlers
	:synopsis: Platform handlers for the Visual Studio exporter. Each handler knows the platform name
		Visual Studio uses for an architecture and writes the configuration nodes keyed on it.

.. moduleauthor:: Brandon Bare
"""

import abc

from xml.etree import ElementTree as ET


def GetConditionString(vsBuildTarget):
	"""
	:return: MSBuild condition selecting a "Config|Platform" pair
	:rtype: str
	"""
	return "'$(Configuration)|$(Platform)'=='{}'".format(vsBuildTarget)


class VsBasePlatformHandler(metaclass=abc.ABCMeta):
	"""
	Visual Studio platform handler base class.
	"""
	def __init__(self):
		self._addXmlNode = ET.SubElement

	@staticmethod
	@abc.abstractmethod
	def GetVisualStudioPlatformName():
		"""
		Get the name that is recognizeable by Visual Studio for the current platform.

		:return: Visual Studio platform name.
		:rtype: str
		"""
		pass

	def GetBuildTarget(self, vsConfig):
		"""
		:param vsConfig: Visual Studio configuration name
		:type vsConfig: str
		:return: The composite "Config|Platform" key
		:rtype: str
		"""
		return "{}|{}".format(vsConfig, self.GetVisualStudioPlatformName())

	def SetConditionAttribute(self, xmlNode, vsConfig):
		"""
		Restrict an XML node to this platform and configuration.

		:param xmlNode: Node to restrict
		:type xmlNode: xml.etree.ElementTree.Element
		:param vsConfig: Visual Studio configuration name
		:type vsConfig: str
		"""
		xmlNode.set("Condition", GetConditionString(self.GetBuildTarget(vsConfig)))

	def WriteProjectConfiguration(self, parentXmlNode, vsConfig):
		"""
		Write the project configuration nodes for this platform.

		:param parentXmlNode: Parent project XML node.
		:type parentXmlNode: xml.etree.ElementTree.SubElement

		:param vsConfig: Visual Studio configuration being written.
		:type vsConfig: str
		"""
		projectConfigXmlNode = self._addXmlNode(parentXmlNode, "ProjectConfiguration")
		projectConfigXmlNode.set("Include", self.GetBuildTarget(vsConfig))

		configXmlNode = self._addXmlNode(projectConfigXmlNode, "Configuration")
		configXmlNode.text = vsConfig

		platformXmlNode = self._addXmlNode(projectConfigXmlNode, "Platform")
		platformXmlNode.text = self.GetVisualStudioPlatformName()

	@abc.abstractmethod
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
		pass
