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
.. module:: properties
	:synopsis: Write-only property registration used by exporters to describe their editable settings.

.. moduleauthor:: Jaedyn K. Draper
"""

import collections

Property = collections.namedtuple("Property", ["valueCell", "label", "choices", "description"])


class ValueCell(object):
	"""
	Reference to a single key inside a settings tree.

	:param settings: Settings tree holding the value
	:type settings: projexport.model.SettingsTree
	:param key: Setting key
	:type key: str
	"""
	def __init__(self, settings, key):
		self.settings = settings
		self.key = key

	def Get(self, default=None):
		"""
		:return: The current value
		:rtype: any
		"""
		return self.settings.Get(self.key, default)

	def Set(self, value):
		"""
		Store a new value.

		:param value: The value
		:type value: any
		"""
		self.settings.Save(self.key, value)


class PropertyListBuilder(object):
	"""
	Collects property descriptions. The exporters only ever add to this list; whatever presents the
	properties to a user is responsible for reading and writing the value cells.
	"""
	def __init__(self):
		self.properties = []

	def Add(self, valueCell, label, choices=None, description=""):
		"""
		Register a property.

		:param valueCell: Cell the property edits
		:type valueCell: ValueCell
		:param label: Display label
		:type label: str
		:param choices: (display name, stored value) pairs for choice properties, None for free text or booleans
		:type choices: list[tuple[str, any]] or None
		:param description: Description of what the property does
		:type description: str
		"""
		self.properties.append(Property(valueCell, label, list(choices) if choices is not None else None, description))

	def GetLabels(self):
		"""
		:return: Labels of every registered property, in registration order
		:rtype: list[str]
		"""
		return [prop.label for prop in self.properties]

	def Find(self, label):
		"""
		:return: The property with the given label, or None
		:rtype: Property or None
		"""
		for prop in self.properties:
			if prop.label == label:
				return prop
		return None
