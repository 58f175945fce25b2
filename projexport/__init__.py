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
.. package:: projexport
	:synopsis: IDE project-file exporter. Turns an in-memory project description into
		Visual Studio project, solution and resource files.

.. moduleauthor:: Jaedyn K. Draper, Brandon M. Bare
"""

import os

__author__ = "Jaedyn K. Draper, Brandon M. Bare"
__copyright__ = 'Copyright (C) 2012-2018 Jaedyn K. Draper'
__credits__ = ["Jaedyn K. Draper", "Brandon M. Bare"]
__license__ = 'MIT'

__maintainer__ = "Jaedyn K. Draper"
__email__ = "jaedyn.pypi@jaedyn.co"
__status__ = "Development"

try:
	with open(os.path.join(os.path.dirname(__file__), "version"), "r") as versionFile:
		__version__ = versionFile.read().strip()
except IOError:
	__version__ = "ERR_VERSION_FILE_MISSING"


class ExportFailureException(Exception):
	"""
	Notify that an export run could not complete. Raised for unrecoverable conditions such as a
	project with no emittable targets or a generated file that could not be written.

	:param info: Details about the failure
	:type info: str
	"""
	def __init__(self, info):
		Exception.__init__(self)
		self.info = info

	def __str__(self):
		return self.info

	def __repr__(self):
		return "ExportFailureException({!r})".format(self.info)


class ProjectType(object):
	"""
	'enum' representing the kind of project being exported
	"""
	GuiApplication = "guiapp"
	ConsoleApplication = "consoleapp"
	StaticLibrary = "library"
	DynamicLibrary = "dll"
	AudioPlugin = "audioplug"
