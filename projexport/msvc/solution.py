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
.. module:: solution
	:synopsis: Writes the .sln document listing every target project, the shared code dependency, the
		per-configuration build mappings and the file group hierarchy.

.. moduleauthor:: Brandon Bare
"""

import contextlib
import io

from .. import identity
from .._utils import RemoveDuplicates
from .._utils.file_proxy import FileProxy

VC_PROJECT_TYPE_GUID = "{8BC9CEB8-8B4A-11D0-8D11-00A0C91BC942}"
SOLUTION_FOLDER_TYPE_GUID = "{2150E333-8FDC-42A3-9474-1A3956D46DE8}"

SOLUTION_FILE_FORMAT_VERSION = "11.00"


class SolutionWriter(object):
	"""
	Line-oriented writer for solution documents. Sections are opened with a header line and closed with
	a matching "End" line, with everything in between indented by one tab.

	:param fileHandle: Text stream to write to
	:type fileHandle: io.StringIO
	"""
	def __init__(self, fileHandle):
		self.fileHandle = fileHandle
		self.indentation = 0

	def Line(self, text): # pylint: disable=missing-docstring
		self.fileHandle.write("{}{}\r\n".format("\t" * self.indentation, text))

	@contextlib.contextmanager
	def Section(self, sectionName, headerSuffix): # pylint: disable=missing-docstring
		self.Line("{}{}".format(sectionName, headerSuffix))

		self.indentation += 1

		try:
			yield

		finally:
			self.indentation -= 1

			self.Line("End{}".format(sectionName))


def _writeProjectDependencies(writer, exporter):
	sharedCode = exporter.GetSharedCodeTarget()
	projectName = exporter.project.title

	for target in exporter.targets:
		data = "(\"{}\") = \"{} ({})\", \"{}\", \"{}\"".format(
			VC_PROJECT_TYPE_GUID,
			projectName,
			target.GetName(),
			target.GetVcxProjFileName(),
			target.GetProjectGuid(),
		)

		with writer.Section("Project", data):
			if sharedCode is not None and not target.IsSharedCode():
				with writer.Section("ProjectSection", "(ProjectDependencies) = postProject"):
					writer.Line("{0} = {0}".format(sharedCode.GetProjectGuid()))


def _writeGroupFolder(writer, exporter, group, nestedProjects, parentGuid):
	assert group.IsGroup()

	groupGuid = identity.CreateGuid(group.itemId)

	with writer.Section("Project", "(\"{}\") = \"{}\", \"{}\", \"{}\"".format(SOLUTION_FOLDER_TYPE_GUID, group.name, group.name, groupGuid)):
		files = [child for child in group.children if child.IsFile()]
		if files:
			with writer.Section("ProjectSection", "(SolutionItems) = preProject"):
				for child in files:
					path = exporter.RebaseFromProjectFolderToBuildTarget(child.GetRelativePath()).ToWindowsStyle()
					writer.Line("{0} = {0}".format(path))

	# Child folders are declared before this folder is recorded as their parent.
	for child in group.children:
		if child.IsGroup():
			_writeGroupFolder(writer, exporter, child, nestedProjects, groupGuid)

	if parentGuid:
		nestedProjects.append("{} = {}".format(groupGuid, parentGuid))


def _writeSolutionFolders(writer, exporter, nestedProjects):
	allGroups = exporter.project.GetAllGroups()

	# A lone root group is skipped so its children appear at the top of the solution.
	if len(allGroups) == 1:
		groups = allGroups[0].children
	else:
		groups = allGroups

	for group in groups:
		if group.IsGroup() and group.children:
			_writeGroupFolder(writer, exporter, group, nestedProjects, "")


def CreateSolutionContents(exporter):
	"""
	Build the solution document text.

	:param exporter: Owning exporter
	:type exporter: projexport.msvc.MsvcExporter
	:return: Solution text with CRLF line endings
	:rtype: str
	"""
	out = io.StringIO()
	writer = SolutionWriter(out)
	nestedProjects = []

	writer.Line("") # Required empty line.
	writer.Line("Microsoft Visual Studio Solution File, Format Version {}".format(SOLUTION_FILE_FORMAT_VERSION))
	writer.Line("# {}".format(exporter.versionInfo.displayName))

	_writeProjectDependencies(writer, exporter)
	_writeSolutionFolders(writer, exporter, nestedProjects)

	configNames = RemoveDuplicates(config.CreateMsvcConfigName() for config in exporter.configs)

	with writer.Section("Global", ""):
		with writer.Section("GlobalSection", "(SolutionConfigurationPlatforms) = preSolution"):
			for configName in configNames:
				writer.Line("{0} = {0}".format(configName))

		with writer.Section("GlobalSection", "(ProjectConfigurationPlatforms) = postSolution"):
			for target in exporter.targets:
				for configName in configNames:
					writer.Line("{0}.{1}.ActiveCfg = {1}".format(target.GetProjectGuid(), configName))
					writer.Line("{0}.{1}.Build.0 = {1}".format(target.GetProjectGuid(), configName))

		with writer.Section("GlobalSection", "(SolutionProperties) = preSolution"):
			writer.Line("HideSolutionNode = FALSE")

		if nestedProjects:
			with writer.Section("GlobalSection", "(NestedProjects) = preSolution"):
				for line in nestedProjects:
					writer.Line(line)

	return out.getvalue()


def WriteSolutionFile(exporter):
	"""
	Write the solution document if it changed.

	Visual Studio solution files need to be UTF-8 with the byte order marker; the version selector refuses
	to pick the right IDE version without it.

	:param exporter: Owning exporter
	:type exporter: projexport.msvc.MsvcExporter
	:return: True if the file was written
	:rtype: bool
	"""
	data = CreateSolutionContents(exporter).encode("utf-8-sig")
	return FileProxy(exporter.GetSolutionFile(), data).Check()
