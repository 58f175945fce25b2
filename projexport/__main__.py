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
.. module:: __main__
	:synopsis: Command-line entry point: python -m projexport <project.json>

.. moduleauthor:: Jaedyn K. Draper
"""

import argparse
import sys

from . import ExportFailureException, log, __version__
from ._utils import shared_globals, terminfo
from .loader import CreateDefaultExporterSettings, LoadProject
from .msvc import MsvcExporter, VERSION_INFO


def _getExporterName(version):
	return "VS{}".format(version)


def _parseArgs(argv):
	parser = argparse.ArgumentParser(
		prog="projexport",
		description="Generate Visual Studio projects and solutions from a project description.",
	)

	parser.add_argument("--version", action="version", version="projexport {}".format(__version__))
	parser.add_argument("project", help="Path of the JSON project description")
	parser.add_argument(
		"--vs-version", action="append", dest="vsVersions",
		help="Visual Studio version(s) to export: {}. (May be specified multiple times.) Defaults to every exporter "
			"declared in the project, or the newest version if it declares none.".format(", ".join(VERSION_INFO)),
	)

	group = parser.add_mutually_exclusive_group()
	group.add_argument('-v', '--verbose', action="store_const", const=0, dest="verbosity",
		help="Verbose. Enables additional INFO-level logging.", default=1)
	group.add_argument('-q', '--quiet', action="store_const", const=2, dest="verbosity",
		help="Quiet. Disables all logging except for WARN and ERROR.", default=1)
	group.add_argument('-qq', '--very-quiet', action="store_const", const=3, dest="verbosity",
		help="Very quiet. Disables all logging.", default=1)

	parser.add_argument('--force-color', help="Force color on or off.",
		action="store", choices=["on", "off"], default=None, const="on", nargs="?")
	parser.add_argument("--log-file", dest="logFile", help="Also write log output to this file")

	return parser.parse_args(argv)


def _getVersionsToExport(args, project):
	if args.vsVersions:
		return args.vsVersions

	declared = [version for version in VERSION_INFO if _getExporterName(version) in project.exporters]
	if declared:
		return declared

	return [max(VERSION_INFO.keys())]


def Export(args):
	"""
	Load the project and run every requested exporter.

	:param args: Parsed command-line arguments
	:type args: argparse.Namespace
	"""
	shared_globals.exportedFiles = []
	project = LoadProject(args.project)

	for version in _getVersionsToExport(args, project):
		exporterSettings = project.exporters.get(_getExporterName(version))
		if exporterSettings is None:
			log.Info("Project declares no {} exporter, using default configurations", _getExporterName(version))
			exporterSettings = CreateDefaultExporterSettings()

		MsvcExporter(project, exporterSettings, version).Create()


def Main(argv=None):
	"""
	Run the exporter from the command line.

	:param argv: Arguments, defaulting to sys.argv
	:type argv: list[str] or None
	:return: Process exit code
	:rtype: int
	"""
	args = _parseArgs(argv)

	shared_globals.verbosity = args.verbosity

	if args.force_color == "on":
		shared_globals.colorSupported = True
	elif args.force_color == "off":
		shared_globals.colorSupported = False
	else:
		shared_globals.colorSupported = terminfo.TermInfo.SupportsColor()

	logFile = None
	if args.logFile:
		logFile = shared_globals.logFile = open(args.logFile, "w")

	try:
		Export(args)
	except ExportFailureException as e:
		log.Error("Export failed: {}", e)
		return 1
	finally:
		if logFile is not None:
			shared_globals.logFile = None
			logFile.close()

	log.Build("Export finished, {} file(s) written", len(shared_globals.exportedFiles))
	return 0


if __name__ == "__main__":
	sys.exit(Main())
