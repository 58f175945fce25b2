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
.. module:: testcase
	:synopsis: Thin wrapper around python unittest that adds some extra information (mostly logging in setUp)
		and helpers for tests that generate files.

.. moduleauthor:: Jaedyn K. Draper
"""

import os
import shutil
import sys
import tempfile
import time
import unittest

from xml.etree import ElementTree
from xml.dom import minidom

from .. import log
from .._utils import shared_globals

MSBUILD_NAMESPACE = "{http://schemas.microsoft.com/developer/msbuild/2003}"


class TestCase(unittest.TestCase):
	"""
	Thin wrapper around python unittest to provide more details on test progress
	"""
	_runTestCases = set()
	_currentTestCase = None
	_totalSuccess = 0
	_totalFail = 0

	def __init__(self, methodName="runTest"):
		super(TestCase, self).__init__(methodName)
		self.success = True

	def run(self, result=None):
		"""
		Runs the test suite.

		:param result: optional test result
		:type result: unittest.TestResult
		"""
		if self.__class__.__name__ not in TestCase._runTestCases:
			TestCase.PrintSingleResult()
			TestCase._runTestCases.add(self.__class__.__name__)
			TestCase._currentTestCase = [self.__class__.__name__, 0, 0]
			log.Test("RUNNING TEST SUITE: <&CYAN>{}</&>", self.__class__.__name__)

		log.Test("   Running test:	 {}.<&CYAN>{}</&> ...", self.__class__.__name__, self._testMethodName)
		unittest.TestCase.run(self, result)
		if self.success:
			log.Test("	  ... <&DGREEN>[</&><&GREEN>Success!</&><&DGREEN>]")
			TestCase._currentTestCase[1] += 1
			TestCase._totalSuccess += 1
		else:
			log.Test("	  ... <&DRED>[</&><&RED>Failed!</&><&DRED>]")
			TestCase._currentTestCase[2] += 1
			TestCase._totalFail += 1

	def TestName(self):
		"""Get the test method name for this test"""
		return self._testMethodName

	def TestDoc(self):
		"""Get the docstring attached to this test"""
		return self._testMethodDoc

	def CreateTempDir(self):
		"""
		Create a scratch directory that is removed when the test finishes.

		:return: Absolute path of the directory
		:rtype: str
		"""
		tempDir = tempfile.mkdtemp(prefix="projexport_test_")
		self.addCleanup(shutil.rmtree, tempDir, True)

		# Written file bookkeeping is global; keep each test's view of it separate.
		oldExportedFiles = shared_globals.exportedFiles
		shared_globals.exportedFiles = []

		def _restore():
			shared_globals.exportedFiles = oldExportedFiles

		self.addCleanup(_restore)
		return tempDir

	@staticmethod
	def ParseMsBuildXml(data):
		"""
		Parse a generated MSBuild document.

		:param data: Document bytes
		:type data: bytes
		:return: Root element
		:rtype: xml.etree.ElementTree.Element
		"""
		return ElementTree.fromstring(data)

	@staticmethod
	def FindAllMsBuild(node, path):
		"""
		Find elements in an MSBuild document by a slash-separated tag path, without spelling out the namespace.

		:param node: Element to search from
		:type node: xml.etree.ElementTree.Element
		:param path: Tag path such as "ItemDefinitionGroup/ClCompile"
		:type path: str
		:return: Matching elements
		:rtype: list[xml.etree.ElementTree.Element]
		"""
		return node.findall("/".join(MSBUILD_NAMESPACE + tag for tag in path.split("/")))

	@staticmethod
	def PrintSingleResult():
		"""
		Print the result of the last test suite, if any have been run
		"""
		if TestCase._currentTestCase is not None:
			txt = "{} <&GREEN>{}</&> test{} succeeded".format(
				TestCase._currentTestCase[0],
				TestCase._currentTestCase[1],
				"s" if TestCase._currentTestCase[1] != 1 else ""
			)
			if TestCase._currentTestCase[2] > 0:
				txt += ", <&RED>{}</&> failed".format(TestCase._currentTestCase[2])
			else:
				txt += "!"
			txt += "\n----------------------------------------------------------------------"
			log.Test(txt)

	@staticmethod
	def PrintOverallResult():
		"""
		Print the overall result of the entire unit test run
		"""
		txt = "Unit test results: <&GREEN>{}</&> test{} succeeded".format(
			TestCase._totalSuccess,
			"s" if TestCase._totalSuccess != 1 else ""
		)
		if TestCase._totalFail > 0:
			txt += ", <&RED>{}</&> failed".format(TestCase._totalFail)
		else:
			txt += "!"
		log.Test(txt)


class TestResult(unittest.TextTestResult):
	"""
	Thin wrapper of unittest.TextTestResult to print out a little more info at the start and end of a test run

	:param xmlfile: File to store the result xml data in
	:type xmlfile: str
	For the other parameters, see unittest.TextTestResult
	"""
	def __init__(self, stream, descriptions, verbosity, xmlfile=None):
		super(TestResult, self).__init__(stream, descriptions, verbosity)
		self.testList = {}
		self.timer = 0
		self.xmlfile = xmlfile

	def startTestRun(self):
		"""
		Start running the test suite
		"""
		sys.stdout.write("----------------------------------------------------------------------\n")

	def stopTestRun(self):
		"""
		Stop running the test suite and write the junit-style result file
		"""
		TestCase.PrintSingleResult()
		TestCase.PrintOverallResult()
		if not self.xmlfile:
			return

		failureDict = dict(self.failures)
		errorDict = dict(self.errors)
		skipDict = dict(self.skipped)
		root = ElementTree.Element("testsuites")
		add = ElementTree.SubElement

		suites = {}

		for test, testTime in self.testList.items():
			suites.setdefault(test.__class__.__name__, {})[test] = testTime

		for suiteName, tests in suites.items():
			suiteTime = sum(tests.values())

			suite = add(
				root,
				"testsuite",
				name=suiteName,
				tests=str(len(tests)),
				errors=str(len([test for test in tests if test in errorDict])),
				failures=str(len([test for test in tests if test in failureDict])),
				skipped=str(len([test for test in tests if test in skipDict])),
				time="{:.3f}".format(suiteTime)
			)

			for test, testTime in tests.items():
				case = add(suite, "testcase", classname="{}.{}".format(suiteName, test.TestName()), name=str(test.TestDoc()), time="{:.3f}".format(testTime))
				if test in failureDict:
					add(case, "failure").text = failureDict[test]
				if test in errorDict:
					add(case, "error").text = errorDict[test]
				if test in skipDict:
					add(case, "skipped").text = skipDict[test]

		with open(self.xmlfile, "w") as f:
			f.write(minidom.parseString(ElementTree.tostring(root)).toprettyxml("\t", "\n"))

	def startTest(self, test):
		"""
		Start a single test

		:param test: The test to start
		:type test: TestCase
		"""
		super(TestResult, self).startTest(test)
		self.timer = time.time()

	def stopTest(self, test):
		"""
		Stop a single test

		:param test: The test to stop
		:type test: TestCase
		"""
		super(TestResult, self).stopTest(test)
		if isinstance(test, TestCase):
			self.testList[test] = time.time() - self.timer

	def addError(self, test, err):
		super(TestResult, self).addError(test, err)
		log.Error(self.errors[-1][1])
		test.success = False

	def addFailure(self, test, err):
		super(TestResult, self).addFailure(test, err)
		log.Error(self.failures[-1][1])
		test.success = False

	def printErrors(self):
		"""
		Print errors. (Or in this case, don't. We did it earlier.)
		"""
		pass


class TestRunner(unittest.TextTestRunner):
	"""
	Thin wrapper around TextTestRunner to allow passing an xml file to the result

	:param xmlfile: File to store the result xml data in
	:type xmlfile: str
	For the other parameters, see unittest.TextTestRunner
	"""
	resultclass = TestResult

	def __init__(self, xmlfile="result.xml", *args, **kwargs):
		super(TestRunner, self).__init__(*args, **kwargs)
		self.xmlfile = xmlfile

	def _makeResult(self):
		return self.resultclass(self.stream, self.descriptions, self.verbosity, self.xmlfile)
