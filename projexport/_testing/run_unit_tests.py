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
.. module:: run_unit_tests
	:synopsis: Import this file and call RunTests() to run projexport's unit tests.
		Ensure cwd is one directory above the projexport package.
"""

import fnmatch
import sys
import unittest

from .. import log
from .._utils import shared_globals, terminfo
from . import testcase


def _filterTests(suite, include, exclude):
	filtered = unittest.TestSuite()
	for test in suite:
		if isinstance(test, unittest.TestSuite):
			filtered.addTests(_filterTests(test, include, exclude))
			continue

		# pylint: disable=protected-access
		simpleTestId = "{}.{}".format(test.__class__.__name__, getattr(test, "_testMethodName", ""))

		if include and not any(fnmatch.fnmatch(simpleTestId, inc) for inc in include):
			log.Test("Excluding test {} due to no include match", simpleTestId)
			continue

		if any(fnmatch.fnmatch(simpleTestId, exc) for exc in exclude):
			log.Test("Excluding test {} due to exclude match", simpleTestId)
			continue

		filtered.addTest(test)
	return filtered


def RunTests(include=None, exclude=None):
	"""
	Run all unit tests.
	Must be executed with current working directory being a directory that contains the projexport package.

	:param include: fnmatch filters in the form "TestClass.testMethod"; only matching tests run
	:type include: list[str]
	:param exclude: fnmatch filters for tests to skip
	:type exclude: list[str]
	:return: 0 if successful, 1 if not
	:rtype: int
	"""
	shared_globals.colorSupported = terminfo.TermInfo.SupportsColor()
	tests = unittest.defaultTestLoader.discover("projexport", "*_test.py", ".")
	tests = _filterTests(tests, include or [], exclude or [])

	testRunner = testcase.TestRunner(xmlfile="result.xml", stream=sys.stdout, verbosity=0)
	result = testRunner.run(tests)
	return 0 if result.wasSuccessful() else 1
