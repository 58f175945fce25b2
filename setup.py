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
.. module:: setup
	:synopsis: Setup script for projexport.

.. moduleauthor:: Zoe Bare
"""

from setuptools import setup

with open("projexport/version", "r") as f:
	projexportVersion = f.read().strip()

setup(
	name = "projexport",
	version = projexportVersion,
	packages = [
		"projexport",
		"projexport._testing",
		"projexport._utils",
		"projexport._zz_testing",
		"projexport.msvc",
		"projexport.msvc.platform_handlers",
	],
	package_data = {"projexport": ["version"]},
	include_package_data = True,
	entry_points = {
		"console_scripts": ["projexport = projexport.__main__:Main"],
	},
	python_requires = ">=3.6",
	extras_require = {
		"test": ["pylint>=2.14"],
	},
	author = "Jaedyn K. Draper",
	author_email = "jaedyn.pypi@jaedyn.co",
	description = "Visual Studio project and solution exporter",
	long_description = """projexport turns a JSON project description into Visual Studio .vcxproj projects, a .sln solution, and the Windows icon and resource script that go with them. """,
	classifiers = [
		"Development Status :: 2 - Pre-Alpha",
		"Environment :: Console",
		"Intended Audience :: Developers",
		"License :: OSI Approved :: MIT License",
		"Natural Language :: English",
		"Operating System :: Microsoft :: Windows",
		"Operating System :: MacOS :: MacOS X",
		"Operating System :: POSIX :: Linux",
		"Programming Language :: C",
		"Programming Language :: C++",
		"Programming Language :: Python :: 3",
		"Topic :: Software Development :: Build Tools"
	]
)
