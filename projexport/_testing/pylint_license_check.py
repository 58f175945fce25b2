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
.. module:: pylint_license_check
	:synopsis: Pylint custom checker for the license header and module docstrings every source file must carry

.. moduleauthor:: Jaedyn K. Draper
"""

import os
import re

from pylint.checkers import BaseRawFileChecker

MANDATORY_COPYRIGHT_HEADER = R"""^(# -\*- coding: utf-8 -\*-

)?# Copyright \(C\) 20\d\d [^\n]+
#
# Permission is hereby granted, free of charge, to any person obtaining
# a copy of this software and associated documentation files \(the "Software"\),
# to deal in the Software without restriction, including without limitation
# the rights to use, copy, modify, merge, publish, distribute, sublicense,
# and/or sell copies of the Software, and to permit persons to whom the
# Software is furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software\.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT\. IN NO EVENT SHALL
# THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE\.""".replace("\r", "")

MESSAGE_SYMBOLS = (
	"missing-license-header",
	"module-name-missing-in-docstring",
	"package-name-missing-in-docstring",
)


class HeaderCheck(BaseRawFileChecker):
	"""Checks the license header and the .. module:: / .. package:: docstring markers"""

	# pylint: disable=invalid-name

	name = "projexport_license_check"
	msgs = {
		"E9901": (
			"Missing license header",
			"missing-license-header",
			"missing-license-header"
		),
		"E9903": (
			"All modules must include a docstring containing .. module:: <module_name>",
			"module-name-missing-in-docstring",
			"module-name-missing-in-docstring"
		),
		"E9904": (
			"__init__.py in a package must include a docstring containing .. package:: <package_name>",
			"package-name-missing-in-docstring",
			"package-name-missing-in-docstring"
		)
	}
	options = ()

	def process_module(self, node):
		"""
		Process a module. The module's content is accessible via node.stream().

		:param node: Module being processed.
		:type node: :class:`astroid.nodes.Module`
		"""
		with node.stream() as stream:
			txt = b"".join(stream).decode("UTF-8")

		txt = txt.replace("\r", "")

		if not re.match(MANDATORY_COPYRIGHT_HEADER, txt):
			self.add_message("missing-license-header", line=0)

		package = os.path.basename(os.path.dirname(node.file))
		moduleName = os.path.splitext(os.path.basename(node.file))[0]
		if moduleName == "__init__":
			if ".. package:: {}".format(package) not in txt:
				self.add_message("package-name-missing-in-docstring", line=0)
		elif ".. module:: {}".format(moduleName) not in txt:
			self.add_message("module-name-missing-in-docstring", line=0)


def register(linter):  # pylint: disable=invalid-name
	"""required method to auto register this checker"""
	linter.register_checker(HeaderCheck(linter))
