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
.. module:: log
	:synopsis: Colored console logging with an optional log file mirror

.. moduleauthor:: Jaedyn K. Draper
"""

import re
import sys

from ._utils import terminfo, shared_globals

_markupSplit = re.compile(R"(<&\w*>)(.*?)(</&>|$)")
_markupOpen = re.compile(R"<&(\w*)>")

def _writeLog(color, level, msg):
	useColor = shared_globals.colorSupported
	if useColor:
		terminfo.TermInfo.SetColor(color)
	sys.stdout.write("{}: ".format(level))
	if useColor:
		sys.stdout.flush()
		terminfo.TermInfo.ResetColor()

	for piece in _markupSplit.split(msg):
		match = _markupOpen.match(piece)
		if match:
			if useColor:
				sys.stdout.flush()
				terminfo.TermInfo.SetColor(getattr(terminfo.TermColor, match.group(1)))
		elif piece == "</&>":
			if useColor:
				sys.stdout.flush()
				terminfo.TermInfo.ResetColor()
		else:
			sys.stdout.write(piece)

	sys.stdout.write("\n")
	sys.stdout.flush()
	if useColor:
		terminfo.TermInfo.ResetColor()

	if shared_globals.logFile:
		shared_globals.logFile.write("{0}: {1}\n".format(level, _markupOpen.sub("", msg).replace("</&>", "")))


def _logMsg(color, level, msg, quietThreshold):
	"""Print a message to stdout"""
	if shared_globals.verbosity < quietThreshold:
		if isinstance(msg, bytes):
			msg = msg.decode("UTF-8")
		_writeLog(color, level, msg)


def _formatMsg(msg, *args, **kwargs):
	if not isinstance(msg, (bytes, str)):
		return repr(msg)
	elif args or kwargs:
		return msg.format(*args, **kwargs)
	return msg


def Error(msg, *args, **kwargs):
	"""
	Log an error message

	:param msg: Text to log
	:type msg: str
	:param args: Args to str.format
	:type args: any
	:param kwargs: args to str.format
	:type kwargs: any
	"""
	msg = _formatMsg(msg, *args, **kwargs)
	_logMsg(terminfo.TermColor.RED, "ERROR", msg, 3)
	shared_globals.errors.append(msg)


def Warn(msg, *args, **kwargs):
	"""
	Log a warning

	:param msg: Text to log
	:type msg: str
	:param args: Args to str.format
	:type args: any
	:param kwargs: args to str.format
	:type kwargs: any
	"""
	msg = _formatMsg(msg, *args, **kwargs)
	_logMsg(terminfo.TermColor.YELLOW, "WARN", msg, 3)
	shared_globals.warnings.append(msg)


def Info(msg, *args, **kwargs):
	"""
	Log general info. This info only appears with -v specified.

	:param msg: Text to log
	:type msg: str
	:param args: Args to str.format
	:type args: any
	:param kwargs: args to str.format
	:type kwargs: any
	"""
	msg = _formatMsg(msg, *args, **kwargs)
	_logMsg(terminfo.TermColor.CYAN, "INFO", msg, 1)


def Build(msg, *args, **kwargs):
	"""
	Log info related to writing exported files

	:param msg: Text to log
	:type msg: str
	:param args: Args to str.format
	:type args: any
	:param kwargs: args to str.format
	:type kwargs: any
	"""
	msg = _formatMsg(msg, *args, **kwargs)
	_logMsg(terminfo.TermColor.MAGENTA, "BUILD", msg, 2)


def Test(msg, *args, **kwargs):
	"""
	Log info related to testing - used by the unit test framework

	:param msg: Text to log
	:type msg: str
	:param args: Args to str.format
	:type args: any
	:param kwargs: args to str.format
	:type kwargs: any
	"""
	msg = _formatMsg(msg, *args, **kwargs)
	_logMsg(terminfo.TermColor.MAGENTA, "TEST", msg, 2)
