####################################
#
# Program settings.  Each value can be overridden from the environment,
# or from a .env file in the working directory.
#
#   HLS_LOG_FILE         file the program log is written to
#   HLS_LOG_LEVEL        DEBUG, INFO, WARNING, ERROR
#   HLS_REQUEST_TIMEOUT  seconds to wait on a web server
#
####################################

import os

from dotenv import find_dotenv, load_dotenv

DEFAULT_LOG_FILE = 'hlsvalidator.log'
DEFAULT_LOG_LEVEL = 'INFO'
DEFAULT_REQUEST_TIMEOUT = 10.0

##Words that end the command line loop (compared lower case)
EXIT_COMMANDS = ('quit', 'end')

LOG_FILE = DEFAULT_LOG_FILE
LOG_LEVEL = DEFAULT_LOG_LEVEL
REQUEST_TIMEOUT = DEFAULT_REQUEST_TIMEOUT


def getTimeout(value):
	try:
		timeout = float(value)
	except (TypeError, ValueError):
		return DEFAULT_REQUEST_TIMEOUT
	if timeout <= 0:
		return DEFAULT_REQUEST_TIMEOUT
	return timeout


def readEnvironment():
	global LOG_FILE, LOG_LEVEL, REQUEST_TIMEOUT
	LOG_FILE = os.environ.get('HLS_LOG_FILE', DEFAULT_LOG_FILE)
	LOG_LEVEL = os.environ.get('HLS_LOG_LEVEL', DEFAULT_LOG_LEVEL).upper()
	REQUEST_TIMEOUT = getTimeout(os.environ.get('HLS_REQUEST_TIMEOUT', DEFAULT_REQUEST_TIMEOUT))


def loadSettings():
	#Called once by the program at start up; values already in the
	#environment win over the ones in .env
	load_dotenv(find_dotenv(usecwd=True))
	readEnvironment()


readEnvironment()
