####################################
#
# HLS Hypertext Live Streaming Validator - command line program
#
# Program Flow:
#   1) Get a playlist URL from the user (command or batch mode)
#   2) Retrieve playlist file from web server or disk
#   3) Validate the playlist file
#   4) Produce a report
#
# Running the Program:
#   >hls-validator [options] command [<URL>]
#   >hls-validator [options] batch <batch-file-name>
#
# Options:
#   -l, --log-level <level>   DEBUG, INFO, WARNING or ERROR
#   -p, --pdf                 batch mode also writes a PDF report per playlist
#
# Local files may be given as a plain path or prefixed with 'file://'.
#
####################################

import getopt
import logging
import sys

from reportlab.platypus.doctemplate import LayoutError

from hlsvalidator import __version__, config
from hlsvalidator.content import fetchContent, readBatchFile
from hlsvalidator.errors import AbsentContentError, IndeterminateTypeError
from hlsvalidator.factory import createPlaylist
from hlsvalidator.report import createPDF, reportName, screenPrint
from hlsvalidator.runner import runValidators

USAGE = [
	"hls-validator [-l <level>] [-p] command [<valid-URL>]",
	"hls-validator [-l <level>] [-p] batch <batch-file-name>",
]

MENU = ("\n--------------------------------------------------------\n"
	"               HLS Menu\n"
	"--------------------------------------------------------\n"
	"Please enter the URL or filepath to playlist that you\n"
	" wish to validate (or 'QUIT').\n"
	"\n>> ")


def printUsage():
	for line in USAGE:
		print(line)


def setupLogging(level):
	numericLevel = logging.getLevelName(level.upper())
	if not isinstance(numericLevel, int):
		raise ValueError('Invalid log level: ' + str(level))
	logging.basicConfig(filename=config.LOG_FILE, level=numericLevel,
		format='%(asctime)s %(levelname)s %(module)s %(message)s')


####################################
#
# fetch -> build -> validate.  Returns the validated playlist tree.
def processPlaylist(url, fetch=fetchContent):
	logging.info("++------------------------->> Entering processPlaylist: %s", url)
	content = fetch(url)
	if not content:
		logging.error("++---------->> Playlist could not be read: %s", url)
		raise AbsentContentError(url)
	playlist = createPlaylist(url, content, fetch)
	runValidators(playlist)
	logging.info("<<-------------------------++ Leaving processPlaylist")
	return playlist


def handlePlaylist(url, pdf=False, fetch=fetchContent):
	#Validates and reports one playlist; returns False when it could not be processed
	print('.\n.\n.\n')
	try:
		playlist = processPlaylist(url, fetch)
	except AbsentContentError as e:
		logging.error("++---------->> %s", e)
		print("ERROR: Could not process playlist since it could not be found.")
		return False
	except IndeterminateTypeError as e:
		logging.error("++---------->> %s", e)
		print("ERROR: Could not process playlist.")
		return False
	screenPrint(playlist)
	if pdf:
		fileName = reportName(url)
		try:
			createPDF(playlist, fileName)
		except (OSError, LayoutError):
			logging.exception("++---------->> PDF report %s could not be written", fileName)
			print("ERROR: Could not write the PDF report " + fileName + ".")
			return False
		print('The name of the output file is: ', fileName)
	return True


####################################
#
# Command line mode: keep asking for playlists until the user quits
def commandMode(url=None, pdf=False, inputFunc=input, fetch=fetchContent):
	logging.info("++---------->> Entered Command Line mode:")
	while True:
		if url is None:
			try:
				url = inputFunc(MENU)
			except EOFError:
				break
		url = url.strip()
		if url.lower() in config.EXIT_COMMANDS:
			print("\nThank you for using the HLS Application. Goodbye!")
			break
		if url:
			logging.info("++---------->> URL given: %s", url)
			handlePlaylist(url, pdf, fetch)
		url = None
	logging.info("<<----------++ Leaving Command Line mode:")
	return 0


####################################
#
# Batch mode: every line of the batch file is a playlist to validate
def batchMode(batchFile, pdf=False, fetch=fetchContent):
	logging.info("++---------->> Entered Batch mode: %s", batchFile)
	print("--------------------------------")
	print("     HLS Batch Processing")
	print("--------------------------------")
	urls = readBatchFile(batchFile)
	if len(urls) == 0:
		logging.error("++---------->> No URLs to process for BATCH MODE")
		print("\nThere are no URLs to process.  Please provide valid file containing URLs.")
		return 1
	print("\nPlaylist files to be processed:")
	for url in urls:
		print(url)
	failures = 0
	for url in urls:
		print("\n\n=======================================================================")
		print("Processing: " + url + "\n")
		if not handlePlaylist(url, pdf, fetch):
			failures += 1
	print("\n-----------------------------")
	print("HLS Batch Processing Complete")
	print("-----------------------------")
	logging.info("<<----------++ Leaving Batch mode, %s failures", failures)
	return 1 if failures else 0


####################################
#
# This is the main program function
def main(argv=None):
	if argv is None:
		argv = sys.argv[1:]
	try:
		opts, args = getopt.getopt(argv, 'hl:p', ['help', 'log-level=', 'pdf'])
	except getopt.GetoptError as e:
		print("Error: ", e)
		printUsage()
		return 2

	config.loadSettings()
	level = config.LOG_LEVEL
	pdf = False
	for opt, value in opts:
		if opt in ('-h', '--help'):
			printUsage()
			return 0
		elif opt in ('-l', '--log-level'):
			level = value
		elif opt in ('-p', '--pdf'):
			pdf = True

	if len(args) == 0 or args[0] not in ('command', 'batch'):
		printUsage()
		return 2
	if args[0] == 'batch' and len(args) < 2:
		printUsage()
		return 2

	try:
		setupLogging(level)
	except ValueError as e:
		print("Error: ", e)
		return 2

	print("\n======================================")
	print("        HLS Application v. " + __version__)
	print("======================================\n")
	logging.info("++-------->> HLS Application has begun execution, mode: %s", args[0])

	if args[0] == 'batch':
		status = batchMode(args[1], pdf)
	else:
		status = commandMode(args[1] if len(args) > 1 else None, pdf)

	print("\n======================================")
	print("     Exiting HLS Application v. " + __version__)
	print("======================================\n")
	logging.info("<<--------++ HLS Application has ended execution")
	return status
#
# End of the main program function
####################################

if __name__ == "__main__":
	sys.exit(main())
