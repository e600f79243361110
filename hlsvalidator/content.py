####################################
#
# Retrieval of playlist content from a web server or the local disk
#
# fetchContent() hands back the lines of a playlist, or None when nothing
# could be read.  The reason (404, refused connection, missing file) only
# goes to the log; callers treat every failure as absent content.
#
####################################

import logging

import requests

from hlsvalidator import config

FILE_SCHEME = 'file://'
WEB_SCHEMES = ('http://', 'https://')


def isWebURL(locator):
	return locator.lower().startswith(WEB_SCHEMES)


def isFileURL(locator):
	return locator.lower().startswith(FILE_SCHEME)


####################################
#
# This function reads a playlist over http/https
def getURLContent(url, timeout=None):
	if timeout is None:
		timeout = config.REQUEST_TIMEOUT
	logging.info("++---------->> Attempting getURLContent using http: %s", url)
	try:
		response = requests.get(url, timeout=timeout)
	except requests.exceptions.RequestException as e:
		logging.error("++---------->> FAILED TO CONNECT TO URL %s: %s", url, e)
		return None
	logging.info("++---------->> Response from %s: %s", url, response.status_code)
	if response.status_code == 200:
		content = response.text.splitlines()
		logging.debug("++---------->> Read %s lines from %s", len(content), url)
		return content
	elif response.status_code == 404:
		logging.warning("++---------->> 404 ERROR: URL not found: %s", url)
	else:
		logging.error("++---------->> Connection failed, status %s from: %s", response.status_code, url)
	return None
#
# End of getURLContent
####################################

####################################
#
# This function reads a playlist from the local disk
def getFileContent(path):
	logging.info("++---------->> Attempting getFileContent using file-handle: %s", path)
	try:
		with open(path, 'r', encoding='utf-8') as fileHandle:
			content = fileHandle.read().splitlines()
	except FileNotFoundError as e:
		logging.error("++---------->> Unable to locate file: %s", e)
		return None
	except (OSError, UnicodeDecodeError) as e:
		logging.error("++---------->> Unable to read file %s: %s", path, e)
		return None
	if len(content) == 0:
		logging.warning("++---------->> File %s is empty", path)
		return None
	logging.debug("++---------->> Read %s lines from %s", len(content), path)
	return content
#
# End of getFileContent
####################################

####################################
#
# Content source used by the factory and the command line: the locator
# decides between web and disk.
def fetchContent(locator):
	locator = locator.strip()
	if isWebURL(locator):
		return getURLContent(locator)
	if isFileURL(locator):
		return getFileContent(locator[len(FILE_SCHEME):])
	return getFileContent(locator)


####################################
#
# Builds the locator of a variant playlist from the master locator and the
# URI listed under its EXT-X-STREAM-INF tag.  The last path segment of the
# master locator is replaced by the URI.
def absolutizeURL(masterURL, uri):
	uri = uri.strip()
	if isWebURL(uri) or isFileURL(uri):
		return uri
	return masterURL[:masterURL.rfind('/') + 1] + uri


def readBatchFile(locator):
	#Batch files list one playlist locator per line; blank lines are skipped
	content = fetchContent(locator)
	if content is None:
		return []
	return [line.strip() for line in content if line.strip()]
