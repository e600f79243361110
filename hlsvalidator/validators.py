####################################
#
# This is where the visitors (check hierarchy) are defined
#
# Every check implements checkMedia() and checkMaster(); visit() picks one
# from the playlist's master flag.  A check only looks at the playlist it
# is handed, never at the variants of a master; walking the tree is the
# job of hlsvalidator.runner.  Checks return a list of Diagnostic objects
# in line order and never raise for bad content.
#
####################################

import logging

from hlsvalidator import lines

FATAL = 'FATAL'
SEVERE = 'SEVERE'
WARNING = 'WARNING'
MINOR = 'MINOR'

SEVERITIES = (FATAL, SEVERE, WARNING, MINOR)


class Diagnostic(object):
	# lineNum  - 1-indexed line of the playlist the problem was found on
	# severity - FATAL, SEVERE, WARNING or MINOR
	# message  - human readable reason
	def __init__(self, lineNum, severity, message):
		if severity not in SEVERITIES:
			raise ValueError('Unknown severity: ' + str(severity))
		self.lineNum = lineNum
		self.severity = severity
		self.message = message

	def render(self):
		return '[' + self.severity + ' | line ' + str(self.lineNum) + ': ' + self.message

	def __str__(self):
		return self.render()

	def __repr__(self):
		return 'Diagnostic(%r, %r, %r)' % (self.lineNum, self.severity, self.message)

	def __eq__(self, other):
		if not isinstance(other, Diagnostic):
			return NotImplemented
		return (self.lineNum, self.severity, self.message) == \
			(other.lineNum, other.severity, other.message)

	def __hash__(self):
		return hash((self.lineNum, self.severity, self.message))


def formatNumber(value):
	# 11.0 -> '11', 10.5 -> '10.5'
	return '%g' % value


class Visitor(object):
	def __str__(self):
		return self.__class__.__name__


class Validator(Visitor):
	def visit(self, pList):
		if pList.master:
			logging.debug("++---------->> %s checking Master %s", self, pList.suppliedURL)
			return self.checkMaster(pList)
		logging.debug("++---------->> %s checking Media %s", self, pList.suppliedURL)
		return self.checkMedia(pList)

	def checkMedia(self, pList):
		raise NotImplementedError

	def checkMaster(self, pList):
		raise NotImplementedError


class FirstTagCheck(Validator):
	#The first line of every playlist must hold the EXTM3U header tag.
	#Same rule for Media and Master playlists.
	errEmpty = 'Playlist is empty.  Cannot validate.'
	errHeader = 'Playlist file does not contain required M3U tag on line 1.  Caution processing playlist.'

	def checkMedia(self, pList):
		return self.checkHeader(pList.content)

	def checkMaster(self, pList):
		return self.checkHeader(pList.content)

	def checkHeader(self, content):
		logging.info("++---------->> Beginning FirstTagCheck Validation")
		errors = []
		if len(content) == 0:
			logging.error("++---------->> The playlist being validated does not contain any content")
			errors.append(Diagnostic(1, FATAL, self.errEmpty))
		elif lines.HEADER_TAG not in content[0]:
			errors.append(Diagnostic(1, MINOR, self.errHeader))
		logging.info("++---------->> Leaving FirstTagCheck Validation")
		return errors


class URISequenceCheck(Validator):
	#The line right after an EXTINF tag (Media) or EXT-X-STREAM-INF tag (Master)
	#must be a URI.  The expectation is checked once, on the very next line,
	#whatever kind of line that turns out to be.
	errMedia = "Media Playlist must have media segment file on line after 'EXTINF' tag."
	errMaster = "Master Playlist must have Media Playlist file on line after 'EXT-X-STREAM-INF' tag."

	def checkMedia(self, pList):
		return self.checkSequence(pList.content, lines.MEDIA_SEGMENT_TAG, self.errMedia)

	def checkMaster(self, pList):
		return self.checkSequence(pList.content, lines.VARIANT_TAG, self.errMaster)

	def checkSequence(self, content, decisiveTag, message):
		logging.info("++---------->> Beginning URISequenceCheck Validation")
		errors = []
		shouldBeURI = False
		tagLine = 0
		for lineNum, line in enumerate(content, 1):
			token = lines.classify(line)
			if shouldBeURI:
				if token.kind != lines.URI:
					errors.append(Diagnostic(lineNum, FATAL, message))
				shouldBeURI = False
			if token.kind == lines.TAG and token.name == decisiveTag:
				shouldBeURI = True
				tagLine = lineNum
		if shouldBeURI:
			# Content ended right after the tag
			errors.append(Diagnostic(tagLine, FATAL, message))
		logging.info("++---------->> Leaving URISequenceCheck Validation")
		return errors


class MediaSegmentTimeCheck(Validator):
	#This check looks at the EXT-X-TARGETDURATION tag (required) and ensures that
	#the duration of each EXTINF media segment is less than or equal to it.
	errNoTarget = 'Media Playlist must contain a target duration tag.'
	errTargetValue = "Media Playlist target duration tag 'EXT-X-TARGETDURATION' must contain a numeric value."
	errTime = "Media Playlist segment tag 'EXTINF' must include a duration time."
	errTimeExceed = 'Media Playlist segment duration should not exceed the target duration of: '

	def checkMaster(self, pList):
		logging.info("++---------->> MediaSegmentTimeCheck has nothing to check on Master playlists")
		return []

	def checkMedia(self, pList):
		logging.info("++------------------------->> TargetDurationCheck Validation for Media started")
		content = pList.content
		if len(content) == 0:
			logging.error("++---------->> The playlist being validated does not contain any content")
			return [Diagnostic(1, FATAL, self.errNoTarget)]

		targetLine, targetDuration = self.findTargetDuration(content)
		if targetLine is None:
			return [Diagnostic(1, FATAL, self.errNoTarget)]
		if targetDuration is None:
			return [Diagnostic(targetLine, FATAL, self.errTargetValue)]
		logging.info("++---------->> Target duration = %s (line %s)", targetDuration, targetLine)

		errors = []
		for lineNum, line in enumerate(content, 1):
			token = lines.classify(line)
			if token.kind != lines.TAG or token.name != lines.MEDIA_SEGMENT_TAG:
				continue
			duration = token.duration
			if duration is None:
				errors.append(Diagnostic(lineNum, FATAL, self.errTime))
			elif duration > targetDuration:
				errors.append(Diagnostic(lineNum, SEVERE,
					self.errTimeExceed + formatNumber(targetDuration) + '.'))
		logging.info("<<-------------------------++ TargetDurationCheck Validation")
		return errors

	def findTargetDuration(self, content):
		#Returns (line of the first target duration tag, first usable value).
		#The line is None when there is no tag; the value is None when no tag
		#carries a non-negative number.
		targetLine = None
		for lineNum, line in enumerate(content, 1):
			token = lines.classify(line)
			if token.kind != lines.TAG or token.name != lines.TARGET_DURATION_TAG:
				continue
			if targetLine is None:
				targetLine = lineNum
			duration = token.duration
			if duration is not None and duration >= 0:
				return targetLine, duration
		return targetLine, None


class TagContextCheck(Validator):
	#This Validator checks that each tag is used in the right kind of playlist,
	#and only as often as allowed.
	errManyTargets = "Media Playlist should not contain more than one 'EXT-X-TARGETDURATION' tag."
	errManyVersions = "Playlist should not contain more than one 'EXT-X-VERSION' tag."
	errBandwidth = "Master Playlist 'EXT-X-STREAM-INF' tag must contain BANDWIDTH attribute."
	errWhitespace = 'Playlist with blank lines should not contain whitespace.'
	errBogusTag = 'Playlist contains unrecognizable tag: '
	errDeprecated = "Playlist contains 'EXT-X-ALLOW-CACHE' tag which was removed in protocol version 7."
	errMasterTagInMedia = 'Media Playlist must not contain Master Playlist tag: '
	errMediaTagInMaster = 'Master Playlist must not contain Media Playlist tag: '

	def checkMedia(self, pList):
		logging.info("++------------------------->> Beginning TagContextCheck for Media")
		errors = []
		numOfDurations = 0
		numOfVersions = 0
		for lineNum, line in enumerate(pList.content, 1):
			token = lines.classify(line)
			if token.kind == lines.MALFORMED:
				errors.append(Diagnostic(lineNum, MINOR, self.errWhitespace))
			if token.kind != lines.TAG:
				continue
			if token.name == lines.TARGET_DURATION_TAG:
				numOfDurations += 1
				if numOfDurations > 1:
					errors.append(Diagnostic(lineNum, FATAL, self.errManyTargets))
			elif token.name == lines.VERSION_TAG:
				numOfVersions += 1
				if numOfVersions > 1:
					errors.append(Diagnostic(lineNum, SEVERE, self.errManyVersions))
			elif lineNum > 1 and token.name not in lines.MEDIA_TAGS:
				errors.append(self.misplacedTag(lineNum, token, self.errMasterTagInMedia))
		logging.info("<<-------------------------++ Leaving TagContextCheck for Media")
		return errors

	def checkMaster(self, pList):
		logging.info("++------------------------->> Beginning TagContextCheck for Master")
		errors = []
		numOfVersions = 0
		for lineNum, line in enumerate(pList.content, 1):
			token = lines.classify(line)
			if token.kind == lines.MALFORMED:
				errors.append(Diagnostic(lineNum, MINOR, self.errWhitespace))
			if token.kind != lines.TAG:
				continue
			if token.name == lines.VERSION_TAG:
				numOfVersions += 1
				if numOfVersions > 1:
					errors.append(Diagnostic(lineNum, SEVERE, self.errManyVersions))
			elif token.name == lines.VARIANT_TAG:
				if not lines.hasBandwidth(token.attributes):
					errors.append(Diagnostic(lineNum, SEVERE, self.errBandwidth))
			elif lineNum > 1 and token.name not in lines.MASTER_TAGS:
				errors.append(self.misplacedTag(lineNum, token, self.errMediaTagInMaster))
		logging.info("<<-------------------------++ Leaving TagContextCheck for Master")
		return errors

	def misplacedTag(self, lineNum, token, wrongTypeMessage):
		name = token.name
		if lines.isDeprecatedTag(token.text):
			logging.warning("++---------->> The deprecated tag '%s' was found on line %s", name, lineNum)
			return Diagnostic(lineNum, WARNING, self.errDeprecated)
		if not lines.isKnownTag(token.text):
			logging.warning("++---------->> An unknown tag '%s' was found on line %s", name, lineNum)
			return Diagnostic(lineNum, WARNING, self.errBogusTag + "'" + name + "'.")
		return Diagnostic(lineNum, SEVERE, wrongTypeMessage + "'" + name + "'.")
