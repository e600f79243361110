####################################
#
# Line classification for HLS playlist content
#
# Every raw line of a playlist file is one of four kinds:
#   COMMENT   - blank line, or '#' line that is not a tag
#   TAG       - line starting with '#EXT'
#   URI       - media segment file or variant playlist reference
#   MALFORMED - line holding nothing but whitespace
#
# Classification only ever looks at the line itself, never its neighbours.
#
####################################

import logging
import math
import re

TAG_PREFIX = '#EXT'
COMMENT_PREFIX = '#'

COMMENT = 'COMMENT'
TAG = 'TAG'
URI = 'URI'
MALFORMED = 'MALFORMED'

HEADER_TAG = 'EXTM3U'
MEDIA_SEGMENT_TAG = 'EXTINF'
VARIANT_TAG = 'EXT-X-STREAM-INF'
TARGET_DURATION_TAG = 'EXT-X-TARGETDURATION'
VERSION_TAG = 'EXT-X-VERSION'

##Tags whose first attribute is a number of seconds
DURATION_TAGS = frozenset([MEDIA_SEGMENT_TAG, TARGET_DURATION_TAG])

##Tags allowed in a Media playlist
MEDIA_TAGS = frozenset([
	'EXTM3U',
	'EXT-X-VERSION',
	'EXTINF',
	'EXT-X-BYTERANGE',
	'EXT-X-DISCONTINUITY',
	'EXT-X-KEY',
	'EXT-X-MAP',
	'EXT-X-PROGRAM-DATE-TIME',
	'EXT-X-DATERANGE',
	'EXT-X-INDEPENDENT-SEGMENTS',
	'EXT-X-START',
	'EXT-X-TARGETDURATION',
	'EXT-X-MEDIA-SEQUENCE',
	'EXT-X-DISCONTINUITY-SEQUENCE',
	'EXT-X-ENDLIST',
	'EXT-X-PLAYLIST-TYPE',
	'EXT-X-I-FRAMES-ONLY',
])

##Tags allowed in a Master playlist
MASTER_TAGS = frozenset([
	'EXTM3U',
	'EXT-X-VERSION',
	'EXT-X-INDEPENDENT-SEGMENTS',
	'EXT-X-START',
	'EXT-X-MEDIA',
	'EXT-X-STREAM-INF',
	'EXT-X-I-FRAME-STREAM-INF',
	'EXT-X-SESSION-DATA',
	'EXT-X-SESSION-KEY',
])

##Tags removed from the protocol (EXT-X-ALLOW-CACHE went away in version 7)
DEPRECATED_TAGS = frozenset([
	'EXT-X-ALLOW-CACHE',
])

# Splits on commas that sit outside a pair of double quotes, so that
# CODECS="mp4a.40.2, avc1.4d4015" stays one attribute.
_ATTRIBUTE_SPLIT = re.compile(r',(?=(?:[^"]*"[^"]*")*[^"]*$)')


class Token(object):
	# kind       - one of COMMENT, TAG, URI, MALFORMED
	# text       - the raw line
	# name       - tag name without the leading '#' (TAG only, else None)
	# attributes - quote-aware attribute list (TAG only, else empty)
	# duration   - numeric value of an EXTINF or EXT-X-TARGETDURATION tag,
	#              None for every other line or when the value is unusable
	def __init__(self, kind, text, name=None, attributes=None, duration=None):
		self.kind = kind
		self.text = text
		self.name = name
		self.attributes = attributes if attributes is not None else []
		self.duration = duration

	def __eq__(self, other):
		if not isinstance(other, Token):
			return NotImplemented
		return (self.kind, self.text, self.name, self.attributes, self.duration) == \
			(other.kind, other.text, other.name, other.attributes, other.duration)

	def __hash__(self):
		return hash((self.kind, self.text, self.name, tuple(self.attributes), self.duration))

	def __repr__(self):
		return 'Token(%s, %r)' % (self.kind, self.text)


def getLineType(line):
	if len(line) == 0:
		return COMMENT
	if line.startswith(COMMENT_PREFIX):
		if line.startswith(TAG_PREFIX):
			return TAG
		return COMMENT
	if len(line.strip()) == 0:
		return MALFORMED
	return URI


def getTagName(line):
	# '#EXT-X-TARGETDURATION:11' -> 'EXT-X-TARGETDURATION'
	name = line[1:] if line.startswith(COMMENT_PREFIX) else line
	return name.split(':', 1)[0]


def getAttributeList(line):
	# '#EXT-X-STREAM-INF:BANDWIDTH=1,CODECS="a, b"' -> ['BANDWIDTH=1', 'CODECS="a, b"']
	if ':' not in line:
		return []
	attributes = line.split(':', 1)[1]
	return [att for att in _ATTRIBUTE_SPLIT.split(attributes) if att]


def getDuration(line):
	#Returns the first attribute as a finite float, or None when missing or not numeric
	attributes = getAttributeList(line)
	if len(attributes) == 0:
		return None
	value = attributes[0].strip()
	# float() also takes 'inf', 'nan' and '1_5'; none of them is a duration
	if '_' in value:
		duration = None
	else:
		try:
			duration = float(value)
		except ValueError:
			duration = None
	if duration is None or not math.isfinite(duration):
		logging.warning("++---------->> Duration should be an integer or decimal value: %s", line)
		return None
	return duration


def classify(line):
	kind = getLineType(line)
	if kind == TAG:
		name = getTagName(line)
		duration = None
		if name in DURATION_TAGS:
			duration = getDuration(line)
		return Token(kind, line, name, getAttributeList(line), duration)
	return Token(kind, line)


##Tag predicates used by the factory and validators

def isTag(line):
	return getLineType(line) == TAG

def isURI(line):
	return getLineType(line) == URI

def isMediaSegmentTag(line):
	return isTag(line) and getTagName(line) == MEDIA_SEGMENT_TAG

def isVariantTag(line):
	return isTag(line) and getTagName(line) == VARIANT_TAG

def isTargetDurationTag(line):
	return isTag(line) and getTagName(line) == TARGET_DURATION_TAG

def isVersionTag(line):
	return isTag(line) and getTagName(line) == VERSION_TAG

def isDeprecatedTag(line):
	return getTagName(line) in DEPRECATED_TAGS

def isKnownTag(line):
	name = getTagName(line)
	return name in MEDIA_TAGS or name in MASTER_TAGS

def hasBandwidth(attributes):
	for att in attributes:
		if att.strip().lower().startswith('bandwidth'):
			return True
	return False

def hasBandwidthAttribute(line):
	return hasBandwidth(getAttributeList(line))
