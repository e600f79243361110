####################################
#
# Class definitions for the playlist hierarchy
#
# A MediaPlaylist lists media segments.  A MasterPlaylist lists variant
# streams, and owns one MediaPlaylist object for every variant it could
# resolve.  Both accept validators (visitor pattern); the validator decides
# which check to run from the playlist's master flag.
#
####################################

import logging

MEDIA = 'Media'
MASTER = 'Master'


class Playlist(object):
	# BASIC DEFINITIONS
	# suppliedURL  - the locator the content was read from
	# content      - list of raw lines (report line N is content[N-1])
	# diagnostics  - Diagnostic objects appended by the validation runner
	# master       - True for a MasterPlaylist, False for a MediaPlaylist
	master = False
	playlistType = None

	def __init__(self, suppliedURL, content):
		self.suppliedURL = str(suppliedURL)
		# Absent content is kept as an empty list so the validators can flag it
		self.content = list(content) if content else []
		self.diagnostics = []

	def accept(self, validator):
		return validator.visit(self)

	def addDiagnostics(self, diagnostics):
		self.diagnostics.extend(diagnostics)

	def clearDiagnostics(self):
		del self.diagnostics[:]

	def getErrors(self):
		#Rendered diagnostics, in the order they were found
		return [str(diag) for diag in self.diagnostics]

	def isEmpty(self):
		return len(self.content) == 0

	def walk(self):
		yield self

	def __str__(self):
		return self.__class__.__name__

	def __repr__(self):
		return '%s(%r)' % (self.__class__.__name__, self.suppliedURL)


class MediaPlaylist(Playlist):
	# Has a header that starts with #EXTM3U
	# Has #EXT-X-TARGETDURATION which specifies the maximum media file duration
	# Has #EXTINF tags, each followed by the URI of a media segment
	master = False
	playlistType = MEDIA

	def __init__(self, suppliedURL, content):
		Playlist.__init__(self, suppliedURL, content)
		logging.info("++---------->> MEDIA PLAYLIST created: %s", self.suppliedURL)


class MasterPlaylist(Playlist):
	# Has a header that starts with #EXTM3U
	# Has #EXT-X-STREAM-INF tags, each followed by the URI of a variant playlist
	# variantList holds the MediaPlaylist for each resolved variant, in document order
	master = True
	playlistType = MASTER

	def __init__(self, suppliedURL, content, variantList=None):
		Playlist.__init__(self, suppliedURL, content)
		self.variantList = list(variantList) if variantList else []
		logging.info("++---------->> MASTER PLAYLIST created: %s with %s variants",
			self.suppliedURL, len(self.variantList))

	def walk(self):
		#The master itself, then each variant depth-first
		yield self
		for variant in self.variantList:
			yield variant

	def clearDiagnostics(self):
		Playlist.clearDiagnostics(self)
		for variant in self.variantList:
			variant.clearDiagnostics()
