####################################
#
# Exceptions raised while turning a locator into a Playlist object.
#
# Rule violations found by the validators are never raised; they are
# returned as Diagnostic data.  Only retrieval and type detection can fail.
#
####################################


class HLSValidatorError(Exception):
	pass


class AbsentContentError(HLSValidatorError):
	#Retrieval of the root playlist produced no content
	def __init__(self, locator):
		HLSValidatorError.__init__(self, 'No content could be retrieved from: ' + str(locator))
		self.locator = locator


class IndeterminateTypeError(HLSValidatorError):
	#No EXTINF or EXT-X-STREAM-INF tag was found, so the playlist is neither Media nor Master
	def __init__(self, locator):
		HLSValidatorError.__init__(self, 'Could not determine playlist type for: ' + str(locator))
		self.locator = locator
