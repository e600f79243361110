####################################
#
# Runs the checks in order against a playlist and every variant under it.
#
# The order is fixed so that reports come out the same way every time:
#   1) FirstTagCheck
#   2) URISequenceCheck
#   3) MediaSegmentTimeCheck
#   4) TagContextCheck
#
####################################

import logging

from hlsvalidator.validators import (
	Diagnostic,
	FATAL,
	FirstTagCheck,
	MediaSegmentTimeCheck,
	TagContextCheck,
	URISequenceCheck,
)

VALIDATORS = (
	FirstTagCheck,
	URISequenceCheck,
	MediaSegmentTimeCheck,
	TagContextCheck,
)


def applyValidator(pList, validator):
	#A check that breaks is reported on the playlist instead of ending the run
	try:
		errors = pList.accept(validator)
	except Exception:
		logging.exception("++---------->> %s failed on %s", validator, pList.suppliedURL)
		errors = [Diagnostic(1, FATAL, str(validator) + ' could not complete validation.')]
	pList.addDiagnostics(errors)
	logging.info("++---------->> %s found %s problems in %s", validator, len(errors), pList.suppliedURL)


def runValidators(playlist, validators=VALIDATORS):
	logging.info("++------------------------->> RUNNING VALIDATORS on %s", playlist.suppliedURL)
	for pList in playlist.walk():
		for validatorClass in validators:
			applyValidator(pList, validatorClass())
	logging.info("<<-------------------------++ Finished validators on %s", playlist.suppliedURL)
	return playlist
