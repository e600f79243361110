####################################
#
# Report output: pretty-print to the screen, or write a PDF in batch mode.
#
# Both forms are built from reportLines(), so the screen and the PDF
# always say the same thing.
#
####################################

import logging
import os
import re
from xml.sax.saxutils import escape

from reportlab.lib.colors import blue
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer

INDENT = '   '
BANNER = '~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~'
PAGE_INFO = 'Validation Report'

_UNSAFE_NAME = re.compile(r'[^A-Za-z0-9_-]+')


def successLine(pList):
	return 'SUCCESS - ' + pList.playlistType + ' Playlist is valid format.'


def nodeLines(pList, prefix):
	errors = pList.getErrors()
	if len(errors) == 0:
		return [prefix + successLine(pList)]
	return [prefix + err for err in errors]


def reportLines(playlist):
	report = []
	if playlist.master:
		report.append('Playlist Type: MASTER PLAYLIST')
	else:
		report.append('Playlist Type: MEDIA PLAYLIST')
	report.append('Playlist URL: ' + playlist.suppliedURL)
	report.extend(nodeLines(playlist, INDENT))
	if playlist.master:
		for variant in playlist.variantList:
			report.append('\tMEDIA PLAYLIST: ' + variant.suppliedURL)
			report.extend(nodeLines(variant, '\t' + INDENT))
	return report


####################################
#
# This function is used to print out the report to the screen
def screenPrint(playlist):
	print(BANNER)
	print('       VALIDATION REPORT       ')
	print(BANNER)
	for line in reportLines(playlist):
		print(line)
#
# End of screenPrint
####################################

####################################
# PDF Generation Functions
#

def reportName(locator):
	#'http://host/gear1/prog_index.m3u8' -> 'host_gear1_prog_index.pdf'
	#Host and path are both kept so that same-named variants get their own report
	name = locator.split('://', 1)[-1].rstrip('/')
	path, sep, last = name.rpartition('/')
	# a bare 'http://example.com/' has no file name to drop an extension from
	if sep or '://' not in locator:
		last = os.path.splitext(last)[0]
	base = _UNSAFE_NAME.sub('_', path + sep + last).strip('_')
	if not base:
		base = 'output'
	return base + '.pdf'


def myFirstPage(canvas, doc):
	canvas.saveState()
	canvas.setFont('Times-Roman', 9)
	canvas.drawString(inch, 0.75 * inch, "First Page / %s" % PAGE_INFO)
	canvas.restoreState()


def myLaterPages(canvas, doc):
	canvas.saveState()
	canvas.setFont('Times-Roman', 9)
	canvas.drawString(inch, 0.75 * inch, "Page %d %s" % (doc.page, PAGE_INFO))
	canvas.restoreState()


def createPDF(playlist, fileName):
	logging.info("++---------->> Writing PDF report %s", fileName)
	doc = SimpleDocTemplate(fileName)
	style = getSampleStyleSheet()["Normal"]
	style.textColor = blue
	Story = []
	Story.append(Paragraph('&lt;&lt;##--------------------- Report ------------------------##&gt;&gt;', style))
	Story.append(Spacer(1, 0.2 * inch))
	for line in reportLines(playlist):
		# Paragraph text is mini-markup, so the raw report text is escaped
		# and tab indents become non-breaking spaces
		text = escape(line).replace('\t', '&nbsp;' * 8).replace(INDENT, '&nbsp;' * len(INDENT))
		Story.append(Paragraph(text, style))
		if line.startswith('Playlist URL') or line.startswith('\tMEDIA PLAYLIST'):
			Story.append(Spacer(1, 0.1 * inch))
	Story.append(Spacer(1, 0.2 * inch))
	Story.append(Paragraph('&lt;&lt;##--------------- End of Report ---------------##&gt;&gt;', style))
	doc.build(Story, onFirstPage=myFirstPage, onLaterPages=myLaterPages)
	return fileName
#
# End of PDF Generation Functions
####################################
