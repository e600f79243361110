####################################
#
# This module is used to create Playlist Objects.  A MasterPlaylist
# will / can contain MediaPlaylist(s), but a MediaPlaylist will
# only have media segments listed.  Both are subclasses of Playlist.
#
# The type is decided by the first decisive tag in the content:
#   EXTINF            -> Media
#   EXT-X-STREAM-INF  -> Master
#
####################################

import logging

from hlsvalidator import content as contentSource
from hlsvalidator import lines
from hlsvalidator.errors import IndeterminateTypeError
from hlsvalidator.playlist import MasterPlaylist, MediaPlaylist, MEDIA, MASTER


def getPlaylistType(content):
	#Returns MEDIA or MASTER, or None when no decisive tag exists
	for line in content:
		token = lines.classify(line)
		if token.kind != lines.TAG:
			continue
		if token.name == lines.MEDIA_SEGMENT_TAG:
			return MEDIA
		if token.name == lines.VARIANT_TAG:
			return MASTER
	return None


####################################
#
# This function creates MediaPlaylist objects
def createMedia(content, url):
	logging.info("++------------------------->> Entering createMedia")
	logging.info("++--------------->> Handed-in URL: %s", url)
	mediaList = MediaPlaylist(url, content)
	logging.info("++------------------------->> Leaving createMedia")
	return mediaList
#
# End of createMedia
####################################

####################################
#
# This function creates MasterPlaylist objects.  Every EXT-X-STREAM-INF tag
# directly followed by a URI names a variant, which is fetched through the
# content source and made into a MediaPlaylist.  A variant that cannot be
# fetched still gets an (empty) MediaPlaylist so the report can show it.
def createMaster(content, url, fetch=None):
	logging.info("++------------------------->> Entering createMaster")
	logging.info("++--------------->> Master URL: %s", url)
	if fetch is None:
		fetch = contentSource.fetchContent
	variantList = []
	for i in range(0, len(content)):
		if not lines.isVariantTag(content[i]):
			continue
		if i + 1 >= len(content) or not lines.isURI(content[i + 1]):
			logging.warning("++---------->> EXT-X-STREAM-INF tag on line %s not followed by URI", i + 1)
			continue
		variantURL = contentSource.absolutizeURL(url, content[i + 1])
		logging.info("++---------->> Found variant %s", variantURL)
		variantContent = fetch(variantURL)
		if variantContent is None:
			logging.error("++---------->> No content for variant %s", variantURL)
			variantContent = []
		variantList.append(createMedia(variantContent, variantURL))
	pList = MasterPlaylist(url, content, variantList)
	logging.info("++------------------------->> Leaving createMaster")
	return pList
#
# End of createMaster
####################################

####################################
#
# Builds the playlist tree for the given content.  fetch is the content
# source used for variants; it defaults to hlsvalidator.content.fetchContent.
def createPlaylist(url, content, fetch=None):
	logging.info("++------------------------->> Entering createPlaylist")
	content = list(content) if content else []
	playlistType = getPlaylistType(content)
	logging.info("++------------>> The playlist object was tested to be: %s", playlistType)
	if playlistType == MASTER:
		playList = createMaster(content, url, fetch)
	elif playlistType == MEDIA:
		playList = createMedia(content, url)
	else:
		logging.error("++------------>> No EXTINF or EXT-X-STREAM-INF tag in %s", url)
		raise IndeterminateTypeError(url)
	logging.info("++------------------------->> Leaving createPlaylist")
	return playList
#
# End of createPlaylist
####################################
