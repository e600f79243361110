# Shared playlist fixtures for the hlsvalidator tests.

import pytest

MASTER_URL = 'http://example.com/hls/sintel-trailer.m3u8'


@pytest.fixture()
def mediaContent():
	return [
		'#EXTM3U',
		'#EXT-X-VERSION:3',
		'#EXT-X-TARGETDURATION:11',
		'#EXT-X-MEDIA-SEQUENCE:0',
		'#EXTINF:9.189889,',
		'640x3600.ts',
		'#EXTINF:8.916667,',
		'640x3601.ts',
		'#EXT-X-ENDLIST',
	]


@pytest.fixture()
def masterContent():
	return [
		'#EXTM3U',
		'#EXT-X-STREAM-INF:PROGRAM-ID=1,BANDWIDTH=232370,CODECS="mp4a.40.2, avc1.4d4015"',
		'gear1/prog_index.m3u8',
		'#EXT-X-STREAM-INF:PROGRAM-ID=1,BANDWIDTH=649879,CODECS="mp4a.40.2, avc1.4d401e"',
		'gear2/prog_index.m3u8',
	]


class FakeSource(object):
	#Content source backed by a dict; records every locator asked for

	def __init__(self, pages):
		self.pages = pages
		self.requested = []

	def __call__(self, locator):
		self.requested.append(locator)
		content = self.pages.get(locator)
		return list(content) if content is not None else None


@pytest.fixture()
def fakeSource(mediaContent, masterContent):
	return FakeSource({
		MASTER_URL: masterContent,
		'http://example.com/hls/gear1/prog_index.m3u8': mediaContent,
		'http://example.com/hls/gear2/prog_index.m3u8': mediaContent,
	})


@pytest.fixture()
def makeSource():
	return FakeSource
