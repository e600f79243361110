# Tests for playlist type detection and tree construction.

import pytest

from hlsvalidator import factory
from hlsvalidator.errors import IndeterminateTypeError
from hlsvalidator.playlist import MasterPlaylist, MediaPlaylist, MEDIA, MASTER

from conftest import MASTER_URL


class TestGetPlaylistType:

	def test_media(self, mediaContent):
		assert factory.getPlaylistType(mediaContent) == MEDIA

	def test_master(self, masterContent):
		assert factory.getPlaylistType(masterContent) == MASTER

	def test_first_decisive_tag_wins(self):
		content = ['#EXTM3U', '#EXTINF:1,', 'a.ts', '#EXT-X-STREAM-INF:BANDWIDTH=1', 'b.m3u8']
		assert factory.getPlaylistType(content) == MEDIA

	def test_commented_tags_are_ignored(self):
		assert factory.getPlaylistType(['#EXTM3U', '# EXTINF:1,']) is None

	def test_no_decisive_tag(self):
		assert factory.getPlaylistType(['#EXTM3U', '#EXT-X-VERSION:3']) is None


class TestCreatePlaylist:

	def test_media_playlist(self, mediaContent):
		playlist = factory.createPlaylist('http://myURL.com', mediaContent)
		assert isinstance(playlist, MediaPlaylist)
		assert playlist.content == mediaContent
		assert playlist.suppliedURL == 'http://myURL.com'

	def test_empty_content_is_indeterminate(self):
		with pytest.raises(IndeterminateTypeError):
			factory.createPlaylist('http://myURL.com', [])

	def test_no_decisive_tag_is_indeterminate(self):
		with pytest.raises(IndeterminateTypeError):
			factory.createPlaylist('x.m3u8', ['#EXTM3U', '#EXT-X-ENDLIST'])

	def test_master_builds_variants_in_order(self, masterContent, fakeSource):
		playlist = factory.createPlaylist(MASTER_URL, masterContent, fakeSource)
		assert isinstance(playlist, MasterPlaylist)
		assert [v.suppliedURL for v in playlist.variantList] == [
			'http://example.com/hls/gear1/prog_index.m3u8',
			'http://example.com/hls/gear2/prog_index.m3u8',
		]
		assert all(isinstance(v, MediaPlaylist) for v in playlist.variantList)
		assert fakeSource.requested == [v.suppliedURL for v in playlist.variantList]

	def test_missing_variant_becomes_empty_media(self, masterContent, makeSource):
		source = makeSource({})
		playlist = factory.createPlaylist(MASTER_URL, masterContent, source)
		assert len(playlist.variantList) == 2
		assert all(v.content == [] for v in playlist.variantList)

	def test_variant_tag_without_uri_adds_no_variant(self, makeSource, mediaContent):
		content = [
			'#EXTM3U',
			'#EXT-X-STREAM-INF:BANDWIDTH=1',
			'#EXT-X-STREAM-INF:BANDWIDTH=2',
			'low.m3u8',
			'#EXT-X-STREAM-INF:BANDWIDTH=3',
		]
		source = makeSource({'http://example.com/hls/low.m3u8': mediaContent})
		playlist = factory.createPlaylist(MASTER_URL, content, source)
		assert [v.suppliedURL for v in playlist.variantList] == ['http://example.com/hls/low.m3u8']

	def test_variants_are_never_masters(self, masterContent, makeSource):
		source = makeSource({'http://example.com/hls/gear1/prog_index.m3u8': masterContent})
		playlist = factory.createPlaylist(MASTER_URL, masterContent[:3], source)
		assert isinstance(playlist.variantList[0], MediaPlaylist)
		assert source.requested == ['http://example.com/hls/gear1/prog_index.m3u8']
