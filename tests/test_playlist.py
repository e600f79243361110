# Tests for the playlist object model.

from hlsvalidator.playlist import MasterPlaylist, MediaPlaylist, MEDIA, MASTER
from hlsvalidator.validators import Diagnostic, Validator, FATAL


class RecordingCheck(Validator):

	def checkMedia(self, pList):
		return ['media']

	def checkMaster(self, pList):
		return ['master']


class TestPlaylist:

	def test_media_flags(self):
		playlist = MediaPlaylist('a.m3u8', ['#EXTM3U'])
		assert not playlist.master
		assert playlist.playlistType == MEDIA
		assert playlist.diagnostics == []

	def test_master_flags(self):
		playlist = MasterPlaylist('a.m3u8', ['#EXTM3U'])
		assert playlist.master
		assert playlist.playlistType == MASTER
		assert playlist.variantList == []

	def test_absent_content_is_empty(self):
		assert MediaPlaylist('a.m3u8', None).isEmpty()

	def test_accept_dispatches_on_type(self):
		media = MediaPlaylist('a.m3u8', [])
		master = MasterPlaylist('m.m3u8', [], [media])
		assert media.accept(RecordingCheck()) == ['media']
		assert master.accept(RecordingCheck()) == ['master']

	def test_walk_visits_master_then_variants(self):
		one = MediaPlaylist('1.m3u8', [])
		two = MediaPlaylist('2.m3u8', [])
		master = MasterPlaylist('m.m3u8', [], [one, two])
		assert list(master.walk()) == [master, one, two]
		assert list(one.walk()) == [one]

	def test_get_errors_renders_diagnostics(self):
		playlist = MediaPlaylist('a.m3u8', [])
		playlist.addDiagnostics([Diagnostic(1, FATAL, 'Playlist is empty.')])
		assert playlist.getErrors() == ['[FATAL | line 1: Playlist is empty.']

	def test_clear_diagnostics_reaches_variants(self):
		variant = MediaPlaylist('1.m3u8', [])
		master = MasterPlaylist('m.m3u8', [], [variant])
		master.addDiagnostics([Diagnostic(1, FATAL, 'x')])
		variant.addDiagnostics([Diagnostic(1, FATAL, 'y')])
		master.clearDiagnostics()
		assert master.diagnostics == []
		assert variant.diagnostics == []
