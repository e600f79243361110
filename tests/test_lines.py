# Tests for line classification and tag helpers.

import pytest

from hlsvalidator import lines


class TestGetLineType:

	@pytest.mark.parametrize('line, kind', [
		('', lines.COMMENT),
		('#This is a comment bro.', lines.COMMENT),
		('#', lines.COMMENT),
		('#EXTM3U', lines.TAG),
		('#EXT-X-TARGETDURATION:11', lines.TAG),
		('  ', lines.MALFORMED),
		('\t', lines.MALFORMED),
		('gear1/prog_index.m3u8', lines.URI),
		('640x3600.ts', lines.URI),
		('http://example.com/a.ts', lines.URI),
	])
	def test_kinds(self, line, kind):
		assert lines.getLineType(line) == kind

	def test_classify_is_deterministic(self):
		line = '#EXT-X-STREAM-INF:BANDWIDTH=1,CODECS="a, b"'
		assert lines.classify(line) == lines.classify(line)

	def test_empty_line_is_comment(self):
		assert lines.classify('').kind == lines.COMMENT


class TestTagParsing:

	def test_tag_name_strips_prefix_and_attributes(self):
		assert lines.getTagName('#EXT-X-TARGETDURATION:11') == 'EXT-X-TARGETDURATION'

	def test_tag_name_without_colon(self):
		assert lines.getTagName('#EXT-X-ENDLIST') == 'EXT-X-ENDLIST'

	def test_attributes_keep_quoted_commas(self):
		line = '#EXT-X-STREAM-INF:PROGRAM-ID=1,BANDWIDTH=232370,CODECS="mp4a.40.2, avc1.4d4015"'
		assert lines.getAttributeList(line) == [
			'PROGRAM-ID=1',
			'BANDWIDTH=232370',
			'CODECS="mp4a.40.2, avc1.4d4015"',
		]

	def test_attributes_drop_empty_fields(self):
		assert lines.getAttributeList('#EXTINF:9.18,') == ['9.18']

	def test_no_attributes(self):
		assert lines.getAttributeList('#EXTM3U') == []

	def test_classify_tag_token(self):
		token = lines.classify('#EXTINF:10,title')
		assert token.kind == lines.TAG
		assert token.name == 'EXTINF'
		assert token.attributes == ['10', 'title']

	def test_classify_non_tag_has_no_name(self):
		token = lines.classify('a.ts')
		assert token.kind == lines.URI
		assert token.name is None
		assert token.attributes == []


class TestDuration:

	def test_decimal(self):
		assert lines.getDuration('#EXTINF:9.189889,') == pytest.approx(9.189889)

	def test_integer(self):
		assert lines.getDuration('#EXT-X-TARGETDURATION:11') == 11.0

	def test_missing(self):
		assert lines.getDuration('#EXTINF:') is None

	def test_not_numeric(self):
		assert lines.getDuration('#EXTINF:abc,') is None

	@pytest.mark.parametrize('value', ['inf', '-inf', 'nan', 'Infinity', '1_5'])
	def test_non_finite_or_underscored_is_unusable(self, value):
		assert lines.getDuration('#EXTINF:' + value + ',') is None

	def test_exponent_is_accepted(self):
		assert lines.getDuration('#EXT-X-TARGETDURATION:1e1') == 10.0

	def test_token_carries_segment_duration(self):
		assert lines.classify('#EXTINF:9.18,title').duration == pytest.approx(9.18)

	def test_token_carries_target_duration(self):
		assert lines.classify('#EXT-X-TARGETDURATION:11').duration == 11.0

	def test_token_without_duration(self):
		assert lines.classify('#EXT-X-VERSION:3').duration is None
		assert lines.classify('#EXTINF:nan,').duration is None
		assert lines.classify('a.ts').duration is None


class TestPredicates:

	def test_bandwidth_is_case_insensitive(self):
		assert lines.hasBandwidthAttribute('#EXT-X-STREAM-INF:bandwidth=1')

	def test_bandwidth_inside_quoted_value_does_not_count(self):
		assert not lines.hasBandwidthAttribute('#EXT-X-STREAM-INF:PROGRAM-ID=1,CODECS="bandwidth"')

	def test_known_and_deprecated(self):
		assert lines.isKnownTag('#EXT-X-MEDIA:TYPE=AUDIO')
		assert not lines.isKnownTag('#EXT-X-BOGUS')
		assert lines.isDeprecatedTag('#EXT-X-ALLOW-CACHE:YES')

	def test_decisive_tags(self):
		assert lines.isMediaSegmentTag('#EXTINF:1,')
		assert lines.isVariantTag('#EXT-X-STREAM-INF:BANDWIDTH=1')
		assert not lines.isVariantTag('#EXT-X-I-FRAME-STREAM-INF:BANDWIDTH=1')

	def test_tables_are_immutable(self):
		assert isinstance(lines.MEDIA_TAGS, frozenset)
		assert isinstance(lines.MASTER_TAGS, frozenset)
		assert isinstance(lines.DEPRECATED_TAGS, frozenset)
