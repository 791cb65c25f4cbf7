from outlineTools.misc.byteReader import ByteReader
from outlineTools.misc.testTools import buildSfnt, buildHead
from outlineTools.ttLib.sfnt import (SFNTReader, SFNTDirectoryEntry,
	sfntDirectorySize, sfntDirectoryEntrySize, calcChecksum)
from outlineTools.ttLib import TTLibError, OutOfBounds
from collections import OrderedDict
import logging
import struct
import pytest


@pytest.fixture
def tables():
	return OrderedDict([
		('head', buildHead()),
		('glyf', b"\0" * 22),
		('zzzz', b"abcdxyz"),
		('\x01\x02\x03\x04', b"\xff" * 8),
	])


@pytest.fixture
def font(tables):
	return buildSfnt(tables)


class SFNTReaderTest:

	def test_read_sfnt_directory(self, font, tables):
		reader = SFNTReader(ByteReader(font))
		assert reader.checkChecksums == 1
		assert reader.flavor is None
		assert reader.DirectoryEntry == SFNTDirectoryEntry
		assert reader.sfntVersion == "\0\1\0\0"
		assert reader.numTables == len(tables)
		assert reader.searchRange == 64
		assert reader.entrySelector == 2
		assert reader.rangeShift == 0
		assert list(reader.keys()) == list(tables.keys())
		offset = sfntDirectorySize + len(tables) * sfntDirectoryEntrySize
		for tag in tables.keys():
			entry = reader.tables[tag]
			assert entry.tag == tag
			assert entry.length == len(tables[tag])
			assert entry.offset == offset
			offset += (entry.length + 3) & ~3

	def test_unprintable_tag(self, font):
		reader = SFNTReader(ByteReader(font))
		assert '\x01\x02\x03\x04' in reader

	def test_get_table_data(self, font, tables):
		reader = SFNTReader(ByteReader(font))
		for tag in tables.keys():
			assert reader[tag] == tables[tag]

	def test_table_order(self, font):
		reader = SFNTReader(ByteReader(font))
		assert reader.tableOrder == ['head', 'glyf', 'zzzz', '\x01\x02\x03\x04']

	def test_not_enough_data(self):
		with pytest.raises(OutOfBounds) as excinfo:
			SFNTReader(ByteReader(b""))
		assert "not enough data" in str(excinfo.value)

	def test_truncated_directory(self, font):
		with pytest.raises(OutOfBounds):
			SFNTReader(ByteReader(font[:sfntDirectorySize + 10]))

	def test_table_past_end_of_buffer(self, font, tables):
		# cut into the data of the last table
		truncated = font[:-4]
		with pytest.raises(OutOfBounds) as excinfo:
			SFNTReader(ByteReader(truncated))
		assert "extends past the end" in str(excinfo.value)

	def test_entries_within_buffer(self, font):
		reader = SFNTReader(ByteReader(font))
		for entry in reader.tables.values():
			assert 0 <= entry.offset < len(font)
			assert entry.offset + entry.length <= len(font)

	def test_duplicate_tag_overwrites(self):
		# two tables plus a third record pointing at the second table's data
		firstOffset = sfntDirectorySize + 3 * sfntDirectoryEntrySize
		data = buildSfnt({'abcd': b"1111", 'efgh': b"2222"},
			entries=[('abcd', 0, firstOffset + 4, 4)])
		reader = SFNTReader(ByteReader(data), checkChecksums=0)
		assert reader.numTables == 3
		assert list(reader.keys()) == ['abcd', 'efgh']
		assert reader['abcd'] == b"2222"

	def test_unknown_sfntVersion_is_logged(self, caplog, tables):
		data = buildSfnt(tables, sfntVersion=b"abcd")
		with caplog.at_level(logging.WARNING, logger="outlineTools.ttLib.sfnt"):
			reader = SFNTReader(ByteReader(data))
		assert reader.sfntVersion == "abcd"
		assert "unknown sfntVersion" in caplog.text

	def test_bad_checksum_warning(self, font, caplog):
		reader = SFNTReader(ByteReader(font))
		reader.tables['zzzz'].checkSum = 0
		with caplog.at_level(logging.WARNING, logger="outlineTools.ttLib.sfnt"):
			reader['zzzz']
		assert "bad checksum for 'zzzz' table" in caplog.text

	def test_bad_checksum_error(self, font):
		reader = SFNTReader(ByteReader(font), checkChecksums=2)
		reader.tables['glyf'].checkSum += 1
		with pytest.raises(TTLibError) as excinfo:
			reader.verifyChecksums()
		assert "bad checksum for 'glyf' table" in str(excinfo.value)

	def test_head_checksum_ignores_adjustment(self, tables):
		head = bytearray(tables['head'])
		head[8:12] = struct.pack(">L", 0x12345678)
		tables['head'] = bytes(head)
		reader = SFNTReader(ByteReader(buildSfnt(tables)), checkChecksums=2)
		reader.verifyChecksums()


def test_calcChecksum():
	assert calcChecksum(b"abcd") == 1633837924
	assert calcChecksum(b"abcdxyz") == 3655064932
	assert calcChecksum(b"") == 0
