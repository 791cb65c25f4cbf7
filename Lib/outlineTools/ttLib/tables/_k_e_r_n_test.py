from outlineTools.misc.testTools import (buildKern, buildKernFormat0,
	buildKernSubtable, decompileTable)
from outlineTools.ttLib.tables._k_e_r_n import KerningPair, CoverageFlags
from outlineTools.ttLib import UnsupportedKerningFormat, OutOfBounds
import logging
import struct
import pytest


class KernTableTest:

	def test_format_0(self):
		kern = decompileTable('kern', buildKern([buildKernFormat0([(65, 66, -50)])]))
		assert kern.version == 0
		assert kern.nTables == 1
		assert len(kern.kernTables) == 1
		subtable = kern.kernTables[0]
		assert subtable.format == 0
		assert subtable.nPairs == 1
		assert subtable.length == 6 + 8 + 6
		assert subtable.kernTable == {KerningPair(65, 66): -50}
		assert KerningPair(66, 65) not in subtable.kernTable
		assert subtable[65, 66] == -50
		assert (66, 65) not in subtable
		assert not kern.errors

	def test_pairs_are_order_sensitive(self):
		pairs = [(65, 66, -50), (66, 65, 20), (1, 2, 0x7fff), (2, 1, -0x8000)]
		kern = decompileTable('kern', buildKern([buildKernFormat0(pairs)]))
		assert kern.kernPairs == {
			KerningPair(65, 66): -50,
			KerningPair(66, 65): 20,
			KerningPair(1, 2): 32767,
			KerningPair(2, 1): -32768,
		}

	def test_binary_search_header_is_kept(self):
		pairs = [(i, i + 1, -i) for i in range(5)]
		subtable = decompileTable('kern', buildKern([buildKernFormat0(pairs)])).kernTables[0]
		assert subtable.nPairs == 5
		assert subtable.searchRange == 24
		assert subtable.entrySelector == 2
		assert subtable.rangeShift == 6

	def test_multiple_subtables(self):
		kern = decompileTable('kern', buildKern([
			buildKernFormat0([(1, 2, -10), (3, 4, -20)]),
			buildKernFormat0([(3, 4, -30), (5, 6, 40)], coverage=0x0005),
		]))
		assert len(kern.kernTables) == 2
		assert kern.kernTables[1].coverage.crossStream
		assert kern.kernPairs == {
			KerningPair(1, 2): -10,
			KerningPair(3, 4): -30,
			KerningPair(5, 6): 40,
		}

	def test_unsupported_format_is_skipped(self, caplog):
		format2 = buildKernSubtable(0x0201, b"\0" * 10)
		with caplog.at_level(logging.WARNING):
			kern = decompileTable('kern', buildKern([
				format2,
				buildKernFormat0([(65, 66, -50)]),
			]))
		assert len(kern.kernTables) == 1
		assert kern.kernPairs == {KerningPair(65, 66): -50}
		assert len(kern.errors) == 1
		assert isinstance(kern.errors[0], UnsupportedKerningFormat)
		assert "cannot read format 2 kerning table" in str(kern.errors[0])
		assert "skipped 'kern' subtable 0" in caplog.text

	def test_coverage_format_readings(self):
		pairs = [(65, 66, -50)]
		coverage = 0x0201
		# high byte of the 16-bit field: format 2, the subtable is skipped
		kern = decompileTable('kern', buildKern([buildKernFormat0(pairs, coverage=coverage)]))
		assert kern.kernTables == []
		assert isinstance(kern.errors[0], UnsupportedKerningFormat)
		# shifting the already masked low byte always gives format 0, so
		# the same subtable would be read as format 0 pairs
		lowByte = coverage & 0xFF
		assert lowByte >> 8 == 0
		kern = decompileTable('kern', buildKern([buildKernFormat0(pairs, coverage=lowByte)]))
		assert kern.kernPairs == {KerningPair(65, 66): -50}
		assert kern.kernTables[0].coverage.horizontal
		assert not kern.errors

	def test_apple_kern_table(self):
		data = struct.pack(">LL", 0x00010000, 0)
		kern = decompileTable('kern', data)
		assert kern.kernTables == []
		assert kern.kernPairs == {}
		assert isinstance(kern.errors[0], UnsupportedKerningFormat)

	def test_truncated_pairs(self):
		data = buildKern([buildKernFormat0([(65, 66, -50), (67, 68, -10)])])
		with pytest.raises(OutOfBounds):
			decompileTable('kern', data[:-2])

	def test_absolute_offset(self):
		kern = decompileTable('kern', buildKern([buildKernFormat0([(65, 66, -50)])]),
			offset=100)
		assert kern.kernPairs == {KerningPair(65, 66): -50}


class CoverageFlagsTest:

	def test_low_byte_bits(self):
		coverage = CoverageFlags(0x000F)
		assert coverage.horizontal
		assert coverage.minimum
		assert coverage.crossStream
		assert coverage.override
		assert coverage.reserved1 == 0
		assert coverage.format == 0

	def test_horizontal_only(self):
		coverage = CoverageFlags(0x0001)
		assert coverage.horizontal
		assert not coverage.minimum
		assert not coverage.crossStream
		assert not coverage.override

	def test_reserved_nibble(self):
		assert CoverageFlags(0x00F1).reserved1 == 0xF0

	def test_format_is_the_high_byte(self):
		assert CoverageFlags(0x0201).format == 2
		assert CoverageFlags(0x0001).format == 0
		assert CoverageFlags(0xFF00).format == 0xFF
