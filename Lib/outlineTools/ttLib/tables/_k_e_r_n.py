from fontTools.misc import sstruct
from outlineTools.ttLib import UnsupportedKerningFormat
from .DefaultTable import DefaultTable
from collections import namedtuple
import logging


log = logging.getLogger(__name__)


# Keys are glyph indices, not character codes. (a, b) and (b, a) are
# distinct pairs.
KerningPair = namedtuple("KerningPair", ["leftCharacter", "rightCharacter"])


kernHeaderFormat = """
		>	# big endian
		version:    H
		nTables:    H
"""

kernSubtableHeaderFormat = """
		>	# big endian
		version:    H
		length:     H
		coverage:   H
"""

kernSubtableHeaderSize = sstruct.calcsize(kernSubtableHeaderFormat)

kernFormat0Format = """
		>	# big endian
		nPairs:         H
		searchRange:    H
		entrySelector:  H
		rangeShift:     H
"""

kernFormat0Size = sstruct.calcsize(kernFormat0Format)

kernPairSize = 6


class table__k_e_r_n(DefaultTable):

	def decompile(self, reader, entry, ttFont):
		reader.unpackStruct(kernHeaderFormat, entry.offset, self)
		self.kernTables = []
		self.errors = []
		if self.version == 1:
			# the first 16 bits of a 32-bit 1.0 version: Apple's 'kern'
			error = UnsupportedKerningFormat("Apple 'kern' table version 1.0 is not supported")
			log.warning("%s", error)
			self.errors.append(error)
			self.nTables = 0
			return
		offset = entry.offset + sstruct.calcsize(kernHeaderFormat)
		for i in range(self.nTables):
			subtable = KernTable_format_0()
			try:
				offset += subtable.decompile(reader, offset)
			except UnsupportedKerningFormat as error:
				log.warning("skipped 'kern' subtable %d: %s", i, error)
				self.errors.append(error)
				offset += subtable.length
				continue
			self.kernTables.append(subtable)

	@property
	def kernPairs(self):
		"""Return the pairs of all subtables; later subtables win."""
		pairs = {}
		for subtable in self.kernTables:
			pairs.update(subtable.kernTable)
		return pairs


class CoverageFlags(object):

	def __init__(self, coverage=0):
		lowByte = coverage & 0xFF
		self.horizontal = bool(lowByte & 0x01)
		self.minimum = bool(lowByte & 0x02)
		self.crossStream = bool(lowByte & 0x04)
		self.override = bool(lowByte & 0x08)
		self.reserved1 = lowByte & 0xF0  # bits 4-7
		self.format = coverage >> 8

	def __repr__(self):
		return ("<%s format=%d horizontal=%s minimum=%s crossStream=%s override=%s>"
			% (self.__class__.__name__, self.format, self.horizontal, self.minimum,
			self.crossStream, self.override))


class KernTable_format_0(object):

	format = 0

	def decompile(self, reader, offset):
		"""Decode the subtable at 'offset' and return its size in bytes."""
		reader.unpackStruct(kernSubtableHeaderFormat, offset, self)
		self.coverage = CoverageFlags(self.coverage)
		if self.coverage.format != self.format:
			raise UnsupportedKerningFormat(
				"cannot read format %d kerning table" % self.coverage.format)
		offset += kernSubtableHeaderSize
		reader.unpackStruct(kernFormat0Format, offset, self)
		offset += kernFormat0Size
		values = reader.readArray("H", offset, self.nPairs * 3)
		kernTable = self.kernTable = {}
		for i in range(0, len(values), 3):
			left, right, value = values[i:i+3]
			if value >= 0x8000:
				value -= 0x10000
			kernTable[KerningPair(left, right)] = value
		size = kernSubtableHeaderSize + kernFormat0Size + self.nPairs * kernPairSize
		if size & 0xFFFF != self.length:
			log.debug("'kern' subtable length %d doesn't match its %d pairs", self.length, self.nPairs)
		return size

	def __getitem__(self, pair):
		return self.kernTable[KerningPair(*pair)]

	def __contains__(self, pair):
		return KerningPair(*pair) in self.kernTable
