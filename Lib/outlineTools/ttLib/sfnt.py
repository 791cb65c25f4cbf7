"""ttLib/sfnt.py -- low-level module to deal with the sfnt table directory.

Defines the public class:
	SFNTReader

(Normally you don't have to use this class explicitly; it is
used automatically by ttLib.decodeFont.)

The reader works on a ByteReader holding the whole font, and only ever
reads at absolute offsets: table entries keep their 'offset' and 'length'
so that the table decoders can address the same buffer directly.
"""

from fontTools.misc import sstruct
from fontTools.misc.textTools import Tag
from outlineTools.ttLib import TTLibError, OutOfBounds
from collections import OrderedDict
import struct
import logging


log = logging.getLogger(__name__)


# -- sfnt directory helpers and cruft

sfntDirectoryFormat = """
		> # big endian
		sfntVersion:    4s
		numTables:      H    # number of tables
		searchRange:    H    # (max2 <= numTables)*16
		entrySelector:  H    # log2(max2 <= numTables)
		rangeShift:     H    # numTables*16-searchRange
"""

sfntDirectorySize = sstruct.calcsize(sfntDirectoryFormat)

sfntDirectoryEntryFormat = """
		> # big endian
		tag:            4s
		checkSum:       L
		offset:         L
		length:         L
"""

sfntDirectoryEntrySize = sstruct.calcsize(sfntDirectoryEntryFormat)

knownSfntVersions = ("\x00\x01\x00\x00", "OTTO", "true")


class SFNTDirectoryEntry(object):

	format = sfntDirectoryEntryFormat
	formatSize = sfntDirectoryEntrySize

	def __init__(self, tag=None, checkSum=0, offset=0, length=0):
		if tag is not None:
			tag = Tag(tag)
		self.tag = tag
		self.checkSum = checkSum
		self.offset = offset
		self.length = length

	def fromReader(self, reader, offset):
		reader.unpackStruct(self.format, offset, self)
		# any 4 bytes make a valid tag
		self.tag = Tag(reader.readBytes(offset, 4))

	def loadData(self, reader):
		return reader.readBytes(self.offset, self.length)

	def __repr__(self):
		if self.tag is not None:
			return "<%s '%s' at %x>" % (self.__class__.__name__, self.tag, id(self))
		else:
			return "<%s at %x>" % (self.__class__.__name__, id(self))


class SFNTReader(object):

	flavor = None
	directoryFormat = sfntDirectoryFormat
	directorySize = sfntDirectorySize
	DirectoryEntry = SFNTDirectoryEntry

	def __init__(self, reader, checkChecksums=1):
		self.reader = reader
		self.checkChecksums = checkChecksums
		self._readDirectory()

	def _readDirectory(self):
		if len(self.reader) < self.directorySize:
			raise OutOfBounds("Not a TrueType or OpenType font (not enough data)")
		self.reader.unpackStruct(self.directoryFormat, 0, self)
		self.sfntVersion = Tag(self.reader.readBytes(0, 4))
		if self.sfntVersion not in knownSfntVersions:
			log.warning("unknown sfntVersion %r", self.sfntVersion)
		self._readDirectoryEntries()

	def _readDirectoryEntries(self):
		self.tables = OrderedDict()
		offset = self.directorySize
		for i in range(self.numTables):
			entry = self.DirectoryEntry()
			entry.fromReader(self.reader, offset)
			offset += self.DirectoryEntry.formatSize
			if entry.offset + entry.length > len(self.reader):
				raise OutOfBounds(
					"'%s' table extends past the end of the font: offset %d, length %d, "
					"font is %d bytes" % (entry.tag, entry.offset, entry.length, len(self.reader)))
			if entry.tag in self.tables:
				log.debug("duplicate '%s' table entry; using the last one", entry.tag)
			self.tables[entry.tag] = entry

	def has_key(self, tag):
		return tag in self.tables

	__contains__ = has_key

	def keys(self):
		return self.tables.keys()

	def __getitem__(self, tag):
		"""Fetch the raw table data."""
		entry = self.tables[Tag(tag)]
		data = entry.loadData(self.reader)
		if self.checkChecksums:
			if tag == 'head':
				# Beh: we have to special-case the 'head' table.
				checksum = calcChecksum(data[:8] + b'\0\0\0\0' + data[12:])
			else:
				checksum = calcChecksum(data)
			if checksum != entry.checkSum:
				if self.checkChecksums > 1:
					# Be obnoxious, and barf when it's wrong
					raise TTLibError("bad checksum for '%s' table" % tag)
				# Be friendly, and just log a warning.
				log.warning("bad checksum for '%s' table", tag)
		return data

	def verifyChecksums(self):
		for tag in self.keys():
			self[tag]

	@property
	def tableOrder(self):
		"""Return list of table tags sorted by offset."""
		return sorted(self.tables.keys(), key=lambda t: self.tables[t].offset)


def calcChecksum(data):
	"""Calculate the checksum for an arbitrary block of data.

	If the data length is not a multiple of four, it assumes
	it is to be padded with null byte.

		>>> print(calcChecksum(b"abcd"))
		1633837924
		>>> print(calcChecksum(b"abcdxyz"))
		3655064932
	"""
	remainder = len(data) % 4
	if remainder:
		data += b"\0" * (4 - remainder)
	value = 0
	blockSize = 4096
	assert blockSize % 4 == 0
	for i in range(0, len(data), blockSize):
		block = data[i:i+blockSize]
		longs = struct.unpack(">%dL" % (len(block) // 4), block)
		value = (value + sum(longs)) & 0xffffffff
	return value
