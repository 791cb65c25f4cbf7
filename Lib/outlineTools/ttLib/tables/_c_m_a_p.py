from fontTools.misc import sstruct
from outlineTools.ttLib import MalformedCmap, UnsupportedFont
from .DefaultTable import DefaultTable
import logging


log = logging.getLogger(__name__)


# Windows platform: Unicode BMP (Symbol), Unicode BMP (UCS-2), Unicode full (UCS-4)
supportedEncodings = ((3, 0), (3, 1), (3, 10))

cmapHeaderFormat = """
		>	# big endian
		version:    H
		numTables:  H
"""

cmapHeaderSize = sstruct.calcsize(cmapHeaderFormat)

encodingRecordFormat = """
		>	# big endian
		platformID: H
		platEncID:  H
		offset:     L    # from the beginning of the 'cmap' table
"""

encodingRecordSize = sstruct.calcsize(encodingRecordFormat)


class EncodingRecord(object):

	def __init__(self, platformID=None, platEncID=None, offset=None):
		self.platformID = platformID
		self.platEncID = platEncID
		self.offset = offset

	def isSupported(self):
		return (self.platformID, self.platEncID) in supportedEncodings

	def __repr__(self):
		return "<%s platformID=%s platEncID=%s offset=%s>" % (
			self.__class__.__name__, self.platformID, self.platEncID, self.offset)


class table__c_m_a_p(DefaultTable):

	def decompile(self, reader, entry, ttFont):
		reader.unpackStruct(cmapHeaderFormat, entry.offset, self)
		self.encodingRecords = []
		self.tables = []
		self.errors = []
		# glyph index -> character code; the last assignment wins
		self.characterMap = {}
		# character code -> glyph index
		self.cmap = {}

		offset = entry.offset + cmapHeaderSize
		for i in range(self.numTables):
			record = EncodingRecord()
			reader.unpackStruct(encodingRecordFormat, offset, record)
			offset += encodingRecordSize
			self.encodingRecords.append(record)
			if not record.isSupported():
				log.debug("skipped cmap subtable (%d, %d)", record.platformID, record.platEncID)
				continue
			subtableOffset = entry.offset + record.offset
			format = reader.readUInt16(subtableOffset)
			if format not in cmap_classes:
				log.warning("cmap subtable format %d (%d, %d) is not supported",
					format, record.platformID, record.platEncID)
				continue
			subtable = cmap_classes[format]()
			subtable.platformID = record.platformID
			subtable.platEncID = record.platEncID
			try:
				subtable.decompile(reader, subtableOffset)
			except MalformedCmap as error:
				log.warning("skipped cmap subtable (%d, %d): %s",
					record.platformID, record.platEncID, error)
				self.errors.append(error)
				continue
			self.tables.append(subtable)
			for glyphID, code in subtable.mappings:
				self.characterMap[glyphID] = code
				self.cmap[code] = glyphID

		if not self.tables:
			cause = self.errors[-1] if self.errors else None
			raise UnsupportedFont(
				"font not supported: no decodable Windows Unicode 'cmap' subtable") from cause

	def getcmap(self, platformID, platEncID):
		for subtable in self.tables:
			if (subtable.platformID == platformID and
					subtable.platEncID == platEncID):
				return subtable
		return None  # not found


class CmapSubtable(object):

	def __init__(self, format):
		self.format = format
		self.platformID = None
		self.platEncID = None
		self.language = None
		# (glyph index, character code) in decoding order
		self.mappings = []

	@property
	def cmap(self):
		return dict((code, glyphID) for glyphID, code in self.mappings)

	def __repr__(self):
		return "<%s format=%d platformID=%s platEncID=%s language=%s>" % (
			self.__class__.__name__, self.format, self.platformID,
			self.platEncID, self.language)


cmap4HeaderFormat = """
		>	# big endian
		format:         H
		length:         H
		language:       H
		segCountX2:     H
		searchRange:    H
		entrySelector:  H
		rangeShift:     H
"""

cmap4HeaderSize = sstruct.calcsize(cmap4HeaderFormat)


class cmap_format_4(CmapSubtable):

	def __init__(self, format=4):
		super(cmap_format_4, self).__init__(format)

	def decompile(self, reader, offset):
		reader.unpackStruct(cmap4HeaderFormat, offset, self)
		segCount = self.segCountX2 // 2
		offset += cmap4HeaderSize

		self.endCode = reader.readArray("H", offset, segCount)
		offset += 2 * segCount
		self.reservedPad = reader.readUInt16(offset)
		offset += 2
		if self.reservedPad != 0 and (not self.endCode or self.endCode[-1] != 0xFFFF):
			raise MalformedCmap(
				"reservedPad is %d but the last endCode is not 0xFFFF" % self.reservedPad)
		self.startCode = reader.readArray("H", offset, segCount)
		offset += 2 * segCount
		self.idDelta = reader.readArray("h", offset, segCount)
		offset += 2 * segCount
		idRangeOffsetStart = offset
		self.idRangeOffset = reader.readArray("H", offset, segCount)

		mappings = self.mappings = []
		for i in range(segCount):
			start = self.startCode[i]
			end = self.endCode[i]
			idDelta = self.idDelta[i]
			idRangeOffset = self.idRangeOffset[i]
			# the indirect glyph index is addressed relative to the
			# location of this very idRangeOffset entry
			idRangeOffsetAddress = idRangeOffsetStart + 2 * i
			for code in range(start, end + 1):
				if idRangeOffset == 0:
					glyphID = (code + idDelta) % 65536
				else:
					glyphIndexAddress = idRangeOffsetAddress + idRangeOffset + 2 * (code - start)
					glyphID = reader.readUInt16(glyphIndexAddress)
				mappings.append((glyphID, code))


cmap12HeaderFormat = """
		>	# big endian
		format:     H
		reserved:   H
		length:     L
		language:   L
		nGroups:    L
"""

cmap12HeaderSize = sstruct.calcsize(cmap12HeaderFormat)


class cmap_format_12(CmapSubtable):

	def __init__(self, format=12):
		super(cmap_format_12, self).__init__(format)

	def decompile(self, reader, offset):
		reader.unpackStruct(cmap12HeaderFormat, offset, self)
		offset += cmap12HeaderSize
		groups = reader.readArray("L", offset, 3 * self.nGroups)
		self.groups = []
		mappings = self.mappings = []
		for i in range(0, len(groups), 3):
			startCharCode, endCharCode, glyphID = groups[i:i+3]
			self.groups.append((startCharCode, endCharCode, glyphID))
			for code in range(startCharCode, endCharCode + 1):
				mappings.append((glyphID, code))
				glyphID += 1


cmap_classes = {
	4: cmap_format_4,
	12: cmap_format_12,
}
