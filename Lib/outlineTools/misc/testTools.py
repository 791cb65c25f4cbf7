"""Helpers for writing unit tests: build synthetic sfnt fonts, table by
table, from plain Python values.
"""

from fontTools.misc import sstruct
from fontTools.misc.textTools import Tag, tobytes
from fontTools.ttLib import getSearchRange
from outlineTools.misc.byteReader import ByteReader
from outlineTools.ttLib import getTableClass
from outlineTools.ttLib.sfnt import (SFNTDirectoryEntry, sfntDirectoryFormat, sfntDirectorySize,
	sfntDirectoryEntryFormat, sfntDirectoryEntrySize, calcChecksum)
from outlineTools.ttLib.tables._h_e_a_d import headFormat, headMagicNumber
from outlineTools.ttLib.tables._g_l_y_f import (flagOnCurve, flagXShort,
	flagYShort, flagRepeat, flagXsame, flagYsame)
import struct


def padData(data, alignment=4):
	return data + b"\0" * (-len(data) % alignment)


def buildSfnt(tables, sfntVersion=b"\0\1\0\0", entries=None):
	"""Assemble an sfnt font from a {tag: data} dict.

	Tables are laid out in the given order, each padded to 4 bytes. Extra
	directory records can be passed as 'entries', a list of
	(tag, checkSum, offset, length) tuples appended to the directory.
	"""
	entries = list(entries or [])
	numTables = len(tables) + len(entries)
	searchRange, entrySelector, rangeShift = getSearchRange(numTables, 16)
	header = sstruct.pack(sfntDirectoryFormat, dict(
		sfntVersion=tobytes(sfntVersion, "latin-1"), numTables=numTables,
		searchRange=searchRange, entrySelector=entrySelector, rangeShift=rangeShift))
	offset = sfntDirectorySize + numTables * sfntDirectoryEntrySize
	directory = b""
	body = b""
	for tag, data in tables.items():
		if tag == 'head':
			checkSum = calcChecksum(data[:8] + b'\0\0\0\0' + data[12:])
		else:
			checkSum = calcChecksum(data)
		directory += packEntry(tag, checkSum, offset, len(data))
		padded = padData(data)
		body += padded
		offset += len(padded)
	for entry in entries:
		directory += packEntry(*entry)
	return header + directory + body


def packEntry(tag, checkSum, offset, length):
	return sstruct.pack(sfntDirectoryEntryFormat, dict(
		tag=tobytes(Tag(tag), "latin-1"), checkSum=checkSum, offset=offset, length=length))


def buildHead(unitsPerEm=1000, indexToLocFormat=0, magicNumber=headMagicNumber,
		flags=0x000B, bounds=(0, 0, 0, 0)):
	xMin, yMin, xMax, yMax = bounds
	return sstruct.pack(headFormat, dict(
		tableVersion=1.0, fontRevision=1.0, checkSumAdjustment=0,
		magicNumber=magicNumber, flags=flags, unitsPerEm=unitsPerEm,
		created=0, modified=0, xMin=xMin, yMin=yMin, xMax=xMax, yMax=yMax,
		macStyle=0, lowestRecPPEM=8, fontDirectionHint=2,
		indexToLocFormat=indexToLocFormat, glyphDataFormat=0))


def buildMaxp(numGlyphs, tableVersion=0x00005000):
	data = struct.pack(">lH", tableVersion, numGlyphs)
	if tableVersion == 0x00010000:
		data += struct.pack(">13H", 64, 4, 0, 0, 2, 0, 0, 0, 0, 64, 0, 0, 0)
	return data


# -- cmap

def buildCmap(subtables, version=0):
	"""'subtables' is a list of (platformID, platEncID, subtableData)."""
	header = struct.pack(">HH", version, len(subtables))
	offset = len(header) + 8 * len(subtables)
	records = b""
	body = b""
	for platformID, platEncID, data in subtables:
		records += struct.pack(">HHL", platformID, platEncID, offset + len(body))
		body += data
	return header + records + body


def buildCmapFormat4(segments, glyphIdArray=(), reservedPad=0, language=0):
	"""'segments' is a list of (startCode, endCode, idDelta, idRangeOffset)."""
	segCount = len(segments)
	searchRange, entrySelector, rangeShift = getSearchRange(segCount, 2)
	startCode = [s[0] for s in segments]
	endCode = [s[1] for s in segments]
	idDelta = [s[2] for s in segments]
	idRangeOffset = [s[3] for s in segments]
	body = struct.pack(">%dH" % segCount, *endCode)
	body += struct.pack(">H", reservedPad)
	body += struct.pack(">%dH" % segCount, *startCode)
	body += struct.pack(">%dh" % segCount, *idDelta)
	body += struct.pack(">%dH" % segCount, *idRangeOffset)
	body += struct.pack(">%dH" % len(glyphIdArray), *glyphIdArray)
	length = 14 + len(body)
	header = struct.pack(">7H", 4, length, language, 2 * segCount,
		searchRange, entrySelector, rangeShift)
	return header + body


def buildCmapFormat12(groups, language=0):
	"""'groups' is a list of (startCharCode, endCharCode, startGlyphID)."""
	body = b"".join(struct.pack(">3L", *group) for group in groups)
	length = 16 + len(body)
	return struct.pack(">HHLLL", 12, 0, length, language, len(groups)) + body


def buildCmapFormat6(firstCode, glyphIdArray):
	length = 10 + 2 * len(glyphIdArray)
	return struct.pack(">5H", 6, length, 0, firstCode, len(glyphIdArray)) + \
		struct.pack(">%dH" % len(glyphIdArray), *glyphIdArray)


# -- kern

def buildKern(subtables, version=0):
	return struct.pack(">HH", version, len(subtables)) + b"".join(subtables)


def buildKernFormat0(pairs, coverage=0x0001, version=0):
	"""'pairs' is a list of (left, right, value)."""
	nPairs = len(pairs)
	searchRange, entrySelector, rangeShift = getSearchRange(nPairs, 6)
	body = struct.pack(">4H", nPairs, searchRange, entrySelector, rangeShift)
	for left, right, value in sorted(pairs):
		body += struct.pack(">HHh", left, right, value)
	return struct.pack(">3H", version, 6 + len(body), coverage) + body


def buildKernSubtable(coverage, body, version=0):
	return struct.pack(">3H", version, 6 + len(body), coverage) + body


# -- glyf and loca

def _encodeCoordinate(delta, shortFlag, sameFlag):
	if delta == 0:
		return sameFlag, b""
	if -255 <= delta <= 255:
		flag = shortFlag
		if delta > 0:
			flag |= sameFlag
		return flag, struct.pack(">B", abs(delta))
	return 0, struct.pack(">h", delta)


def compileSimpleGlyph(endPtsOfContours, points, instructions=b"", bounds=None,
		useRepeat=True):
	"""Encode a simple glyph. 'points' is a list of (x, y, onCurve) with
	absolute coordinates; deltas use the smallest encoding available.
	"""
	if bounds is None:
		if points:
			xs = [p[0] for p in points]
			ys = [p[1] for p in points]
			bounds = (min(xs), min(ys), max(xs), max(ys))
		else:
			bounds = (0, 0, 0, 0)
	data = struct.pack(">5h", len(endPtsOfContours), *bounds)
	data += struct.pack(">%dH" % len(endPtsOfContours), *endPtsOfContours)
	data += struct.pack(">H", len(instructions)) + instructions

	flags = []
	xData = b""
	yData = b""
	lastX = lastY = 0
	for x, y, onCurve in points:
		xFlag, xBytes = _encodeCoordinate(x - lastX, flagXShort, flagXsame)
		yFlag, yBytes = _encodeCoordinate(y - lastY, flagYShort, flagYsame)
		flags.append(xFlag | yFlag | (flagOnCurve if onCurve else 0))
		xData += xBytes
		yData += yBytes
		lastX, lastY = x, y

	flagData = b""
	i = 0
	while i < len(flags):
		flag = flags[i]
		repeat = 0
		if useRepeat:
			while (i + repeat + 1 < len(flags) and flags[i + repeat + 1] == flag
					and repeat < 255):
				repeat += 1
		if repeat:
			flagData += struct.pack(">BB", flag | flagRepeat, repeat)
		else:
			flagData += struct.pack(">B", flag)
		i += repeat + 1

	return data + flagData + xData + yData


def compileGlyphHeader(numberOfContours, bounds=(0, 0, 0, 0)):
	return struct.pack(">5h", numberOfContours, *bounds)


def buildGlyfAndLoca(glyphs, indexToLocFormat=0):
	"""Concatenate glyph records (b"" for an empty glyph) and return the
	'glyf' data and the matching 'loca' data with len(glyphs) + 1 entries.
	"""
	glyfData = b""
	locations = []
	for glyph in glyphs:
		locations.append(len(glyfData))
		glyfData += padData(glyph)
	locations.append(len(glyfData))
	return glyfData, buildLoca(locations, indexToLocFormat)


def buildLoca(locations, indexToLocFormat=0):
	if indexToLocFormat == 0:
		return struct.pack(">%dH" % len(locations), *[l // 2 for l in locations])
	return struct.pack(">%dL" % len(locations), *locations)


def buildFont(glyphs, cmap=None, kern=None, indexToLocFormat=0, extraTables=None,
		unitsPerEm=1000):
	"""Build a complete TrueType font from a list of compiled glyphs.

	'cmap' is the 'cmap' table data; by default a format 4 subtable maps
	U+0041 onwards to glyphs 1.. (glyph 0 being .notdef).
	"""
	numGlyphs = len(glyphs)
	if cmap is None:
		segments = []
		if numGlyphs > 1:
			segments.append((0x41, 0x41 + numGlyphs - 2, -0x40, 0))
		segments.append((0xFFFF, 0xFFFF, 1, 0))
		cmap = buildCmap([(3, 1, buildCmapFormat4(segments))])
	glyf, loca = buildGlyfAndLoca(glyphs, indexToLocFormat)
	tables = {
		'head': buildHead(unitsPerEm=unitsPerEm, indexToLocFormat=indexToLocFormat),
		'maxp': buildMaxp(numGlyphs),
		'cmap': cmap,
		'loca': loca,
		'glyf': glyf,
	}
	if kern is not None:
		tables['kern'] = kern
	if extraTables:
		tables.update(extraTables)
	return buildSfnt(tables)


class FakeFont(object):
	"""A stand-in TTFont holding already decoded tables, for exercising
	one table decoder at a time.
	"""

	def __init__(self, tables=None, numGlyphs=0):
		self.tables = dict(tables or {})
		self.numGlyphs = numGlyphs

	def __getitem__(self, tag):
		return self.tables[tag]

	def __contains__(self, tag):
		return tag in self.tables


def decompileTable(tag, data, ttFont=None, offset=0):
	"""Decode 'data' as a standalone table; 'offset' bytes of padding are
	put in front of it so that absolute offsets can be checked.
	"""
	if ttFont is None:
		ttFont = FakeFont()
	reader = ByteReader(b"\0" * offset + data)
	entry = SFNTDirectoryEntry(tag, offset=offset, length=len(data))
	table = getTableClass(tag)(tag)
	table.decompile(reader, entry, ttFont)
	return table
