"""_g_l_y_f.py -- Converter classes for the 'glyf' table."""

from fontTools.misc import sstruct
from outlineTools.ttLib import TTLibError
from .DefaultTable import DefaultTable
import logging


log = logging.getLogger(__name__)


glyphHeaderFormat = """
		>	# big endian
		numberOfContours:	h
		xMin:				h
		yMin:				h
		xMax:				h
		yMax:				h
"""

glyphHeaderSize = sstruct.calcsize(glyphHeaderFormat)

flagOnCurve = 0x01
flagXShort = 0x02
flagYShort = 0x04
flagRepeat = 0x08
flagXsame = 0x10
flagYsame = 0x20


class table__g_l_y_f(DefaultTable):

	dependencies = ['head', 'maxp', 'loca']

	def decompile(self, reader, entry, ttFont):
		loca = ttFont['loca']
		numGlyphs = ttFont.numGlyphs
		self.glyphs = []
		# glyph ids 0..numGlyphs: the last one is the sentinel past the
		# final real glyph, and never has data of its own
		for glyphID in range(numGlyphs + 1):
			start = loca[glyphID]
			if glyphID < numGlyphs:
				end = loca[glyphID + 1]
			else:
				end = start
			if end - start < glyphHeaderSize:
				glyph = Glyph(glyphID)
			else:
				glyph = decompileGlyph(reader, loca.getGlyphOffset(glyphID, entry.offset), glyphID)
			self.glyphs.append(glyph)
		log.debug("decoded %d glyphs", len(self.glyphs))

	def __getitem__(self, glyphID):
		return self.glyphs[glyphID]

	def __len__(self):
		return len(self.glyphs)

	def __iter__(self):
		return iter(self.glyphs)


def decompileGlyph(reader, offset, glyphID):
	"""Decode the glyph record starting at absolute 'offset'."""
	if reader.readInt16(offset) > 0:
		glyph = SimpleGlyph(glyphID)
	else:
		glyph = Glyph(glyphID)
	reader.unpackStruct(glyphHeaderFormat, offset, glyph)
	if glyph.isSimple():
		glyph.contourData = ContourData()
		glyph.contourData.decompile(reader, offset + glyphHeaderSize,
			glyph.numberOfContours, glyphID)
	# composite glyph components are not decoded; only the header is kept
	return glyph


class Glyph(object):
	"""A glyph without an outline of its own: empty (no contours) or
	composite (negative numberOfContours). Only the header is decoded.
	"""

	def __init__(self, glyphID, numberOfContours=0):
		self.glyphID = glyphID
		self.numberOfContours = numberOfContours
		self.xMin = self.yMin = self.xMax = self.yMax = 0

	def isComposite(self):
		return self.numberOfContours < 0

	def isSimple(self):
		return self.numberOfContours > 0

	def __repr__(self):
		return "<%s %d: %d contours, bounds (%d, %d, %d, %d)>" % (
			self.__class__.__name__, self.glyphID, self.numberOfContours,
			self.xMin, self.yMin, self.xMax, self.yMax)


class SimpleGlyph(Glyph):

	contourData = None

	@property
	def points(self):
		return self.contourData.points


class ContourPoint(object):

	def __init__(self, flag, x=0, y=0):
		self.flag = flag
		self.onCurve = bool(flag & flagOnCurve)
		self.x = x
		self.y = y

	def __repr__(self):
		return "<%s (%d, %d)%s>" % (self.__class__.__name__, self.x, self.y,
			"" if self.onCurve else " off")

	def __eq__(self, other):
		if not isinstance(other, ContourPoint):
			return NotImplemented
		return (self.flag, self.x, self.y) == (other.flag, other.x, other.y)

	def __ne__(self, other):
		result = self.__eq__(other)
		return result if result is NotImplemented else not result


class ContourData(object):

	def __init__(self):
		self.endPtsOfContours = []
		self.instructionLength = 0
		self.instructions = b""
		self.points = []

	def decompile(self, reader, offset, numberOfContours, glyphID=None):
		"""Decode a simple glyph body at 'offset', right after the header.
		Return the offset following the last coordinate.
		"""
		self.endPtsOfContours = reader.readArray("H", offset, numberOfContours)
		offset += 2 * numberOfContours
		for i in range(1, numberOfContours):
			if self.endPtsOfContours[i] < self.endPtsOfContours[i - 1]:
				raise TTLibError("glyph %s: endPtsOfContours %s are not in ascending order"
					% (glyphID, self.endPtsOfContours))
		self.instructionLength = reader.readUInt16(offset)
		offset += 2
		self.instructions = reader.readBytes(offset, self.instructionLength)
		offset += self.instructionLength

		nPoints = self.endPtsOfContours[-1] + 1 if self.endPtsOfContours else 0

		flags = []
		# one repeat byte can produce many flags: count flags, not bytes
		while len(flags) < nPoints:
			flag = reader.readUInt8(offset)
			offset += 1
			flags.append(flag)
			if flag & flagRepeat:
				repeat = reader.readUInt8(offset)
				offset += 1
				flags.extend([flag] * repeat)
		if len(flags) != nPoints:
			raise TTLibError("glyph %s: flag repeat overruns the %d points of its contours"
				% (glyphID, nPoints))

		points = self.points = [ContourPoint(flag) for flag in flags]

		x = 0
		for point in points:
			flag = point.flag
			if flag & flagXShort:
				dx = reader.readUInt8(offset)
				offset += 1
				if not flag & flagXsame:
					dx = -dx
				x += dx
			elif not flag & flagXsame:
				x += reader.readInt16(offset)
				offset += 2
			point.x = x

		y = 0
		for point in points:
			flag = point.flag
			if flag & flagYShort:
				dy = reader.readUInt8(offset)
				offset += 1
				if not flag & flagYsame:
					dy = -dy
				y += dy
			elif not flag & flagYsame:
				y += reader.readInt16(offset)
				offset += 2
			point.y = y

		return offset

	@property
	def nPoints(self):
		return len(self.points)

	def getContours(self):
		"""Return the points split into one list per contour."""
		contours = []
		start = 0
		for end in self.endPtsOfContours:
			contours.append(self.points[start:end + 1])
			start = end + 1
		return contours
