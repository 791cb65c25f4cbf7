from outlineTools.misc.byteReader import ByteReader
from outlineTools.misc.fileTools import guessFileType
from outlineTools.ttLib import (TTLibError, MissingTable, UnsupportedFont,
	getTableClass)
from outlineTools.ttLib.sfnt import SFNTReader
import aiofiles
import logging


log = logging.getLogger(__name__)


requiredTables = ('head', 'maxp', 'cmap', 'loca', 'glyf')
optionalTables = ('kern',)


class TTFont(object):

	"""The decoded representation of a TrueType font.

	Built by decodeFont() from a complete byte buffer; each table is
	decoded into an object reachable with font[tag]. The font itself is
	passed to every table decoder, so tables can look up the ones they
	depend on ('glyf' needs 'head', 'maxp' and 'loca').
	"""

	def __init__(self, reader, checkChecksums=0):
		self.reader = SFNTReader(reader, checkChecksums)
		self.tables = {}
		self.numGlyphs = 0

	@property
	def sfntVersion(self):
		return self.reader.sfntVersion

	@property
	def numTables(self):
		return self.reader.numTables

	def keys(self):
		return list(self.reader.keys())

	def has_key(self, tag):
		return tag in self.reader

	__contains__ = has_key

	def __getitem__(self, tag):
		if tag not in self.tables:
			if tag not in self.reader:
				raise MissingTable("'%s' table not found" % tag)
			self._decompileTable(tag)
		return self.tables[tag]

	def _decompileTable(self, tag):
		tableClass = getTableClass(tag)
		for dependency in getattr(tableClass, 'dependencies', ()):
			self[dependency]
		log.debug("Decompiling '%s' table", tag)
		table = tableClass(tag)
		self.tables[tag] = table
		try:
			table.decompile(self.reader.reader, self.reader.tables[tag], self)
		except UnsupportedFont:
			# the table is complete, only empty
			raise
		except Exception:
			del self.tables[tag]
			raise
		return table

	@property
	def glyphs(self):
		return self['glyf'].glyphs

	def getGlyph(self, glyphID):
		return self['glyf'][glyphID]

	@property
	def characterMap(self):
		"""Glyph index -> character code."""
		return self['cmap'].characterMap

	def getBestCmap(self):
		"""Character code -> glyph index."""
		return self['cmap'].cmap

	def getGlyphForCharacter(self, code):
		glyphID = self.getBestCmap().get(code)
		if glyphID is None or glyphID >= len(self.glyphs):
			return None
		return self.glyphs[glyphID]

	@property
	def kerningPairs(self):
		"""KerningPair -> adjustment, or None when the font has no 'kern'."""
		if 'kern' not in self:
			return None
		return self['kern'].kernPairs

	def getKerning(self, left, right, default=0):
		pairs = self.kerningPairs
		if not pairs:
			return default
		return pairs.get((left, right), default)

	def __repr__(self):
		return "<%s %r: %d tables, %d glyphs at %x>" % (self.__class__.__name__,
			self.sfntVersion, self.numTables, self.numGlyphs, id(self))


def decodeFont(data, checkChecksums=0):
	"""Decode a complete sfnt font held in 'data' and return a TTFont.

	'checkChecksums' 0: don't check table checksums; 1: log a warning on
	mismatch; 2: raise TTLibError.

	Raises UnsupportedFont, with the otherwise decoded font in its 'font'
	attribute, when the 'cmap' table holds no usable subtable.
	"""
	flavor = guessFileType(data)
	if flavor in ("WOFF", "WOFF2", "TTC"):
		raise TTLibError("%s fonts are not supported" % flavor)
	font = TTFont(ByteReader(data), checkChecksums)
	if checkChecksums:
		font.reader.verifyChecksums()
	for tag in requiredTables:
		if tag not in font:
			raise MissingTable("required '%s' table not found" % tag)

	font['head']
	font['maxp']
	for tag in optionalTables:
		if tag in font:
			font[tag]
	unsupported = None
	try:
		font['cmap']
	except UnsupportedFont as error:
		log.warning("%s", error)
		unsupported = error
	font['loca']
	font['glyf']
	for tag in font.reader.tableOrder:
		if tag not in font.tables:
			font[tag]

	if unsupported is not None:
		unsupported.font = font
		raise unsupported
	return font


async def loadFont(path, **kwargs):
	"""Read the font file at 'path' and decode it; see decodeFont()."""
	async with aiofiles.open(path, "rb") as f:
		data = await f.read()
	return decodeFont(data, **kwargs)
