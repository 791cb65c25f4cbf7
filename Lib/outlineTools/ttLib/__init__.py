"""outlineTools.ttLib -- a package for decoding TrueType/OpenType outlines.

The main entry points are decodeFont() and loadFont(), which turn an sfnt
byte buffer (or a path to one) into a TTFont instance:

	>>> from outlineTools.ttLib import decodeFont
	>>> font = decodeFont(data)
	>>> font.numGlyphs
	2
	>>> font['head'].unitsPerEm
	1000
	>>> glyph = font.getGlyphForCharacter(ord("A"))
	>>> [(p.x, p.y, p.onCurve) for p in glyph.contourData.points]
	[(0, 0, True), (0, 700, True), (500, 700, True), (500, 0, True)]

From an async context, 'font = await loadFont(path)' reads the file first.
"""

from outlineTools.errors import (TTLibError, OutOfBounds, MissingTable,
	UnsupportedKerningFormat, MalformedCmap, UnsupportedFont)
from fontTools.ttLib import tagToIdentifier
import importlib
import logging


log = logging.getLogger(__name__)


def getTableModule(tag):
	"""Fetch the module containing the decoder for 'tag', or None."""
	tableName = tagToIdentifier(tag)
	try:
		return importlib.import_module("outlineTools.ttLib.tables." + tableName)
	except ImportError:
		return None


def getTableClass(tag):
	"""Fetch the decoder class for 'tag', falling back to DefaultTable."""
	module = getTableModule(tag)
	tableClass = None
	if module is not None:
		tableClass = getattr(module, "table_" + tagToIdentifier(tag), None)
	if tableClass is None:
		from outlineTools.ttLib.tables.DefaultTable import DefaultTable
		tableClass = DefaultTable
	return tableClass


from outlineTools.ttLib.ttFont import TTFont, decodeFont, loadFont
