from outlineTools.ttLib import TTLibError
from .DefaultTable import DefaultTable
import logging


log = logging.getLogger(__name__)


class table__l_o_c_a(DefaultTable):

	dependencies = ['head', 'maxp']

	def decompile(self, reader, entry, ttFont):
		longFormat = ttFont['head'].indexToLocFormat
		# one extra entry marks the end of the last glyph
		count = ttFont.numGlyphs + 1
		if longFormat == 0:
			# short offsets store half the real byte offset
			locations = [2 * l for l in reader.readArray("H", entry.offset, count)]
		elif longFormat == 1:
			locations = reader.readArray("L", entry.offset, count)
		else:
			raise TTLibError("unknown 'indexToLocFormat': %d" % longFormat)
		self.locations = locations
		for i in range(1, count):
			if locations[i] < locations[i-1]:
				log.warning("'loca' offsets are not in ascending order at glyph %d", i - 1)
				break

	def getGlyphOffset(self, glyphID, glyfOffset):
		"""Return the absolute offset of 'glyphID' in a 'glyf' table starting
		at 'glyfOffset'.
		"""
		return glyfOffset + self.locations[glyphID]

	def __getitem__(self, index):
		return self.locations[index]

	def __len__(self):
		return len(self.locations)
