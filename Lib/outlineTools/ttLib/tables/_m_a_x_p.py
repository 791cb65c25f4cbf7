from fontTools.misc import sstruct
from .DefaultTable import DefaultTable
import logging


log = logging.getLogger(__name__)


maxpFormat_0_5 = """
		>	# big endian
		tableVersion:           i
		numGlyphs:              H
"""

maxpFormat_1_0_add = """
		>	# big endian
		maxPoints:              H
		maxContours:            H
		maxCompositePoints:     H
		maxCompositeContours:   H
		maxZones:               H
		maxTwilightPoints:      H
		maxStorage:             H
		maxFunctionDefs:        H
		maxInstructionDefs:     H
		maxStackElements:       H
		maxSizeOfInstructions:  H
		maxComponentElements:   H
		maxComponentDepth:      H
"""


class table__m_a_x_p(DefaultTable):

	def decompile(self, reader, entry, ttFont):
		reader.unpackStruct(maxpFormat_0_5, entry.offset, self)
		if self.tableVersion == 0x00010000:
			offset = entry.offset + sstruct.calcsize(maxpFormat_0_5)
			reader.unpackStruct(maxpFormat_1_0_add, offset, self)
		elif self.tableVersion != 0x00005000:
			log.warning("unknown 'maxp' version: 0x%08x", self.tableVersion)
		ttFont.numGlyphs = self.numGlyphs
