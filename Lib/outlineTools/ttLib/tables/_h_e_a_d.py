from .DefaultTable import DefaultTable
import logging


log = logging.getLogger(__name__)


headFormat = """
		>	# big endian
		tableVersion:       16.16F
		fontRevision:       16.16F
		checkSumAdjustment: L
		magicNumber:        L
		flags:              H
		unitsPerEm:         H
		created:            Q
		modified:           Q
		xMin:               h
		yMin:               h
		xMax:               h
		yMax:               h
		macStyle:           H
		lowestRecPPEM:      H
		fontDirectionHint:  h
		indexToLocFormat:   h
		glyphDataFormat:    h
"""

headMagicNumber = 0x5F0F3CF5


class table__h_e_a_d(DefaultTable):

	def decompile(self, reader, entry, ttFont):
		reader.unpackStruct(headFormat, entry.offset, self)
		if self.magicNumber != headMagicNumber:
			log.warning("bad 'head' magicNumber: 0x%08X", self.magicNumber)
