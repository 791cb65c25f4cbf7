"""Exceptions raised while decoding sfnt data.

They are re-exported from outlineTools.ttLib; this module only exists so
that low-level helpers in outlineTools.misc can raise them without
importing the ttLib package.
"""


class TTLibError(Exception): pass


class OutOfBounds(TTLibError, IndexError):
	"""A read reached past the end of the font data."""


class MissingTable(TTLibError, KeyError):

	def __str__(self):
		return Exception.__str__(self)


class UnsupportedKerningFormat(TTLibError): pass


class MalformedCmap(TTLibError): pass


class UnsupportedFont(TTLibError):
	"""No usable 'cmap' subtable was found.

	decodeFont() raises it only after all other tables were decoded; the
	partially usable TTFont is then available as the 'font' attribute.
	"""

	def __init__(self, *args, font=None):
		super(UnsupportedFont, self).__init__(*args)
		self.font = font
