"""outlineTools.misc.fileTools.py -- tools for identifying font data.
"""
from fontTools.misc.textTools import Tag


def guessFileType(data):
	""" Take the leading bytes of a font, and return its file type.
	Return None if the file type can't be found.
	Supported file types: TTF, OTF, TTC, WOFF, WOFF2

		>>> guessFileType(b"\\0\\1\\0\\0\\0\\x05")
		'TTF'
		>>> guessFileType(b"wOF2")
		'WOFF2'
		>>> print(guessFileType(b"GIF89a"))
		None
	"""
	if len(data) < 4:
		return None
	head = Tag(bytes(data[:4]))
	if head == "OTTO":
		return "OTF"
	elif head == "ttcf":
		return "TTC"
	elif head in ("\0\1\0\0", "true"):
		return "TTF"
	elif head == "wOFF":
		return "WOFF"
	elif head == "wOF2":
		return "WOFF2"
	return None
