from outlineTools.misc.fileTools import guessFileType
import pytest


@pytest.mark.parametrize("data, expected", [
	(b"\x00\x01\x00\x00\x00\x05", "TTF"),
	(b"true\x00\x05", "TTF"),
	(b"OTTO\x00\x05", "OTF"),
	(b"ttcf\x00\x01", "TTC"),
	(b"wOFF\x00\x01", "WOFF"),
	(b"wOF2\x00\x01", "WOFF2"),
	(b"GIF89a", None),
	(b"\x00\x01", None),
])
def test_guessFileType(data, expected):
	assert guessFileType(data) == expected
