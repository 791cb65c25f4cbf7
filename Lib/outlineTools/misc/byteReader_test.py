from outlineTools.misc.byteReader import ByteReader
from outlineTools.ttLib import OutOfBounds, TTLibError
import pytest


DATA = b"\x01\x02\xff\xfe\x80\x00\x00\x01glyf"


@pytest.fixture
def reader():
	return ByteReader(DATA)


class ByteReaderTest:

	def test_fixed_width_reads(self, reader):
		assert reader.readUInt8(0) == 0x01
		assert reader.readInt8(2) == -1
		assert reader.readUInt16(0) == 0x0102
		assert reader.readUInt16(2) == 0xfffe
		assert reader.readInt16(2) == -2
		assert reader.readUInt32(4) == 0x80000001
		assert reader.readInt32(4) == -0x7fffffff

	def test_reads_do_not_move(self, reader):
		assert reader.readUInt16(2) == reader.readUInt16(2)
		assert reader.readUInt8(0) == 1

	def test_read_tag(self, reader):
		assert reader.readTag(8) == "glyf"
		# any byte values make a tag
		assert reader.readTag(2) == "\xff\xfe\x80\x00"

	def test_read_bytes_and_array(self, reader):
		assert reader.readBytes(8, 4) == b"glyf"
		assert reader.readBytes(12, 0) == b""
		assert reader.readArray("H", 0, 2) == [0x0102, 0xfffe]
		assert reader.readArray("h", 2, 1) == [-2]

	def test_unpack_struct(self, reader):
		fmt = """
			> # big endian
			first:  H
			second: h
		"""
		assert reader.unpackStruct(fmt, 0) == {"first": 0x0102, "second": -2}

	@pytest.mark.parametrize("method, offset", [
		("readUInt8", 12),
		("readUInt16", 11),
		("readInt16", 11),
		("readUInt32", 9),
		("readInt32", 10),
		("readTag", 9),
		("readUInt8", -1),
	])
	def test_out_of_bounds(self, reader, method, offset):
		with pytest.raises(OutOfBounds) as excinfo:
			getattr(reader, method)(offset)
		assert "not enough data" in str(excinfo.value)

	def test_out_of_bounds_is_ttlib_and_index_error(self, reader):
		with pytest.raises(TTLibError):
			reader.readBytes(10, 3)
		with pytest.raises(IndexError):
			reader.readArray("L", 8, 2)

	def test_accepts_bytearray(self):
		reader = ByteReader(bytearray(b"\x00\x2a"))
		assert reader.readUInt16(0) == 42
		assert len(reader) == 2
