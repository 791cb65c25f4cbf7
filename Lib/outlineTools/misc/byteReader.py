"""outlineTools.misc.byteReader.py -- random access, big-endian reads over
an immutable font buffer.

Every read takes an explicit offset and leaves the reader untouched, so
table decoders can jump between tables while sharing one reader.
"""
from fontTools.misc import sstruct
from fontTools.misc.textTools import Tag
from outlineTools.errors import OutOfBounds
import struct


_uint8 = struct.Struct(">B")
_int8 = struct.Struct(">b")
_uint16 = struct.Struct(">H")
_int16 = struct.Struct(">h")
_uint32 = struct.Struct(">L")
_int32 = struct.Struct(">l")


class ByteReader(object):

	def __init__(self, data):
		if isinstance(data, (bytearray, memoryview)):
			data = bytes(data)
		self.data = data

	def __len__(self):
		return len(self.data)

	def __repr__(self):
		return "<%s %d bytes at %x>" % (self.__class__.__name__, len(self.data), id(self))

	def checkRange(self, offset, length):
		if offset < 0 or length < 0 or offset + length > len(self.data):
			raise OutOfBounds(
				"not enough data: reading %d bytes at offset %d, buffer is %d bytes"
				% (length, offset, len(self.data)))

	def _unpack(self, fmt, offset):
		self.checkRange(offset, fmt.size)
		return fmt.unpack_from(self.data, offset)[0]

	def readUInt8(self, offset):
		return self._unpack(_uint8, offset)

	def readInt8(self, offset):
		return self._unpack(_int8, offset)

	def readUInt16(self, offset):
		return self._unpack(_uint16, offset)

	def readInt16(self, offset):
		return self._unpack(_int16, offset)

	def readUInt32(self, offset):
		return self._unpack(_uint32, offset)

	def readInt32(self, offset):
		return self._unpack(_int32, offset)

	def readTag(self, offset):
		"""Read 4 raw bytes as a tag. Any byte values are accepted."""
		return Tag(self.readBytes(offset, 4))

	def readBytes(self, offset, length):
		self.checkRange(offset, length)
		return self.data[offset:offset + length]

	def readArray(self, typecode, offset, count):
		"""Read 'count' consecutive big-endian values of struct 'typecode'."""
		fmt = ">%d%s" % (count, typecode)
		self.checkRange(offset, struct.calcsize(fmt))
		return list(struct.unpack_from(fmt, self.data, offset))

	def unpackStruct(self, fmt, offset, obj=None):
		"""Unpack the sstruct format 'fmt' at 'offset' into 'obj' (or a
		new dict), and return it.
		"""
		data = self.readBytes(offset, sstruct.calcsize(fmt))
		return sstruct.unpack(fmt, data, obj)
