class DefaultTable(object):
	"""Raw data of a table this package doesn't decode."""

	def __init__(self, tag=None):
		if tag is None:
			tag = getTableTag(self.__class__)
		self.tableTag = tag

	def decompile(self, reader, entry, ttFont):
		self.data = entry.loadData(reader)

	def __repr__(self):
		return "<'%s' table at %x>" % (self.tableTag, id(self))


def getTableTag(klass):
	"""Return the tag for a table class named 'table__x_x_x_x'."""
	from fontTools.ttLib import identifierToTag
	name = klass.__name__
	assert name[:6] == 'table_', name
	return identifierToTag(name[6:])
