#! /usr/bin/env python

from setuptools import setup, find_packages


# Trove classifiers for PyPI
classifiers = {"classifiers": [
	"Development Status :: 4 - Beta",
	"Environment :: Other Environment",
	"Intended Audience :: Developers",
	"License :: OSI Approved :: BSD License",
	"Natural Language :: English",
	"Operating System :: OS Independent",
	"Programming Language :: Python",
	"Programming Language :: Python :: 3",
	"Topic :: Multimedia :: Graphics",
	"Topic :: Text Processing :: Fonts",
]}

long_description = """\
outlineTools decodes TrueType fonts into plain Python objects: the sfnt
table directory, the 'head' and 'maxp' metadata, the 'cmap' character
mapping (formats 4 and 12), 'kern' format 0 pairs and the quadratic
outlines of simple glyphs from the 'glyf' and 'loca' tables.
"""


def guess_next_dev_version(version):
	""" If the distance from the last version tag is N != 0, increase the
	last number by one, and append '.devN' suffix. Else return the version tag
	as is.

	Note: The version tag must be two to three non-negative integer values,
	separated by dots: MAJOR.MINOR[.MICRO].
	When 'MICRO' is omitted, it's assumed to be 0.
	"""
	if version.exact:
		return version.format_with("{tag}")
	else:
		import re

		tag = str(version.tag)
		version_tag_re = re.compile(r"^([0-9]+.[0-9]+)(?:.([0-9]+))?$")
		try:
			major_minor, micro = version_tag_re.match(tag).groups()
		except AttributeError:
			raise ValueError(
				'Invalid version tag: %r. It must match MAJOR.MINOR[.MICRO]' % tag)
		return '%s.%d.dev%s' % (
			major_minor, int(micro or '0') + 1, version.distance)


def my_scm_version():
	return {
		"write_to": "Lib/outlineTools/version.py",
		"version_scheme": guess_next_dev_version,
		# building from an unpacked source tree without git metadata
		"fallback_version": "1.0.0",
	}


setup(
	name="outlinetools",
	use_scm_version=my_scm_version,
	description="Decode TrueType glyph outlines, character maps and kerning",
	license="OpenSource, BSD-style",
	platforms=["Any"],
	long_description=long_description,
	package_dir={'': 'Lib'},
	packages=find_packages("Lib"),
	python_requires=">=3.8",
	setup_requires=[
		"setuptools_scm>=1.11.1",
	],
	install_requires=[
		"fonttools>=4.0",
		"aiofiles",
	],
	extras_require={
		"testing": [
			"pytest",
		],
	},
	**classifiers
)
