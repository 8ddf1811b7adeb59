# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
import bisect
import re

# data-line of any range-list file of the ucd (https://www.unicode.org/reports/tr44/#Format_Conventions)
#	[first](..[last])? (; [label])? (# [comment])?
_hexRangeLine = re.compile(r'^([0-9a-f]+)(?:\.\.([^\s;#]*))?\s*(?:;([^#]*))?(?:#(.*))?$', re.IGNORECASE)

# data-line of CaseFolding.txt: [code]; [status]; [mapping]; # [name]
_caseFoldingLine = re.compile(r'^([0-9a-f]+);\s*([CFST]);\s*([0-9a-f ]+);', re.IGNORECASE)
_hexDigits = re.compile(r'^[0-9a-f]+$', re.IGNORECASE)

class Hex:
	@staticmethod
	def parse(field: str) -> int|None:
		field = field.strip()
		if _hexDigits.match(field) is None:
			return None
		return int(field, 16)
	@staticmethod
	def parseList(field: str) -> tuple[int, ...]|None:
		values = tuple(Hex.parse(v) for v in field.split())
		if any(v is None for v in values):
			return None
		return values

def _Lines(content: str) -> list[str]:
	return content.splitlines()

class CodepointRange:
	def __init__(self, start: int, end: int, label: str, comment: str|None = None) -> None:
		if start > end:
			raise RuntimeError(f'Malformed range encountered [{start:05x}-{end:05x}]')
		self._start = start
		self._end = end
		self._label = label
		self._comment = comment
	def __repr__(self) -> str:
		return f'[{self._start:05x}-{self._end:05x}] -> {self._label}'
	@property
	def start(self) -> int:
		return self._start
	@property
	def end(self) -> int:
		return self._end
	@property
	def label(self) -> str:
		return self._label
	@property
	def comment(self) -> str|None:
		return self._comment
	def codepoints(self) -> range:
		return range(self._start, self._end + 1)

def ReadHexRanges(content: str) -> list[CodepointRange]:
	out: list[CodepointRange] = []
	for line in _Lines(content):
		matches = _hexRangeLine.match(line.strip())
		if matches is None:
			continue
		start = int(matches.group(1), 16)
		end = (None if matches.group(2) is None else Hex.parse(matches.group(2)))

		# a malformed range-end is treated as absent, leaving the line as a single codepoint
		if end is None:
			end = start

		# check if the line describes a reversed range, which cannot be a data line
		if start > end:
			continue
		label = ('' if matches.group(3) is None else matches.group(3).strip())
		comment = (None if matches.group(4) is None else matches.group(4).strip())
		out.append(CodepointRange(start, end, label, comment))
	return out

def ExpandRanges(ranges: list[CodepointRange], assignValue) -> dict:
	# expand the ranges in order, such that later ranges overwrite earlier ones
	out = {}
	for r in ranges:
		value = assignValue(r.label)
		if value is None:
			continue
		for cp in r.codepoints():
			out[cp] = value
	return out

class CaseFoldingEntry:
	def __init__(self, code: int, status: str, mapping: tuple[int, ...]) -> None:
		self._code = code
		self._status = status
		self._mapping = mapping
	@property
	def code(self) -> int:
		return self._code
	@property
	def status(self) -> str:
		return self._status
	@property
	def mapping(self) -> tuple[int, ...]:
		return self._mapping

def ReadCaseFolding(content: str) -> list[CaseFoldingEntry]:
	out: list[CaseFoldingEntry] = []
	for line in _Lines(content):
		matches = _caseFoldingLine.match(line)
		if matches is None:
			continue
		mapping = Hex.parseList(matches.group(3))
		if mapping is None or len(mapping) == 0:
			continue
		out.append(CaseFoldingEntry(int(matches.group(1), 16), matches.group(2).upper(), mapping))
	return out

def SimpleFolding(entries: list[CaseFoldingEntry]) -> dict[int, int]:
	# common and simple foldings are the single-codepoint foldings (https://www.unicode.org/reports/tr44/#CaseFolding.txt)
	return { e.code: e.mapping[0] for e in entries if e.status in ('C', 'S') }

class Decomposition:
	def __init__(self, tag: str|None, mapping: tuple[int, ...]) -> None:
		self._tag = tag
		self._mapping = mapping
	@staticmethod
	def parse(field: str) -> 'Decomposition|None':
		field = field.strip()
		tag = None

		# check if the field starts with a formatting tag (compatibility-mapping)
		if field.startswith('<'):
			end = field.find('>')
			if end < 0:
				return None
			tag, field = field[1:end], field[end + 1:]
		mapping = Hex.parseList(field)
		if mapping is None:
			return None
		return Decomposition(tag, mapping)
	@property
	def tag(self) -> str|None:
		return self._tag
	@property
	def mapping(self) -> tuple[int, ...]:
		return self._mapping
	@property
	def kind(self) -> str:
		return ('CANONICAL' if self._tag is None else self._tag.upper())

def _OptionalInt(field: str) -> int|None:
	return (int(field) if field.isdigit() else None)

def _OptionalStr(field: str) -> str|None:
	return (field if field != '' else None)

class UnicodeRecord:
	FieldCount: int = 15

	def __init__(self, fields: list[str], code: int, decomposition: Decomposition|None, caseMaps: list[int|None]) -> None:
		self._code = code
		self._name = fields[1]
		self._category = fields[2]
		self._combiningClass = _OptionalInt(fields[3])
		self._bidiClass = fields[4]
		self._decomposition = decomposition
		self._decimalDigit = _OptionalInt(fields[6])
		self._digit = _OptionalInt(fields[7])
		self._numeric = _OptionalStr(fields[8])
		self._bidiMirrored = (fields[9] == 'Y')
		self._unicode1Name = _OptionalStr(fields[10])
		self._isoComment = _OptionalStr(fields[11])
		self._upper, self._lower, self._title = caseMaps
		self._fields = fields
	@staticmethod
	def parse(line: str) -> 'UnicodeRecord|None':
		fields = [f.strip() for f in line.split(';')]
		if len(fields) != UnicodeRecord.FieldCount:
			return None

		# parse the code and all hex-fields (mismatching fields mark the line as not-data)
		code = Hex.parse(fields[0])
		if code is None:
			return None
		decomposition = None
		if fields[5] != '':
			decomposition = Decomposition.parse(fields[5])
			if decomposition is None:
				return None
		caseMaps = [Hex.parse(f) if f != '' else None for f in fields[12:15]]
		if any(m is None and f != '' for m, f in zip(caseMaps, fields[12:15])):
			return None
		return UnicodeRecord(fields, code, decomposition, caseMaps)
	def withCode(self, code: int, name: str) -> 'UnicodeRecord':
		return UnicodeRecord([f'{code:04X}', name] + self._fields[2:], code, self._decomposition, [self._upper, self._lower, self._title])
	@property
	def code(self) -> int:
		return self._code
	@property
	def name(self) -> str:
		return self._name
	@property
	def category(self) -> str:
		return self._category
	@property
	def combiningClass(self) -> int|None:
		return self._combiningClass
	@property
	def bidiClass(self) -> str:
		return self._bidiClass
	@property
	def decomposition(self) -> Decomposition|None:
		return self._decomposition
	@property
	def decompositionType(self) -> str|None:
		return (None if self._decomposition is None else self._decomposition.tag)
	@property
	def decompositionMapping(self) -> tuple[int, ...]|None:
		return (None if self._decomposition is None else self._decomposition.mapping)
	@property
	def decimalDigit(self) -> int|None:
		return self._decimalDigit
	@property
	def digit(self) -> int|None:
		return self._digit
	@property
	def numeric(self) -> str|None:
		return self._numeric
	@property
	def bidiMirrored(self) -> bool:
		return self._bidiMirrored
	@property
	def unicode1Name(self) -> str|None:
		return self._unicode1Name
	@property
	def isoComment(self) -> str|None:
		return self._isoComment
	@property
	def simpleUppercase(self) -> int|None:
		return self._upper
	@property
	def simpleLowercase(self) -> int|None:
		return self._lower
	@property
	def simpleTitlecase(self) -> int|None:
		return self._title

class UnicodeData:
	def __init__(self, records: dict[int, UnicodeRecord], legacyRanges: list[tuple[int, int, str]]) -> None:
		self._records = records
		self._legacy = sorted(legacyRanges)
	@property
	def records(self) -> dict[int, UnicodeRecord]:
		return self._records
	@property
	def legacyRanges(self) -> list[tuple[int, int, str]]:
		return self._legacy
	def lookup(self, cp: int) -> UnicodeRecord|None:
		record = self._records.get(cp)
		if record is not None:
			return record

		# check if the codepoint lies within a legacy range and derive its record from the first line
		index = bisect.bisect_right(self._legacy, cp, key=lambda r: r[0]) - 1
		if index < 0 or cp > self._legacy[index][1]:
			return None
		first, _, name = self._legacy[index]
		return self._records[first].withCode(cp, name)
	def codepoints(self) -> list[int]:
		out = set(self._records)
		for first, last, _ in self._legacy:
			out.update(range(first, last + 1))
		return sorted(out)

def ReadUnicodeData(content: str, legacyRanges: bool = True) -> UnicodeData:
	records: dict[int, UnicodeRecord] = {}
	ranges: list[tuple[int, int, str]] = []
	legacyState = None
	for line in _Lines(content):
		record = UnicodeRecord.parse(line)
		if record is None:
			continue
		records[record.code] = record

		# check if a legacy range has been started or closed (https://www.unicode.org/reports/tr44/#Code_Point_Ranges)
		if legacyState is not None:
			if not record.name.endswith(', Last>') or record.name[:-7] != legacyState.name[:-8] or record.category != legacyState.category:
				raise RuntimeError(f'Legacy range not closed properly [{record.code:06x}]')
			ranges.append((legacyState.code, record.code, f'{legacyState.name[:-8]}>'))
			legacyState = None
		elif legacyRanges and record.name.endswith(', First>'):
			legacyState = record
	if legacyState is not None:
		raise RuntimeError(f'Half-open legacy state encountered [{legacyState.code:06x}]')
	return UnicodeData(records, ranges)

def ReadCodepoints(content: str) -> list[int]:
	# flatten a range-list file (i.e. CompositionExclusions.txt) to the contained codepoints
	out: list[int] = []
	for r in ReadHexRanges(content):
		out += r.codepoints()
	return out
