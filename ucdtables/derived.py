# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
from ucdtables.parse import CodepointRange, UnicodeData, UnicodeRecord

class DerivedSets:
	Names: tuple[str, ...] = ('Uppercase', 'Lowercase')

	def __init__(self, sets: dict[str, frozenset[int]]) -> None:
		self._sets = sets
	@staticmethod
	def build(ranges: list[CodepointRange]) -> 'DerivedSets':
		sets: dict[str, set[int]] = { name: set() for name in DerivedSets.Names }

		# expand all ranges of the relevant derived properties (https://www.unicode.org/reports/tr44/#Uppercase)
		for r in ranges:
			if r.label in sets:
				sets[r.label].update(r.codepoints())
		return DerivedSets({ name: frozenset(values) for name, values in sets.items() })
	@property
	def uppercase(self) -> frozenset[int]:
		return self._sets['Uppercase']
	@property
	def lowercase(self) -> frozenset[int]:
		return self._sets['Lowercase']

class EnrichedRecord:
	def __init__(self, record: UnicodeRecord, derived: DerivedSets) -> None:
		if not isinstance(derived, DerivedSets):
			raise RuntimeError('Enriched records require fully built derived sets')
		upper, lower, title = record.simpleUppercase, record.simpleLowercase, record.simpleTitlecase

		# backfill the implicit mappings of cased characters without explicit mappings
		if upper is None and lower is None:
			if record.code in derived.lowercase:
				upper = record.code
			if record.code in derived.uppercase:
				lower = record.code
		if title is None:
			title = upper

		self._record = record
		self._upper = upper
		self._lower = lower
		self._title = title
	@property
	def record(self) -> UnicodeRecord:
		return self._record
	@property
	def code(self) -> int:
		return self._record.code
	@property
	def category(self) -> str:
		return self._record.category
	@property
	def uppercase(self) -> int|None:
		return self._upper
	@property
	def lowercase(self) -> int|None:
		return self._lower
	@property
	def titlecase(self) -> int|None:
		return self._title

class EnrichedData:
	def __init__(self, data: UnicodeData, derived: DerivedSets) -> None:
		self._data = data
		self._derived = derived
		self._records = { code: EnrichedRecord(record, derived) for code, record in data.records.items() }
	def lookup(self, cp: int) -> EnrichedRecord|None:
		record = self._records.get(cp)
		if record is not None:
			return record

		# legacy-range interiors are enriched on demand, as they are not stored explicitly
		record = self._data.lookup(cp)
		return (None if record is None else EnrichedRecord(record, self._derived))
	def codepoints(self) -> list[int]:
		return self._data.codepoints()
