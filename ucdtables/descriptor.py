# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
from ucdtables.derived import EnrichedData, EnrichedRecord

CodepointFirst: int = 0
CodepointLast: int = 0x10ffff

# sentinel of absent simple case-mappings in the descriptors
MappingAbsent: int = -1

def Utf8Length(cp: int) -> int:
	if cp < 0:
		return 0
	if cp < 0x80:
		return 1
	if cp < 0x800:
		return 2
	if cp < 0x10000:
		return 3
	if cp <= CodepointLast:
		return 4
	return 0

# display width decision table (https://www.unicode.org/reports/tr11)
class WidthTable:
	ZeroWidthCategories: tuple[str, ...] = ('Me', 'Cc', 'Cf', 'Cs', 'Zp')
	ClassWidths: dict[str, int] = { 'W': 2, 'F': 2, 'Na': 1, 'H': 1, 'A': -1 }
	AmbiguousWidth: int = 1
	# the Mn exception for the soft-hyphen, with the 16.0.0 data it is Cf and therefore zero-width
	SoftHyphen: int = 0x00ad

	def __init__(self, eastAsianWidths: dict[int, str]) -> None:
		self._eaWidths = eastAsianWidths
	@property
	def eastAsianWidths(self) -> dict[int, str]:
		return self._eaWidths
	def width(self, cp: int, category: str) -> int:
		defaultWidth = 1

		# check the categories, which either override the default or are always zero-width (soft-hyphen is a spacing exception)
		if category == 'Mc':
			defaultWidth = 0
		elif category == 'Mn':
			return (1 if cp == WidthTable.SoftHyphen else 0)
		elif category in WidthTable.ZeroWidthCategories:
			return 0

		# lookup the east-asian-width class (ambiguous characters are treated as narrow)
		classWidth = WidthTable.ClassWidths.get(self._eaWidths.get(cp, ''))
		if classWidth is None:
			return defaultWidth
		return (WidthTable.AmbiguousWidth if classWidth < 0 else classWidth)

class PropertyDescriptor:
	def __init__(self, category: str, utf8Length: int, displayWidth: int, combiningClass: int, bidiClass: str,
			  decompositionKind: str, uppercase: int, lowercase: int, titlecase: int, bidiMirrored: bool) -> None:
		self._key = (category, utf8Length, displayWidth, combiningClass, bidiClass, decompositionKind, uppercase, lowercase, titlecase, bidiMirrored)
	def __eq__(self, other: object) -> bool:
		if not isinstance(other, PropertyDescriptor):
			return NotImplemented
		return self._key == other._key
	def __hash__(self) -> int:
		return hash(self._key)
	def __repr__(self) -> str:
		return f'PropertyDescriptor{self._key}'
	def key(self) -> tuple:
		return self._key
	@property
	def category(self) -> str:
		return self._key[0]
	@property
	def utf8Length(self) -> int:
		return self._key[1]
	@property
	def displayWidth(self) -> int:
		return self._key[2]
	@property
	def combiningClass(self) -> int:
		return self._key[3]
	@property
	def bidiClass(self) -> str:
		return self._key[4]
	@property
	def decompositionKind(self) -> str:
		return self._key[5]
	@property
	def uppercase(self) -> int:
		return self._key[6]
	@property
	def lowercase(self) -> int:
		return self._key[7]
	@property
	def titlecase(self) -> int:
		return self._key[8]
	@property
	def bidiMirrored(self) -> bool:
		return self._key[9]

def _Mapping(value: int|None) -> int:
	return (MappingAbsent if value is None else value)

class DescriptorBuilder:
	def __init__(self, data: EnrichedData, widths: WidthTable) -> None:
		self._data = data
		self._widths = widths
	def _fromRecord(self, cp: int, record: EnrichedRecord) -> PropertyDescriptor:
		base = record.record
		decomposition = ('NONE' if base.decomposition is None else base.decomposition.kind)
		return PropertyDescriptor(
			base.category, Utf8Length(cp), self._widths.width(cp, base.category),
			(0 if base.combiningClass is None else base.combiningClass), base.bidiClass.upper(), decomposition,
			_Mapping(record.uppercase), _Mapping(record.lowercase), _Mapping(record.titlecase), base.bidiMirrored
		)
	def _unassigned(self, cp: int) -> PropertyDescriptor:
		return PropertyDescriptor('Cn', Utf8Length(cp), 1, 0, 'NONE', 'NONE', MappingAbsent, MappingAbsent, MappingAbsent, False)
	def describe(self, cp: int) -> PropertyDescriptor:
		record = self._data.lookup(cp)
		if record is not None:
			return self._fromRecord(cp, record)
		return self._unassigned(cp)
	def outOfRange(self) -> PropertyDescriptor:
		# values beyond the codepoint range have no utf-8 encoding
		return self._unassigned(CodepointLast + 1)
	def describeAll(self, first: int = CodepointFirst, last: int = CodepointLast) -> list[PropertyDescriptor]:
		print(f'Describing [{first:06x}-{last:06x}]...')
		return [self.describe(cp) for cp in range(first, last + 1)]
