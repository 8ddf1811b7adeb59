# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
from ucdtables.derived import DerivedSets, EnrichedData
from ucdtables.descriptor import DescriptorBuilder, PropertyDescriptor, WidthTable, CodepointFirst, CodepointLast
from ucdtables.paged import PagedTable, PAGE_SIZE
from ucdtables.parse import ReadUnicodeData, ReadHexRanges, ReadCaseFolding, ReadCodepoints, ExpandRanges, SimpleFolding
from ucdtables.reduce import ReduceMappings, ReducedMapping, PolicyOffset, PolicyFixed

# general categories (https://www.unicode.org/reports/tr44/#GC_Values_Table)
CategoryValues: list[str] = [
	'cn', 'cc', 'cf', 'co', 'cs', 'll', 'lm', 'lo', 'lt', 'lu', 'mc', 'me', 'mn', 'nd', 'nl',
	'no', 'pc', 'pd', 'pe', 'pf', 'pi', 'po', 'ps', 'sc', 'sk', 'sm', 'so', 'zl', 'zp', 'zs'
]
CategoryComments: dict[str, str] = {
	'cn': 'Other, not assigned', 'cc': 'Control', 'cf': 'Format', 'co': 'Private Use', 'cs': 'Surrogate',
	'll': 'Lowercase Letter', 'lm': 'Modifier Letter', 'lo': 'Other Letter', 'lt': 'Titlecase Letter', 'lu': 'Uppercase Letter',
	'mc': 'Spacing Mark', 'me': 'Enclosing Mark', 'mn': 'Nonspacing Mark', 'nd': 'Decimal Number', 'nl': 'Letter Number',
	'no': 'Other Number', 'pc': 'Connector Punctuation', 'pd': 'Dash Punctuation', 'pe': 'Close Punctuation', 'pf': 'Final Punctuation',
	'pi': 'Initial Punctuation', 'po': 'Other Punctuation', 'ps': 'Open Punctuation', 'sc': 'Currency Symbol', 'sk': 'Modifier Symbol',
	'sm': 'Math Symbol', 'so': 'Other Symbol', 'zl': 'Line Separator', 'zp': 'Paragraph Separator', 'zs': 'Space Separator'
}

# bidirectional classes (https://www.unicode.org/reports/tr44/#Bidi_Class_Values)
BidiClassValues: list[str] = [
	'none', 'l', 'r', 'al', 'en', 'es', 'et', 'an', 'cs', 'nsm', 'bn', 'b', 's', 'ws',
	'on', 'lre', 'lro', 'rle', 'rlo', 'pdf', 'lri', 'rli', 'fsi', 'pdi'
]

# decomposition kinds (https://www.unicode.org/reports/tr44/#Formatting_Tags_Table)
DecompositionValues: list[str] = [
	'none', 'canonical', 'font', 'nobreak', 'initial', 'medial', 'final', 'isolated', 'circle',
	'super', 'sub', 'vertical', 'wide', 'narrow', 'small', 'square', 'fraction', 'compat'
]

# grapheme-break classes (https://www.unicode.org/reports/tr29/#Grapheme_Cluster_Break_Property_Values)
GraphemeValues: list[str] = [
	'other', 'prepend', 'cr', 'lf', 'control', 'extend', 'regional_indicator', 'spacingmark',
	'l', 'v', 't', 'lv', 'lvt', 'zwj', 'extended_pictographic'
]

SourceNames: tuple[str, ...] = ('UnicodeData', 'DerivedCoreProperties', 'EastAsianWidth', 'GraphemeBreakProperty', 'EmojiData', 'CompositionExclusions', 'CaseFolding')

class UnicodeCompiler:
	def __init__(self, sources: dict[str, str], pageSize: int = PAGE_SIZE) -> None:
		if 'UnicodeData' not in sources:
			raise RuntimeError('Source [UnicodeData] is required for the compilation')
		for name in sources:
			if name not in SourceNames:
				raise RuntimeError(f'Unknown source [{name}] encountered')
		self._sources = { name: sources.get(name, '') for name in SourceNames }
		self._pageSize = pageSize

		# phase one: parse all sources and fully build the derived sets
		print('Parsing [UnicodeData]...')
		data = ReadUnicodeData(self._sources['UnicodeData'])
		print('Parsing [DerivedCoreProperties]...')
		derived = DerivedSets.build(ReadHexRanges(self._sources['DerivedCoreProperties']))
		print('Parsing [EastAsianWidth]...')
		self._widths = WidthTable(ExpandRanges(ReadHexRanges(self._sources['EastAsianWidth']), lambda l: l if l != '' else None))

		# phase two: enrich the parsed records with the derived case-mappings
		self._data = EnrichedData(data, derived)
		self._builder = DescriptorBuilder(self._data, self._widths)
	@property
	def data(self) -> EnrichedData:
		return self._data
	@property
	def pageSize(self) -> int:
		return self._pageSize

	def _records(self):
		for cp in self._data.codepoints():
			yield cp, self._data.lookup(cp)
	def describeAll(self, first: int = CodepointFirst, last: int = CodepointLast) -> list[PropertyDescriptor]:
		return self._builder.describeAll(first, last)
	def pagedTable(self, descriptors: list[PropertyDescriptor]|None = None) -> PagedTable:
		if descriptors is None:
			descriptors = self.describeAll()
		table = PagedTable.build(descriptors, self._pageSize, self._builder.outOfRange())
		table.verify(descriptors)
		return table

	def uppercaseMapping(self) -> ReducedMapping:
		return ReduceMappings([(cp, r.uppercase) for cp, r in self._records() if r.uppercase is not None], PolicyOffset)
	def lowercaseMapping(self) -> ReducedMapping:
		return ReduceMappings([(cp, r.lowercase) for cp, r in self._records() if r.lowercase is not None], PolicyOffset)
	def titlecaseMapping(self) -> ReducedMapping:
		return ReduceMappings([(cp, r.titlecase) for cp, r in self._records() if r.titlecase is not None], PolicyOffset)
	def foldingMapping(self) -> ReducedMapping:
		print('Parsing [CaseFolding]...')
		folding = SimpleFolding(ReadCaseFolding(self._sources['CaseFolding']))
		return ReduceMappings(list(folding.items()), PolicyOffset)
	def categoryMapping(self) -> ReducedMapping:
		facts = []
		for cp, record in self._records():
			category = record.category.lower()
			if category not in CategoryValues:
				raise RuntimeError(f'Unknown category [{record.category}] at [{cp:06x}]')
			facts.append((cp, category))
		return ReduceMappings(facts, PolicyFixed, 'cn')
	def widthMapping(self) -> ReducedMapping:
		return ReduceMappings([(cp, self._widths.width(cp, r.category)) for cp, r in self._records()], PolicyFixed, 1)
	def graphemeClasses(self) -> dict[int, str]:
		print('Parsing [GraphemeBreakProperty]...')
		classes = ExpandRanges(ReadHexRanges(self._sources['GraphemeBreakProperty']), lambda l: l.lower() if l != '' else None)

		# overlay the extended-pictographic property of the emoji-data (the other emoji properties are irrelevant for graphemes)
		print('Parsing [EmojiData]...')
		classes.update(ExpandRanges(ReadHexRanges(self._sources['EmojiData']), lambda l: 'extended_pictographic' if l == 'Extended_Pictographic' else None))
		for cp, value in classes.items():
			if value not in GraphemeValues:
				raise RuntimeError(f'Unknown grapheme class [{value}] at [{cp:06x}]')
		return classes
	def graphemeMapping(self) -> ReducedMapping:
		return ReduceMappings(list(self.graphemeClasses().items()), PolicyFixed, 'other')
	def exclusionMapping(self) -> ReducedMapping:
		print('Parsing [CompositionExclusions]...')
		excluded = { cp: 1 for cp in ReadCodepoints(self._sources['CompositionExclusions']) }
		return ReduceMappings(list(excluded.items()), PolicyFixed, 0)
