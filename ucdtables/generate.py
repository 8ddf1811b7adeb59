# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
import os
import sys
from ucdtables.codegen import LookupType, StrHelp, SystemConfig, GeneratedFile
from ucdtables.descriptor import PropertyDescriptor
from ucdtables.download import DownloadUCDFiles, LoadUCDFiles, UNICODE_BASE_URL, UNICODE_VERSION
from ucdtables.pipeline import UnicodeCompiler, CategoryValues, CategoryComments, BidiClassValues, DecompositionValues, GraphemeValues

PropertyFileName = 'sfce_utf8_properties.c'
FunctionsFileName = 'sfce_utf8.c'

def _CategoryEnum() -> LookupType:
	return LookupType.enumType('sfce_unicode_category', 'SFCE_UNICODE_CATEGORY_', 'cn', CategoryValues)

def _GraphemeEnum() -> LookupType:
	return LookupType.enumType('sfce_grapheme_break', 'SFCE_GRAPHEME_BREAK_', 'other', GraphemeValues)

# generate the enums, the property-struct and the paged property-lookup
def MakePropertyTable(outPath: str, config: SystemConfig) -> None:
	compiler = UnicodeCompiler(LoadUCDFiles(config.mapping))
	table = compiler.pagedTable()

	with GeneratedFile(outPath, config) as file:
		categoryEnum = _CategoryEnum()
		_gen = file.next('Category', 'Automatically generated from: Unicode General_Category')
		_gen.addEnum(categoryEnum, CategoryComments)

		bidiEnum = LookupType.enumType('sfce_unicode_bidi_class', 'SFCE_UNICODE_BIDI_CLASS_', 'none', BidiClassValues)
		_gen = file.next('BidiClass', 'Automatically generated from: Unicode Bidi_Class')
		_gen.addEnum(bidiEnum)

		decompositionEnum = LookupType.enumType('sfce_unicode_decomposition', 'SFCE_UNICODE_DECOMPOSITION_', 'none', DecompositionValues)
		_gen = file.next('Decomposition', 'Automatically generated from: Unicode Decomposition_Type')
		_gen.addEnum(decompositionEnum)

		def renderEntry(d: PropertyDescriptor) -> str:
			return ', '.join([
				categoryEnum.staticLookup(d.category.lower()), str(d.combiningClass),
				bidiEnum.staticLookup(d.bidiClass.lower()), decompositionEnum.staticLookup(d.decompositionKind.lower()),
				StrHelp.value(d.uppercase), StrHelp.value(d.lowercase), StrHelp.value(d.titlecase),
				str(d.displayWidth), str(d.utf8Length), str(int(d.bidiMirrored))
			])

		# write the property-struct and the paged table of all codepoints
		_gen = file.next('Property', f'Automatically generated from: UnicodeData, DerivedCoreProperties, EastAsianWidth (paged with [{table.pageSize}] codepoints per page)')
		_gen.addStruct('sfce_utf8_property', [
			(categoryEnum.typeName(), 'category'),
			('uint8_t', 'combining_class'),
			(bidiEnum.typeName(), 'bidi_class'),
			(decompositionEnum.typeName(), 'decomposition'),
			('int32_t', 'uppercase'),
			('int32_t', 'lowercase'),
			('int32_t', 'titlecase'),
			('int8_t', 'width'),
			('uint8_t', 'length'),
			('uint8_t', 'bidi_mirrored')
		])
		_gen.pagedTable('sfce_codepoint_property', 'sfce_utf8_property', table, renderEntry)

# generate the case-mappings and the classification functions
def MakeCodepointFunctions(outPath: str, config: SystemConfig) -> None:
	compiler = UnicodeCompiler(LoadUCDFiles(config.mapping))

	with GeneratedFile(outPath, config) as file:
		categoryEnum = _CategoryEnum()
		_gen = file.next('Category', 'Automatically generated from: Unicode General_Category')
		_gen.addEnum(categoryEnum, CategoryComments)

		graphemeEnum = _GraphemeEnum()
		_gen = file.next('GraphemeBreak', 'Automatically generated from: Unicode Grapheme_Cluster_Break and Extended_Pictographic')
		_gen.addEnum(graphemeEnum)

		# write the simple case-mappings to the file (unmapped codepoints map to themselves)
		_gen = file.next('Uppercase', 'Automatically generated from: Unicode Simple_Uppercase_Mapping')
		_gen.mapFunction('sfce_codepoint_to_upper', LookupType.codepointType(), compiler.uppercaseMapping())
		_gen = file.next('Lowercase', 'Automatically generated from: Unicode Simple_Lowercase_Mapping')
		_gen.mapFunction('sfce_codepoint_to_lower', LookupType.codepointType(), compiler.lowercaseMapping())
		_gen = file.next('Titlecase', 'Automatically generated from: Unicode Simple_Titlecase_Mapping (defaulting to the uppercase-mapping)')
		_gen.mapFunction('sfce_codepoint_to_title', LookupType.codepointType(), compiler.titlecaseMapping())
		_gen = file.next('Folding', 'Automatically generated from: Unicode Simple_Case_Folding (status C and S)')
		_gen.mapFunction('sfce_codepoint_fold', LookupType.codepointType(), compiler.foldingMapping())

		# write the classification functions to the file
		_gen = file.next('CategoryLookup', 'Automatically generated from: Unicode General_Category')
		_gen.mapFunction('sfce_codepoint_category', categoryEnum, compiler.categoryMapping())
		_gen = file.next('Width', 'Automatically generated from: Unicode General_Category and East_Asian_Width (ambiguous as narrow)')
		_gen.mapFunction('sfce_codepoint_width', LookupType.intType(1, 'int8_t'), compiler.widthMapping())
		_gen = file.next('GraphemeBreakLookup', 'Automatically generated from: Unicode Grapheme_Cluster_Break and Extended_Pictographic')
		_gen.mapFunction('sfce_codepoint_grapheme_break', graphemeEnum, compiler.graphemeMapping())
		_gen = file.next('CompositionExclusion', 'Automatically generated from: Unicode CompositionExclusions')
		_gen.mapFunction('sfce_codepoint_is_composition_excluded', LookupType.intType(0, 'uint8_t'), compiler.exclusionMapping())

def main(argv: list[str]|None = None) -> None:
	argv = (sys.argv[1:] if argv is None else argv)
	doRefresh: bool = ('--refresh' in argv)
	doProperty: bool = ('--property' in argv)
	doFunctions: bool = ('--functions' in argv)
	print('Hint: use --refresh to download already cached files again')
	print('Hint: use --property to generate the property-table')
	print('Hint: use --functions to generate the codepoint-functions')

	# validate the arguments and extract the output directory
	outDirs = []
	for arg in argv:
		if arg.startswith('--') and arg not in ('--refresh', '--property', '--functions'):
			raise RuntimeError(f'Unknown argument [{arg}] encountered')
		if not arg.startswith('--'):
			outDirs.append(arg)
	if len(outDirs) > 1:
		raise RuntimeError(f'Only one output directory expected {outDirs}')
	outDir = (outDirs[0] if len(outDirs) > 0 else '.')

	# generate both files if none has been selected explicitly
	if not doProperty and not doFunctions:
		doProperty, doFunctions = True, True

	# check if the files need to be downloaded
	mapping = DownloadUCDFiles(doRefresh)
	systemConfig = SystemConfig(UNICODE_BASE_URL, UNICODE_VERSION, mapping, outDir)
	if not os.path.isdir(systemConfig.outDir):
		os.makedirs(systemConfig.outDir)

	# generate the actual files
	if doProperty:
		MakePropertyTable(os.path.join(systemConfig.outDir, PropertyFileName), systemConfig)
	if doFunctions:
		MakeCodepointFunctions(os.path.join(systemConfig.outDir, FunctionsFileName), systemConfig)
