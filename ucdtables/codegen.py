# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
from ucdtables.paged import PagedTable
from ucdtables.ranges import RuleOutput
from ucdtables.reduce import PolicyOffset, ReducedMapping

class LookupType:
	def __init__(self) -> None:
		self._kind = ''
		self._typeName = ''
		self._prefix = ''
		self._values = []
		self._default = 0
	@staticmethod
	def intType(defValue: int, intType: str) -> 'LookupType':
		out = LookupType()
		out._kind = 'int'
		out._typeName = intType
		out._default = defValue
		return out
	@staticmethod
	def codepointType() -> 'LookupType':
		out = LookupType.intType(0, 'int32_t')
		out._kind = 'codepoint'
		return out
	@staticmethod
	def listType(defValue: int, intList: list[int]) -> 'LookupType':
		smallest, largest = (min(intList), max(intList)) if len(intList) > 0 else (0, 0)

		# pick the smallest integer type covering all values
		for i in [8, 16, 32]:
			if smallest >= 0 and largest <= 2**i - 1:
				return LookupType.intType(defValue, f'uint{i}_t')
			elif smallest >= -2**(i - 1) and largest <= 2**(i - 1) - 1:
				return LookupType.intType(defValue, f'int{i}_t')
		raise RuntimeError('No datatype suitable for buffer found')
	@staticmethod
	def enumType(name: str, prefix: str, defValue: str, values: list[str]) -> 'LookupType':
		out = LookupType()
		out._kind = 'enum'
		out._typeName = f'enum {name}'
		out._prefix = prefix
		out._values = values
		if len(out._values) == 0:
			raise RuntimeError(f'Enum [{name}] must not be empty')
		if defValue not in values:
			raise RuntimeError(f'Default value [{defValue}] is not part of enum [{name}]')
		out._default = defValue
		return out

	def typeName(self) -> str:
		return self._typeName
	def defValue(self) -> RuleOutput:
		return self._default
	def staticLookup(self, value: RuleOutput) -> str:
		if self._kind == 'int':
			return str(value)
		if self._kind == 'codepoint':
			return StrHelp.value(value)
		if self._kind == 'enum':
			if value not in self._values:
				raise RuntimeError(f'Unknown enum value [{value}] for [{self._typeName}]')
			return f'{self._prefix}{value.upper()}'
		raise RuntimeError(f'Unknown kind [{self._kind}] encountered')
	def enumValues(self) -> list[str]:
		if self._kind == 'enum':
			return self._values
		raise RuntimeError(f'Function undefined for [{self._kind}]')

class StrHelp:
	LineWidth: int = 80

	@staticmethod
	def value(val: int) -> str:
		if val < 0:
			return str(val)
		return f'{val:#06x}'
	@staticmethod
	def indent(string: str, level: int = 1) -> str:
		# only indent the non-empty lines
		return ''.join(('\t' * level + line if line.strip() != '' else line) for line in string.splitlines(True))
	@staticmethod
	def wrap(items: list[str], prefix: str, separator: str = ' ') -> list[str]:
		lines, line = [], prefix
		for item in items:
			if line != prefix and len(line) + len(separator) + len(item) > StrHelp.LineWidth:
				lines.append(line)
				line = prefix
			line += (separator if line != prefix else '') + item
		if line != prefix:
			lines.append(line)
		return lines

class SystemConfig:
	def __init__(self, url: str, version: str, mapping: dict[str, str], outDir: str) -> None:
		self._url = url
		self._version = version
		self._mapping = mapping
		self._outDir = outDir
	@property
	def url(self) -> str:
		return self._url
	@property
	def version(self) -> str:
		return self._version
	@property
	def mapping(self) -> dict[str, str]:
		return self._mapping
	@property
	def outDir(self) -> str:
		return self._outDir

class GeneratedFile:
	def __init__(self, path: str, config: SystemConfig) -> None:
		self._path = path
		self._config = config
		self._chunks: list[str]|None = None
		self._atStartOfLine = True
	def __enter__(self) -> 'GeneratedFile':
		self._chunks = []
		self._atStartOfLine = True

		# write the file header (without a timestamp, the output only depends on the input)
		self._writeComment('This is an automatically generated file and should not be modified.\n'
				  + 'All data are based on the information provided by the unicode character database.\n'
				  + f'Source URL: {self._config.url}\n'
				  + f'Generated from version: {self._config.version}', False)
		self.writeln('')
		self.writeln('#include <stdint.h>')
		return self
	def __exit__(self, excType, *args) -> bool:
		# only write the file out if the entire generation succeeded
		if self._chunks is not None and excType is None:
			print(f'Writing [{self._path}]...')
			with open(self._path, mode='w', encoding='ascii', newline='\n') as file:
				file.write(self.content())
		self._chunks = None
		return False
	def _writeComment(self, msg: str, blockHeader: bool) -> None:
		msg = msg.replace('\n', '\n*\t')
		if blockHeader:
			self._chunks.append(f'/* {msg} */\n')
		else:
			self._chunks.append(f'/*\n*\t{msg}\n*/\n')
	def content(self) -> str:
		return ''.join(self._chunks)
	def beginBlock(self, msg: str) -> None:
		# ensure an indentation of one empty line to the last block
		if not self._atStartOfLine:
			self._chunks.append('\n')
		self._chunks.append('\n')
		self._writeComment(msg, True)
		self._atStartOfLine = True
	def write(self, msg: str) -> None:
		if len(msg) == 0:
			return
		self._chunks.append(msg)
		self._atStartOfLine = (msg[-1] == '\n')
	def writeln(self, msg: str) -> None:
		self.write(f'{msg}\n')
	def next(self, blockName: str, desc: str) -> 'CodeGen':
		return CodeGen(self, blockName, desc)

class CodeGen:
	def __init__(self, file: GeneratedFile, blockName: str, desc: str) -> None:
		self._file = file
		self._file.beginBlock(desc)
		self._blockName = blockName

	def _buffer(self, name: str, data: list[int]) -> None:
		tp = LookupType.listType(0, data)

		# print the values as hex, if more than a quarter of them exceed a byte
		printAsHex = (sum(1 for d in data if d >= 256) * 4 > len(data))

		# balance the values per line to get evenly filled rows
		valsPerLine = 12 if printAsHex else 16
		estimatedLines = max(1, (len(data) + valsPerLine - 1) // valsPerLine)
		valsPerLine = max(1, (len(data) + estimatedLines - 1) // estimatedLines)

		# write the declaration and the values out
		self._file.write(f'static const {tp.typeName()} {name}[{len(data)}] = {{\n\t')
		for i in range(len(data)):
			if i > 0:
				self._file.write(',' + ('\n\t' if (i % valsPerLine) == 0 else ''))
			self._file.write(f' {data[i]:#06x}' if printAsHex else f'{data[i]:4}')
		self._file.writeln('\n};')
	def _returnValue(self, tp: LookupType, output: RuleOutput) -> str:
		return f'return {tp.staticLookup(output)};'
	def _rangeReturn(self, tp: LookupType, reduced: ReducedMapping, rule) -> str:
		if reduced.policy != PolicyOffset:
			return self._returnValue(tp, rule.output)

		# offset-preserving ranges compute the output relative to the input
		offset = rule.offset()
		if offset > 0:
			return f'return codepoint + {offset};'
		if offset < 0:
			return f'return codepoint - {-offset};'
		return 'return codepoint;'

	def addEnum(self, enum: LookupType, comments: dict[str, str]|None = None) -> None:
		self._file.writeln(f'{enum.typeName()} {{')
		for i, value in enumerate(enum.enumValues()):
			line = f'\t{enum.staticLookup(value)} = {i},'
			if comments is not None and value in comments:
				line += f' // {comments[value]}'
			self._file.writeln(line)
		self._file.writeln('};')
	def addStruct(self, name: str, fields: list[tuple[str, str]]) -> None:
		self._file.writeln(f'struct {name} {{')
		for fieldType, fieldName in fields:
			self._file.writeln(f'\t{fieldType} {fieldName};')
		self._file.writeln('};')
	def pagedTable(self, fnName: str, structName: str, table: PagedTable, renderEntry) -> None:
		print(f'Creating paged-lookup {fnName}...')
		if table.fallback is None:
			raise RuntimeError(f'Paged table of [{fnName}] has no fallback entry')

		# write the fallback entry for out-of-range codepoints and the unique entries out (one struct initializer per line)
		fallbackName, entryName = f'{self._blockName}Fallback', f'{self._blockName}Entries'
		self._file.writeln(f'static const struct {structName} {fallbackName} = {{ {renderEntry(table.fallback)} }};')
		self._file.writeln(f'static const struct {structName} {entryName}[{len(table.uniqueEntries)}] = {{')
		for entry in table.uniqueEntries:
			self._file.writeln(f'\t{{ {renderEntry(entry)} }},')
		self._file.writeln('};')

		# write the flattened pages and the page offsets out
		indexName, offsetName = f'{self._blockName}Indices', f'{self._blockName}PageOffsets'
		self._buffer(indexName, table.indices)
		self._buffer(offsetName, table.pageOffsets)

		# generate the actual lookup function
		limit = table.codepointCount
		self._file.writeln(f'const struct {structName}* {fnName}(int32_t codepoint) {{')
		self._file.writeln(f'\tif (codepoint < 0 || codepoint >= {StrHelp.value(limit)})')
		self._file.writeln(f'\t\treturn &{fallbackName};')
		self._file.writeln(f'\treturn &{entryName}[{indexName}[{offsetName}[codepoint / {table.pageSize}] + codepoint % {table.pageSize}]];')
		self._file.writeln('}')
	def mapFunction(self, fnName: str, tp: LookupType, reduced: ReducedMapping) -> None:
		print(f'Creating mapping-lookup {fnName}...')
		if reduced.policy != PolicyOffset and reduced.default != tp.defValue():
			raise RuntimeError(f'Default [{reduced.default}] of [{fnName}] does not match the type-default [{tp.defValue()}]')
		code = ''

		# write the singletons out as switch, sharing the return-statement for identical outputs
		groups = reduced.groups()
		if len(groups) > 0:
			code += 'switch (codepoint) {\n'
			for output, inputs in groups.items():
				cases = [f'case {StrHelp.value(cp)}:' for cp in inputs]
				if len(cases) == 1:
					code += f'{cases[0]} {self._returnValue(tp, output)}\n'
					continue
				code += '\n'.join(StrHelp.wrap(cases, '')) + '\n'
				code += StrHelp.indent(self._returnValue(tp, output) + '\n')
			code += '}\n'

		# write the ranges out as independent guards
		for rule in reduced.ranges:
			code += f'if (codepoint >= {StrHelp.value(rule.first)} && codepoint <= {StrHelp.value(rule.last)})\n'
			code += StrHelp.indent(self._rangeReturn(tp, reduced, rule) + '\n')

		# add the default-return
		if reduced.policy == PolicyOffset:
			code += 'return codepoint;\n'
		else:
			code += self._returnValue(tp, reduced.default) + '\n'

		# wrap the code into the function body
		self._file.writeln(f'{tp.typeName()} {fnName}(int32_t codepoint) {{')
		self._file.write(StrHelp.indent(code))
		self._file.writeln('}')
