# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
from ucdtables.descriptor import PropertyDescriptor

# number of codepoints covered by a single page of the two-level lookup
PAGE_SIZE: int = 128

def Dedupe(values: list, key=lambda v: v) -> tuple[list, list[int]]:
	unique, indices, seen = [], [], {}

	# map each value to the index of its first occurrence in the unique list
	for value in values:
		k = key(value)
		index = seen.get(k)
		if index is None:
			index = len(unique)
			seen[k] = index
			unique.append(value)
		indices.append(index)
	return unique, indices

def Segment(values: list, size: int) -> list[tuple]:
	# the last segment is kept even if it is shorter than the others
	return [tuple(values[i:i + size]) for i in range(0, len(values), size)]

class PagedTable:
	def __init__(self, uniqueEntries: list[PropertyDescriptor], pages: list[tuple[int, ...]], pageIndices: list[int], pageSize: int, fallback: PropertyDescriptor|None = None) -> None:
		self._entries = uniqueEntries
		self._pages = pages
		self._pageIndices = pageIndices
		self._pageSize = pageSize
		self._fallback = fallback
		self._count = sum(len(pages[i]) for i in pageIndices)
	@staticmethod
	def build(descriptors: list[PropertyDescriptor], pageSize: int = PAGE_SIZE, fallback: PropertyDescriptor|None = None) -> 'PagedTable':
		if pageSize <= 0:
			raise RuntimeError(f'Invalid page size [{pageSize}]')
		print(f'Compressing [{len(descriptors)}] descriptors...')

		# deduplicate the descriptors and afterwards the pages of the descriptor-indices
		uniqueEntries, indices = Dedupe(descriptors, lambda d: d.key())
		pages, pageIndices = Dedupe(Segment(indices, pageSize))
		print(f'Compressed to [{len(uniqueEntries)}] entries and [{len(pages)}/{len(pageIndices)}] pages')
		return PagedTable(uniqueEntries, pages, pageIndices, pageSize, fallback)
	@property
	def uniqueEntries(self) -> list[PropertyDescriptor]:
		return self._entries
	@property
	def pages(self) -> list[tuple[int, ...]]:
		return self._pages
	@property
	def pageIndices(self) -> list[int]:
		return self._pageIndices
	@property
	def pageSize(self) -> int:
		return self._pageSize
	@property
	def fallback(self) -> PropertyDescriptor|None:
		return self._fallback
	@property
	def pageOffsets(self) -> list[int]:
		return [i * self._pageSize for i in self._pageIndices]
	@property
	def indices(self) -> list[int]:
		return [index for page in self._pages for index in page]
	@property
	def codepointCount(self) -> int:
		return self._count
	def lookup(self, cp: int) -> PropertyDescriptor:
		# codepoints outside of the table resolve to the fallback entry, which is not part of any page
		if cp < 0 or cp >= self._count:
			if self._fallback is None:
				raise RuntimeError(f'Codepoint [{cp:#07x}] out of range')
			return self._fallback
		page = self._pages[self._pageIndices[cp // self._pageSize]]
		return self._entries[page[cp % self._pageSize]]
	def verify(self, descriptors: list[PropertyDescriptor]) -> None:
		for cp in range(len(descriptors)):
			if self.lookup(cp) != descriptors[cp]:
				raise RuntimeError(f'Descriptor mismatch at [{cp:#07x}]')
