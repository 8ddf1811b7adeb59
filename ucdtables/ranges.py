# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
import bisect

# rules are lists of range-rule objects, which must be sorted and must not overlap each other
#	=> use RangeRules.wellFormed to validate a list of rules before emitting it
# rules map [first-last] to an output (integer or enum-label)
# invariant for rules: (first >= 0) and (first <= last) and (last <= 0x10ffff)

RuleOutput = int|str

class RangeRule:
	RangeFirst: int = 0
	RangeLast: int = 0x10ffff

	def __init__(self, first: int, last: int, output: RuleOutput) -> None:
		if first < RangeRule.RangeFirst or last > RangeRule.RangeLast or first > last:
			raise RuntimeError('Malformed range encountered')
		if type(output) not in (int, str):
			raise RuntimeError('Malformed output encountered')
		self._first = first
		self._last = last
		self._output = output
	def __str__(self) -> str:
		return f'[{self._first:05x}-{self._last:05x}/{self.span()}] -> {self._output}'
	def __repr__(self) -> str:
		return self.__str__()
	def __eq__(self, other: object) -> bool:
		if not isinstance(other, RangeRule):
			return NotImplemented
		return (self._first, self._last, self._output) == (other._first, other._last, other._output)
	def __hash__(self) -> int:
		return hash((self._first, self._last, self._output))
	@property
	def first(self) -> int:
		return self._first
	@property
	def last(self) -> int:
		return self._last
	@property
	def output(self) -> RuleOutput:
		return self._output
	def span(self) -> int:
		return (self._last - self._first + 1)
	def single(self) -> bool:
		return (self._first == self._last)
	def offset(self) -> int:
		if type(self._output) != int:
			raise RuntimeError(f'Offset undefined for non-integer output [{self._output}]')
		return self._output - self._first
	def extend(self, last: int) -> 'RangeRule':
		return RangeRule(self._first, last, self._output)
	def overlap(self, other: 'RangeRule') -> bool:
		return (self._last >= other._first and self._first <= other._last)
	def contains(self, cp: int) -> bool:
		return (self._first <= cp <= self._last)

class RangeRules:
	@staticmethod
	def wellFormed(rules: list[RangeRule]) -> None:
		for i in range(1, len(rules)):
			if rules[i - 1].first > rules[i].first:
				raise RuntimeError('Order of ranges violation encountered')
			if rules[i - 1].overlap(rules[i]):
				raise RuntimeError(f'Overlapping ranges encountered [{rules[i - 1]}] and [{rules[i]}]')
	@staticmethod
	def lookup(rules: list[RangeRule], cp: int) -> RangeRule|None:
		# binary search for the last rule starting at or before the codepoint (rules must be well formed)
		index = bisect.bisect_right(rules, cp, key=lambda r: r.first) - 1
		if index < 0 or not rules[index].contains(cp):
			return None
		return rules[index]
	@staticmethod
	def partition(rules: list[RangeRule]) -> tuple[list[RangeRule], list[RangeRule]]:
		singles: list[RangeRule] = []
		ranges: list[RangeRule] = []
		for r in rules:
			(singles if r.single() else ranges).append(r)
		return singles, ranges
	@staticmethod
	def groupByOutput(rules: list[RangeRule]) -> dict[RuleOutput, list[int]]:
		# group the inputs by their output, while keeping the first-seen order of the outputs and the order of the inputs
		out: dict[RuleOutput, list[int]] = {}
		for r in rules:
			if r.output not in out:
				out[r.output] = []
			out[r.output] += range(r.first, r.last + 1)
		return out
