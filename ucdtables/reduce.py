# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
from ucdtables.ranges import RangeRule, RangeRules, RuleOutput

# merge policies of the range-reduction
#	offset: output increases in lock-step with the input (emitted as [cp + offset])
#	fixed: all inputs of a range map to the identical output (emitted as constant)
PolicyOffset = 'offset'
PolicyFixed = 'fixed'

class ReducedMapping:
	def __init__(self, policy: str, default: RuleOutput, rules: list[RangeRule]) -> None:
		if policy not in (PolicyOffset, PolicyFixed):
			raise RuntimeError(f'Unknown merge policy [{policy}] encountered')
		RangeRules.wellFormed(rules)
		self._policy = policy
		self._default = default
		self._rules = rules
		self._singles, self._ranges = RangeRules.partition(rules)
	@property
	def policy(self) -> str:
		return self._policy
	@property
	def default(self) -> RuleOutput:
		return self._default
	@property
	def rules(self) -> list[RangeRule]:
		return self._rules
	@property
	def ranges(self) -> list[RangeRule]:
		return self._ranges
	@property
	def singles(self) -> list[RangeRule]:
		return self._singles
	def groups(self) -> dict[RuleOutput, list[int]]:
		return RangeRules.groupByOutput(self._singles)
	def evaluate(self, cp: int) -> RuleOutput:
		rule = RangeRules.lookup(self._rules, cp)

		# check if no rule matches, in which case the default applies (identity for offset-mappings)
		if rule is None:
			return (cp if self._policy == PolicyOffset else self._default)
		if self._policy == PolicyOffset and not rule.single():
			return cp + rule.offset()
		return rule.output

def _IsDefault(policy: str, default: RuleOutput, cp: int, output: RuleOutput) -> bool:
	if policy == PolicyOffset:
		return output == cp
	return output == default

def _Extends(policy: str, rule: RangeRule, cp: int, output: RuleOutput) -> bool:
	if rule.last + 1 != cp:
		return False
	if policy == PolicyFixed:
		return output == rule.output
	return (output - cp) == rule.offset()

def ReduceMappings(facts: list[tuple[int, RuleOutput]], policy: str, default: RuleOutput = 0) -> ReducedMapping:
	# sort the facts by their input (stable, to not reorder equal outputs) and validate the uniqueness of the inputs
	facts = sorted(facts, key=lambda f: f[0])
	for i in range(1, len(facts)):
		if facts[i - 1][0] == facts[i][0]:
			raise RuntimeError(f'Duplicate mapping for [{facts[i][0]:05x}] encountered')

	# merge the facts into the rules (facts equal to the default are covered by the default-return)
	rules: list[RangeRule] = []
	for cp, output in facts:
		if _IsDefault(policy, default, cp, output):
			continue
		if len(rules) > 0 and _Extends(policy, rules[-1], cp, output):
			rules[-1] = rules[-1].extend(cp)
		else:
			rules.append(RangeRule(cp, cp, output))
	return ReducedMapping(policy, default, rules)
