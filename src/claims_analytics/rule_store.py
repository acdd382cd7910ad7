"""Read-only access to the active rejection rules and insurance providers."""

import logging
from typing import Protocol

from .config import RulesConfig, load_rules_config
from .default_rules import DEFAULT_REJECTION_RULES
from .schemas.rule import InsuranceProvider, RejectionRule

logger = logging.getLogger(__name__)


class RuleStore(Protocol):
    """Source of the rules an analysis run classifies against."""

    def active_global_rules(self) -> list[RejectionRule]: ...

    def active_provider_rules(self, provider_id: str) -> list[RejectionRule]: ...

    def all_active_rules(self) -> list[RejectionRule]: ...


class InMemoryRuleStore:
    """Rule store over in-memory global rules and provider definitions."""

    def __init__(
        self,
        rules: list[RejectionRule] | None = None,
        providers: list[InsuranceProvider] | None = None,
    ) -> None:
        self.rules = list(rules or [])
        # Provider rules are always scoped to their owning provider
        self.providers = {
            p.id: p.model_copy(
                update={
                    "specific_rules": [
                        r.model_copy(update={"provider_id": p.id, "provider_specific": True})
                        for r in p.specific_rules
                    ]
                }
            )
            for p in providers or []
        }

    def active_global_rules(self) -> list[RejectionRule]:
        return [r for r in self.rules if r.is_active and not r.provider_specific]

    def active_provider_rules(self, provider_id: str) -> list[RejectionRule]:
        provider = self.providers.get(provider_id)
        if provider is None:
            return []
        return [r for r in provider.specific_rules if r.is_active]

    def all_active_rules(self) -> list[RejectionRule]:
        """Global rules followed by every provider's rules, in provider order."""
        rules = self.active_global_rules()
        for provider_id in self.providers:
            rules.extend(self.active_provider_rules(provider_id))
        return rules


def build_rule_store(config: RulesConfig) -> InMemoryRuleStore:
    """Assemble a rule store from the built-in rules and configured overrides."""
    rules = list(DEFAULT_REJECTION_RULES) if config.include_defaults else []
    rules.extend(config.custom_rules)

    disabled = set(config.disabled_rule_ids)
    if disabled:
        rules = [
            r.model_copy(update={"is_active": False}) if r.id in disabled else r
            for r in rules
        ]

    logger.info(
        "Loaded %d rules (%d disabled) and %d providers",
        len(rules),
        len(disabled),
        len(config.providers),
    )
    return InMemoryRuleStore(rules=rules, providers=config.providers)


def get_rule_store() -> InMemoryRuleStore:
    """Rule store built from the configuration file."""
    return build_rule_store(load_rules_config())
